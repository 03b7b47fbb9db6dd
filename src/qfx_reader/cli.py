"""Command-line interface for the QFX reader."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from qfx_reader import __version__ as pkg_version
from qfx_reader.config import OUTPUT_FORMATS, load_settings
from qfx_reader.detect import gather_sources
from qfx_reader.document import parse_file
from qfx_reader.errors import QfxParseError
from qfx_reader.output import build_csv_payload, build_json_payload, write_output

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from qfx_reader.models import QfxDocument

LOGGER = logging.getLogger('qfx_reader.cli')
if not LOGGER.handlers:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    LOGGER.addHandler(handler)
LOGGER.setLevel(logging.INFO)
LOGGER.propagate = False


def _emit(message: str, args: argparse.Namespace, *, verbose_only: bool = False, error: bool = False) -> None:
    """Log ``message`` honoring ``--quiet``/``--verbose`` flags."""

    if verbose_only and not args.verbose:
        return
    if args.quiet and not error:
        return
    level = logging.ERROR if error else logging.INFO
    LOGGER.log(level, message)


def _summary(path: Path, document: QfxDocument) -> str:
    statements = len(document.credit_card_statements)
    count = len(document.transactions())
    return f'{path.name}: {statements} statement(s), {count} transactions'


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Extract headers, sign-on and statements from QFX/OFX files')
    parser.add_argument('targets', nargs='+', type=Path, help='Input files or directories')
    parser.add_argument('-c', '--config', type=Path, help='Path to configuration TOML')
    parser.add_argument('-f', '--format', choices=OUTPUT_FORMATS, help='Output format (default from config: json)')
    parser.add_argument('-o', '--output', type=Path, help='Write output to this file instead of stdout')
    parser.add_argument('--encoding', help='Text codec used to decode input files')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {pkg_version}')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Suppress informational output')
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Print verbose progress details')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.config)
    encoding = args.encoding or settings.encoding
    output_format = args.format or settings.output_format
    sources = gather_sources(args.targets)

    documents: list[QfxDocument] = []
    failures = 0
    for path in sources:
        _emit(f'Reading {path}', args, verbose_only=True)
        try:
            document = parse_file(path, encoding=encoding)
        except (QfxParseError, OSError) as exc:
            _emit(f'Error processing {path}: {exc}', args, error=True)
            failures += 1
            continue
        documents.append(document)
        _emit(_summary(path, document), args)

    if output_format == 'csv':
        payload = build_csv_payload(documents)
    else:
        payload = build_json_payload(documents, indent=settings.json_indent)

    if args.output:
        write_output(payload, output_path=args.output)
        _emit(f'Wrote {args.output}', args, verbose_only=True)
    else:
        sys.stdout.write(payload)
    return 1 if failures else 0


if __name__ == '__main__':  # pragma: no cover
    raise SystemExit(main())
