"""Input discovery helpers for the QFX reader."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from collections.abc import Iterable, Iterator
    from pathlib import Path

SUPPORTED_SUFFIXES: frozenset[str] = frozenset({'.ofx', '.qfx'})
"""File suffixes treated as OFX/QFX documents."""


def is_supported(path: Path) -> bool:
    """Return ``True`` if ``path`` has an OFX/QFX suffix."""

    return path.suffix.lower() in SUPPORTED_SUFFIXES


def iter_sources(target: Path) -> Iterator[Path]:
    """Yield the OFX/QFX files designated by ``target`` (file or directory)."""

    expanded = target.expanduser()
    if expanded.is_file():
        if not is_supported(expanded):
            raise ValueError(f'Unsupported input format: {expanded.suffix}')
        yield expanded
        return

    if not expanded.is_dir():
        raise FileNotFoundError(f'Input path not found: {expanded}')

    for entry in sorted(expanded.iterdir()):
        if entry.is_file() and is_supported(entry):
            yield entry


def gather_sources(paths: Iterable[Path]) -> list[Path]:
    """Collect the OFX/QFX files for all provided ``paths``."""

    sources: list[Path] = []
    for path in paths:
        sources.extend(iter_sources(path))
    return sources
