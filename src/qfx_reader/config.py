"""Configuration utilities and dataclasses for the QFX reader."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from qfx_reader.document import DEFAULT_ENCODING

DEFAULT_CONFIG_PATH: Path = Path.home() / '.config/qfx_reader.toml'
"""Default location for the optional user provided TOML configuration file."""

OUTPUT_FORMATS: tuple[str, ...] = ('json', 'csv')
"""Output formats understood by ``qfx_reader.output``."""

BASE_SETTINGS: dict[str, Any] = {
    'encoding': DEFAULT_ENCODING,
    'output_format': 'json',
    'json_indent': 2,
}
"""Default settings merged with any local overrides."""


@dataclass(frozen=True, slots=True)
class ReaderSettings:
    """Structured settings for reading files and rendering output."""

    encoding: str
    output_format: str
    json_indent: int


def _prepare_settings(raw: Mapping[str, Any]) -> ReaderSettings:
    """Convert a raw dictionary into ``ReaderSettings`` with proper types."""

    output_format = str(raw.get('output_format', 'json')).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f'Unsupported output_format: {output_format!r} (expected one of {", ".join(OUTPUT_FORMATS)})')
    return ReaderSettings(
        encoding=str(raw.get('encoding', DEFAULT_ENCODING)),
        output_format=output_format,
        json_indent=int(raw.get('json_indent', 2)),
    )


def load_settings(path: Path | None = None) -> ReaderSettings:
    """Load ``ReaderSettings`` from ``path``, the default file, or built-in defaults.

    An explicit ``path`` must exist. Without one, ``DEFAULT_CONFIG_PATH`` is read
    when present and ``BASE_SETTINGS`` are used otherwise.
    """

    if path is None:
        config_path = DEFAULT_CONFIG_PATH.expanduser()
        if not config_path.is_file():
            return _prepare_settings(BASE_SETTINGS)
    else:
        config_path = path.expanduser()
        if not config_path.is_file():
            raise FileNotFoundError(f'Configuration file not found: {config_path}')

    with config_path.open('rb') as handle:
        overrides = tomllib.load(handle)

    return _prepare_settings({**BASE_SETTINGS, **overrides})
