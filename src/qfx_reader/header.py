"""Scanner for the ``KEY:VALUE`` preamble that precedes the ``<OFX>`` body."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from qfx_reader.errors import MalformedDocumentError

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from collections.abc import Mapping


def _header_pair(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    # A colon at index 0 or 1 cannot follow a real header key.
    if stripped.find(':') <= 1:
        return None
    key, _, value = stripped.partition(':')
    return key.strip(), value.strip()


def split_header(text: str) -> tuple[str, str]:
    """Return ``(preamble, body)`` split at the first ``<`` of ``text``."""

    index = text.find('<')
    if index == -1:
        raise MalformedDocumentError('Document has no tagged section')
    return text[:index], text[index:]


def parse_headers(text: str) -> Mapping[str, str]:
    """Parse the header preamble of ``text`` into a read-only mapping.

    Lines without a usable ``KEY:VALUE`` shape are skipped; a repeated key keeps
    its last value.
    """

    preamble, _body = split_header(text)
    pairs = (_header_pair(line) for line in preamble.splitlines())
    return MappingProxyType(dict(pair for pair in pairs if pair is not None))
