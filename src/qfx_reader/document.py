"""Whole-document entry points: text or file in, ``QfxDocument`` out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from qfx_reader.extractors import parse_credit_card_statement, parse_server_connection_info
from qfx_reader.header import parse_headers
from qfx_reader.models import QfxDocument
from qfx_reader.tags import element_span, iter_element_spans

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from pathlib import Path

LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING = 'cp1252'
"""Codec used to decode QFX files; Quicken exports are Windows-1252 text."""


def parse_document(text: str) -> QfxDocument:
    """Extract the headers, sign-on response and credit card statements of ``text``."""

    headers = parse_headers(text)
    connection_info = parse_server_connection_info(element_span(text, 'SONRS')) if '<SONRS>' in text else None
    statements = tuple(parse_credit_card_statement(span) for span in iter_element_spans(text, 'CCSTMTTRNRS'))
    LOGGER.debug('Parsed %d header(s) and %d credit card statement(s)', len(headers), len(statements))
    return QfxDocument(
        headers=headers,
        server_connection_info=connection_info,
        credit_card_statements=statements,
    )


def parse_file(path: Path, *, encoding: str = DEFAULT_ENCODING) -> QfxDocument:
    """Read ``path`` fully with ``encoding`` and parse it."""

    with path.open('r', encoding=encoding, errors='replace') as handle:
        text = handle.read()
    LOGGER.debug('Read %d characters from %s', len(text), path)
    return parse_document(text)
