"""Structured extractors built on the tag resolution primitives.

Each extractor narrows the text to the smallest enclosing container before it
reads a scalar, so a same-named tag from a sibling aggregate (for example the
two ``<STATUS>`` blocks of a statement response) never leaks into a record.
"""

from __future__ import annotations

import logging
from datetime import datetime

from qfx_reader.errors import InvalidTimestampError
from qfx_reader.models import (
    BankInformation,
    CreditCardStatement,
    ServerConnectionInfo,
    ServerDate,
    Status,
    Transaction,
)
from qfx_reader.tags import element_span, iter_element_spans, value_after_tag

LOGGER = logging.getLogger(__name__)

_STATEMENT_DATETIME_WIDTH = 14


def parse_status(span: str) -> Status:
    """Parse a ``<STATUS>`` aggregate."""

    return Status(
        code=value_after_tag(span, 'CODE'),
        severity=value_after_tag(span, 'SEVERITY'),
        message=value_after_tag(span, 'MESSAGE'),
    )


def parse_bank_information(span: str) -> BankInformation:
    """Parse institution identifiers from a ``<SONRS>`` span.

    ``ORG`` and ``FID`` are only read from inside the ``<FI>`` aggregate; the
    Intuit extensions are siblings of ``<FI>`` and are read from ``span``.
    """

    if '<FI>' in span:
        fi_span = element_span(span, 'FI')
        org = value_after_tag(fi_span, 'ORG')
        fid = value_after_tag(fi_span, 'FID')
    else:
        org = fid = ''
    return BankInformation(
        org=org,
        fid=fid,
        bank_id=value_after_tag(span, 'INTU.BID'),
        user_id=value_after_tag(span, 'INTU.USERID'),
    )


def parse_server_connection_info(span: str) -> ServerConnectionInfo:
    """Parse the sign-on response (``<SONRS>`` or its ``<SIGNONMSGSRSV1>`` wrapper)."""

    return ServerConnectionInfo(
        status=parse_status(element_span(span, 'STATUS')),
        server_date=ServerDate(value_after_tag(span, 'DTSERVER')),
        language=value_after_tag(span, 'LANGUAGE'),
        bank_information=parse_bank_information(span),
    )


def parse_statement_datetime(text: str) -> datetime:
    """Decode a fixed-width ``YYYYMMDDhhmmss`` timestamp; any suffix is ignored."""

    digits = text[:_STATEMENT_DATETIME_WIDTH]
    if len(digits) < _STATEMENT_DATETIME_WIDTH or not digits.isdigit():
        raise InvalidTimestampError(text)
    try:
        return datetime(
            int(digits[0:4]),
            int(digits[4:6]),
            int(digits[6:8]),
            int(digits[8:10]),
            int(digits[10:12]),
            int(digits[12:14]),
        )
    except ValueError as exc:
        raise InvalidTimestampError(text) from exc


def parse_transaction(span: str) -> Transaction:
    """Parse one ``<STMTTRN>`` block."""

    return Transaction(
        type=value_after_tag(span, 'TRNTYPE'),
        posted=value_after_tag(span, 'DTPOSTED'),
        amount=value_after_tag(span, 'TRNAMT'),
        fitid=value_after_tag(span, 'FITID'),
        name=value_after_tag(span, 'NAME'),
        memo=value_after_tag(span, 'MEMO'),
    )


def parse_transaction_list(span: str) -> tuple[Transaction, ...]:
    """Parse every closed ``<STMTTRN>`` block of ``span`` in document order."""

    transactions = tuple(parse_transaction(block) for block in iter_element_spans(span, 'STMTTRN'))
    LOGGER.debug('Parsed %d transactions', len(transactions))
    return transactions


def parse_credit_card_statement(span: str) -> CreditCardStatement:
    """Parse a ``<CCSTMTTRNRS>`` credit card statement response."""

    status = parse_status(element_span(span, 'STATUS'))

    response_span = element_span(span, 'CCSTMTRS')
    account_span = element_span(span, 'CCACCTFROM')
    tranlist_span = element_span(response_span, 'BANKTRANLIST')

    return CreditCardStatement(
        transaction_uid=value_after_tag(span, 'TRNUID'),
        status=status,
        default_currency=value_after_tag(response_span, 'CURDEF'),
        account_id=value_after_tag(account_span, 'ACCTID'),
        account_key=value_after_tag(account_span, 'ACCTKEY'),
        period_start=parse_statement_datetime(value_after_tag(tranlist_span, 'DTSTART')),
        period_end=parse_statement_datetime(value_after_tag(tranlist_span, 'DTEND')),
        transactions=parse_transaction_list(tranlist_span),
    )
