"""Immutable records extracted from QFX/OFX documents."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import TYPE_CHECKING

from ofxtools.models.base import OFXSpecError
from ofxtools.Types import DateTime, OFXTypeWarning

from qfx_reader.errors import InvalidTimestampError

if TYPE_CHECKING:  # pragma: no cover - type-checking imports only
    from collections.abc import Mapping

_OFX_DATETIME = DateTime()


def parse_ofx_date(text: str) -> date:
    """Decode the fixed-width ``YYYYMMDD`` prefix of an OFX date or timestamp."""

    digits = text[:8]
    if len(digits) < 8 or not digits.isdigit():
        raise InvalidTimestampError(text)
    try:
        return date(int(digits[0:4]), int(digits[4:6]), int(digits[6:8]))
    except ValueError as exc:
        raise InvalidTimestampError(text) from exc


@dataclass(frozen=True, slots=True)
class Status:
    """``<STATUS>`` aggregate; ``message`` is empty when the server sent none."""

    code: str
    severity: str
    message: str


@dataclass(frozen=True, slots=True)
class ServerDate:
    """Raw ``DTSERVER`` text such as ``20190105170625.000[0:GMT]``."""

    text: str

    def to_date(self) -> date:
        """Return the calendar date encoded by the leading ``YYYYMMDD`` digits."""

        return parse_ofx_date(self.text)

    def to_datetime(self) -> datetime:
        """Return the full timestamp as an aware ``datetime`` (offset suffix honoured)."""

        with warnings.catch_warnings():
            warnings.simplefilter('ignore', category=OFXTypeWarning)
            try:
                value = _OFX_DATETIME.convert(self.text)
            except (OFXSpecError, ValueError) as exc:
                raise InvalidTimestampError(self.text) from exc
        if value is None:
            raise InvalidTimestampError(self.text)
        return value


@dataclass(frozen=True, slots=True)
class BankInformation:
    """Financial institution identifiers from the sign-on response."""

    org: str
    fid: str
    bank_id: str
    user_id: str


@dataclass(frozen=True, slots=True)
class ServerConnectionInfo:
    """Parsed ``<SONRS>`` sign-on response."""

    status: Status
    server_date: ServerDate
    language: str
    bank_information: BankInformation


@dataclass(frozen=True, slots=True)
class Transaction:
    """Single ``<STMTTRN>`` entry. Text fields keep the raw OFX values."""

    type: str
    posted: str = ''
    amount: str = ''
    fitid: str = ''
    name: str = ''
    memo: str = ''


@dataclass(frozen=True, slots=True)
class CreditCardStatement:
    """Credit card statement transaction response (``<CCSTMTTRNRS>``)."""

    transaction_uid: str
    status: Status
    default_currency: str
    account_id: str
    account_key: str
    period_start: datetime
    period_end: datetime
    transactions: tuple[Transaction, ...] = ()


@dataclass(frozen=True, slots=True)
class QfxDocument:
    """Everything extracted from one QFX/OFX file.

    ``headers`` takes part in equality but not in hashing.
    """

    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    server_connection_info: ServerConnectionInfo | None = None
    credit_card_statements: tuple[CreditCardStatement, ...] = ()

    def transactions(self) -> list[Transaction]:
        """Return the transactions of every statement in document order."""

        return [txn for statement in self.credit_card_statements for txn in statement.transactions]
