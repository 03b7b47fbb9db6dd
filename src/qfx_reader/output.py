"""Output utilities for rendering parsed documents as JSON or CSV."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Iterable
from dataclasses import asdict
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from qfx_reader.errors import InvalidTimestampError
from qfx_reader.models import QfxDocument, parse_ofx_date

CSV_FIELDS: list[str] = ['account_id', 'transaction_id', 'date', 'description', 'amount', 'type']


def _json_default(value: object) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f'Object of type {type(value).__name__} is not JSON serializable')


def _format_amount(value: str) -> str:
    try:
        quantized = Decimal(value).quantize(Decimal('0.01'))
    except InvalidOperation:
        return value
    return format(quantized, '.2f')


def _format_date(value: str) -> str:
    # OFX dates start with YYYYMMDD; anything after that is time and zone.
    try:
        return parse_ofx_date(value).isoformat()
    except InvalidTimestampError:
        return ''


def document_to_dict(document: QfxDocument) -> dict[str, object]:
    """Return a JSON-ready dictionary for ``document``."""

    if not isinstance(document, QfxDocument):
        raise TypeError('invalid QFX document')

    info = document.server_connection_info
    info_payload: dict[str, object] | None = None
    if info is not None:
        info_payload = asdict(info)
        info_payload['server_date'] = info.server_date.text
    return {
        'headers': dict(document.headers),
        'server_connection_info': info_payload,
        'credit_card_statements': [asdict(statement) for statement in document.credit_card_statements],
    }


def build_json_payload(documents: Iterable[QfxDocument], *, indent: int = 2) -> str:
    """Serialize ``documents`` into a JSON array string."""

    payload = [document_to_dict(document) for document in documents]
    return json.dumps(payload, indent=indent, default=_json_default) + '\n'


def build_csv_payload(documents: Iterable[QfxDocument]) -> str:
    """Serialize the transactions of ``documents`` into a CSV string, one row per transaction."""

    if not isinstance(documents, Iterable):
        raise TypeError('documents must be iterable')

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_FIELDS)
    writer.writeheader()
    for document in documents:
        for statement in document.credit_card_statements:
            for txn in statement.transactions:
                writer.writerow(
                    {
                        'account_id': statement.account_id,
                        'transaction_id': txn.fitid,
                        'date': _format_date(txn.posted),
                        'description': txn.name or txn.memo,
                        'amount': _format_amount(txn.amount),
                        'type': txn.type,
                    },
                )
    return buffer.getvalue()


def write_output(payload: str, *, output_path: Path | str | None) -> str:
    """Write ``payload`` to ``output_path`` if provided and return it."""

    if output_path:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding='utf-8', newline='') as handle:
            handle.write(payload)
    return payload
