from datetime import date
from pathlib import Path

import pytest

from qfx_reader.document import parse_document, parse_file
from qfx_reader.errors import ElementNotFoundError, MalformedDocumentError
from qfx_reader.models import BankInformation, Status, Transaction


def test_parse_document(sample_qfx: str) -> None:
    document = parse_document(sample_qfx)
    assert document.headers['DATA'] == 'OFXSGML'

    info = document.server_connection_info
    assert info is not None
    assert info.status == Status('0', 'INFO', 'SUCCESS')
    assert info.server_date.to_date() == date(2019, 1, 5)
    assert info.bank_information == BankInformation('Target', '3820', '3820', 'Target')

    assert len(document.credit_card_statements) == 1
    assert [txn.type for txn in document.transactions()] == ['DEBIT', 'CREDIT']


def test_parse_document_without_sections() -> None:
    document = parse_document('OFXHEADER:100\nDATA:OFXSGML\n<OFX>\n</OFX>')
    assert dict(document.headers) == {'OFXHEADER': '100', 'DATA': 'OFXSGML'}
    assert document.server_connection_info is None
    assert document.credit_card_statements == ()
    assert document.transactions() == []


def test_parse_document_multiple_statements(sample_qfx: str) -> None:
    start = sample_qfx.index('<CCSTMTTRNRS>')
    end = sample_qfx.index('</CCSTMTTRNRS>') + len('</CCSTMTTRNRS>')
    block = sample_qfx[start:end]
    second = block.replace('<TRNUID>0', '<TRNUID>1').replace('4111111111111111', '4222222222222222')
    doubled = sample_qfx[:end] + second + sample_qfx[end:]

    document = parse_document(doubled)
    assert [s.transaction_uid for s in document.credit_card_statements] == ['0', '1']
    assert [s.account_id for s in document.credit_card_statements] == ['4111111111111111', '4222222222222222']
    assert len(document.transactions()) == 4


def test_parse_document_without_tags() -> None:
    with pytest.raises(MalformedDocumentError):
        parse_document('OFXHEADER:100\nDATA:OFXSGML\n')


def test_parse_document_truncated(sample_qfx: str) -> None:
    truncated = sample_qfx[: sample_qfx.index('<FI>')].rstrip() + '\n<LANGUAGE>ENG'
    with pytest.raises(ElementNotFoundError, match='SONRS'):
        parse_document(truncated)


def test_parse_file_uses_encoding(tmp_path: Path) -> None:
    target = tmp_path / 'statement.qfx'
    text = (
        'OFXHEADER:100\n<OFX><CCSTMTTRNRS><TRNUID>1<STATUS><CODE>0</STATUS><CCSTMTRS><CURDEF>EUR'
        '<CCACCTFROM><ACCTID>77</CCACCTFROM><BANKTRANLIST><DTSTART>20240101000000<DTEND>20240131000000'
        '<STMTTRN><TRNTYPE>DEBIT<NAME>Café Müller</STMTTRN></BANKTRANLIST></CCSTMTRS></CCSTMTTRNRS></OFX>'
    )
    target.write_bytes(text.encode('cp1252'))

    document = parse_file(target)
    assert document.transactions() == [Transaction(type='DEBIT', name='Café Müller')]


def test_parse_file_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / 'missing.qfx')
