import textwrap

import pytest

SAMPLE_QFX = textwrap.dedent(
    """\
    OFXHEADER:100
    DATA:OFXSGML
    VERSION:102
    SECURITY:NONE
    ENCODING:USASCII
    CHARSET:1252
    COMPRESSION:NONE
    OLDFILEUID:NONE
    NEWFILEUID:NONE

    <OFX>
    <SIGNONMSGSRSV1>
    <SONRS>
    <STATUS>
    <CODE>0
    <SEVERITY>INFO
    <MESSAGE>SUCCESS
    </STATUS>
    <DTSERVER>20190105170625.000[0:GMT]
    <LANGUAGE>ENG
    <FI>
    <ORG>Target
    <FID>3820
    </FI>
    <INTU.BID>3820
    <INTU.USERID>Target
    </SONRS>
    </SIGNONMSGSRSV1>
    <CREDITCARDMSGSRSV1>
    <CCSTMTTRNRS>
    <TRNUID>0
    <STATUS>
    <CODE>0
    <SEVERITY>INFO
    </STATUS>
    <CCSTMTRS>
    <CURDEF>USD
    <CCACCTFROM>
    <ACCTID>4111111111111111
    <ACCTKEY>9999
    </CCACCTFROM>
    <BANKTRANLIST>
    <DTSTART>20181206120000[0:GMT]
    <DTEND>20190105120000[0:GMT]
    <STMTTRN>
    <TRNTYPE>DEBIT
    <DTPOSTED>20181210120000[0:GMT]
    <TRNAMT>-42.5
    <FITID>201812101
    <NAME>GROCERY STORE
    <MEMO>Card purchase
    </STMTTRN>
    <STMTTRN>
    <TRNTYPE>CREDIT
    <DTPOSTED>20181220120000[0:GMT]
    <TRNAMT>100.00
    <FITID>201812201
    <NAME>PAYMENT THANK YOU
    </STMTTRN>
    </BANKTRANLIST>
    <LEDGERBAL>
    <BALAMT>-57.50
    <DTASOF>20190105120000[0:GMT]
    </LEDGERBAL>
    </CCSTMTRS>
    </CCSTMTTRNRS>
    </CREDITCARDMSGSRSV1>
    </OFX>
    """
)
"""Loose-dialect credit card export with one statement and two transactions."""


@pytest.fixture
def sample_qfx() -> str:
    return SAMPLE_QFX
