"""Shared statement texts for the parser tests."""

import pytest

DETAILED_TEXT = """\
=== Page 1 ===
Consolidated Account Statement
01-Jan-2024 To 31-Oct-2024
Email Id: joe@example.com
JOE DOE
12 Main Street
Mumbai 400001
Mobile: +919876543210
HDFC Mutual Fund
PAN: ABCDE1234F KYC: OK PAN: OK
HINFG - HDFC Infrastructure Fund - Regular Plan - Growth (Non-Demat) - ISIN : INF179K01GF8 (Advisor : INZ000031633) Registrar : CAMS
Folio No: 123456 / 78
JOE DOE
Nominee 1: JANE DOE Nominee 2: JOHN DOE
Opening Unit Balance: 0.000
10-Jan-2024 1,000.00 40.0000 25.000 Purchase - SIP Instalment 1 25.000
10-Jan-2024 0.05 *** Stamp Duty ***
10-Feb-2024 1,000.00 40.0000 25.000 Purchase - SIP Instalment 2 50.000
Closing Unit Balance: 50.000 NAV on 31-Oct-2024: INR 45.5000 Total Cost Value: 2,000.00 Market Value on 31-Oct-2024: INR 2,275.00

=== Page 2 ===
Axis Mutual Fund
PAN: ABCDE1234F KYC: NOT OK PAN: NOT OK
B205RG - Axis Bluechip Fund - Regular Growth - ISIN : INF846K0
1164 (Advisor : DIRECT) Registrar : KFINTECH
Folio No: 9988776
JOE DOE
Nominee 1: JANE DOE
Opening Unit Balance: 118.427
15-Mar-2024 (5,000.00) 48.2000 (103.734) Redemption 14.693
20-Mar-2024 0.00 0.00 10.000 Units Pledged 14.693
25-Mar-2024 0.00 0.00 0.00 Consolidation of folios 0.00
Closing Unit Balance: 14.693 NAV on 31-Oct-2024: INR 52.1000 Total Cost Value: 700.00 Market Value on 31-Oct-2024: INR 765.51
"""

SUMMARY_TEXT = """\
=== Page 1 ===
Consolidated Account Summary As on 27-Oct-2024
Email Id: joe@example.com
JOE DOE
12 Main Street
Mobile: +919876543210
Closing Unit Balance NAV Date NAV Registrar ISIN Cost Value Market Value Folio No.
12345678 5,000.00 B205RG - Axis Bluechip Fund - Regular Growth
100.000 27-Oct-2024 50.0000 KFINTECH INF846K01164 4,500.00
Total 5,000.00 4,500.00
"""


def scheme_block(
    folio: str,
    scheme_line: str = "HINFG - HDFC Infrastructure Fund - Growth - ISIN : INF179K01GF8 Registrar : CAMS",
    closing: bool = True,
) -> str:
    """Return the lines of a single scheme block, optionally without its closing balance."""
    lines = [
        "PAN: ABCDE1234F KYC: OK PAN: OK",
        scheme_line,
        f"Folio No: {folio}",
        "JOE DOE",
        "Nominee 1: JANE DOE",
        "Opening Unit Balance: 0.000",
        "10-Jan-2024 1,000.00 10.0000 100.000 Purchase 100.000",
    ]
    if closing:
        lines.append("Closing Unit Balance: 100.000 NAV on 27-Oct-2024: INR 10.5000 Total Cost Value: 1000.00")
    return "\n".join(lines)


@pytest.fixture
def detailed_text():
    return DETAILED_TEXT


@pytest.fixture
def summary_text():
    return SUMMARY_TEXT
