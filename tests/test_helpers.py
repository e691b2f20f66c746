"""Tests for scheme header extraction and ledger row parsing."""

import pytest

from castext.detailed.helpers import (
    extract_scheme_info,
    get_parsed_scheme_name,
    get_transaction_type,
    parse_transaction_line,
)
from castext.enums import SchemeInfoStatus, TransactionType


class TestExtractSchemeInfo:
    """Tests for scheme header extraction."""

    def test_complete_line(self):
        """Test a single line with a full ISIN parses in one call."""
        status, info = extract_scheme_info(
            "HINFG - HDFC Infrastructure Fund - Regular Plan - Growth (Non-Demat) - "
            "ISIN : INF179K01GF8 (Advisor : INZ000031633) Registrar : CAMS"
        )

        assert status == SchemeInfoStatus.OK
        assert info.rta_code == "HINFG"
        assert info.scheme_name == "HDFC Infrastructure Fund - Regular Plan - Growth"
        assert info.isin == "INF179K01GF8"
        assert info.advisor == "INZ000031633"
        assert info.rta == "CAMS"

    def test_wrapped_isin_is_incomplete_then_completes(self):
        """Test a short ISIN signals incomplete and succeeds once the next line is appended."""
        first = "B205RG - Axis Bluechip Fund - Regular Growth - ISIN : INF846K0"
        status, info = extract_scheme_info(first)

        assert status == SchemeInfoStatus.INCOMPLETE
        assert info is None

        status, info = extract_scheme_info(f"{first} 1164 (Advisor : DIRECT) Registrar : KFINTECH")

        assert status == SchemeInfoStatus.OK
        assert info.isin == "INF846K01164"
        assert info.advisor == "DIRECT"
        assert info.rta == "KFINTECH"
        assert info.scheme_name == "Axis Bluechip Fund - Regular Growth"

    def test_missing_isin_is_incomplete(self):
        status, _ = extract_scheme_info("B205RG - Axis Bluechip Fund - Regular Growth")
        assert status == SchemeInfoStatus.INCOMPLETE

    def test_long_isin_is_invalid(self):
        status, info = extract_scheme_info("X1 - Some Fund - ISIN : INF846K01164ABC Registrar : CAMS")
        assert status == SchemeInfoStatus.INVALID
        assert info is None

    def test_line_without_code_separator_is_invalid(self):
        status, _ = extract_scheme_info("Some Fund ISIN : INF846K01164 Registrar : CAMS")
        assert status == SchemeInfoStatus.INVALID

    def test_advisor_with_unknown_prefix_is_absent(self):
        _, info = extract_scheme_info("X1 - Some Fund - ISIN : INF846K01164 (Advisor : XYZ123) Registrar : CAMS")
        assert info.advisor is None

    def test_arn_advisor_is_absent(self):
        """Test distributor ARN codes are not reported as advisor codes."""
        _, info = extract_scheme_info("X1 - Some Fund - ISIN : INF846K01164 (Advisor : ARN-0845) Registrar : CAMS")
        assert info.advisor is None

    def test_formerly_aside_is_removed(self):
        _, info = extract_scheme_info(
            "FTI219 - Franklin India Small Cap Fund - Growth (formerly Franklin India Smaller Companies Fund) "
            "(Non-Demat) - ISIN : INF090I01569 Registrar : CAMS"
        )
        assert info.scheme_name == "Franklin India Small Cap Fund - Growth"
        assert info.advisor is None


class TestParsedSchemeName:
    """Tests for scheme name cleanup."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (" Axis  Liquid Fund (Demat) - ", "Axis Liquid Fund"),
            ("Axis Liquid Fund (Non - Demat)", "Axis Liquid Fund"),
            ("Tata Digital Fund (erstwhile Tata IT Fund) - Growth", "Tata Digital Fund - Growth"),
        ],
    )
    def test_cleanup(self, raw, expected):
        assert get_parsed_scheme_name(raw) == expected


class TestTransactionType:
    """Tests for transaction classification."""

    @pytest.mark.parametrize(
        "description,units,expected",
        [
            ("Purchase - SIP", 10.0, TransactionType.PURCHASE),
            ("Systematic Investment Instalment 3", 10.0, TransactionType.PURCHASE),
            ("Purchase-reversed", -10.0, TransactionType.REDEMPTION),
            ("Systematic Investment Purchase - Reversed", -10.0, TransactionType.REDEMPTION),
            ("Redemption", -5.0, TransactionType.REDEMPTION),
            ("Switch In", 5.0, TransactionType.SWITCH_IN),
            ("Switch Out", -5.0, TransactionType.SWITCH_OUT),
            ("Dividend Reinvestment", 1.0, TransactionType.DIVIDEND),
            ("Consolidation of folios", 0.0, TransactionType.CONSOLIDATION),
            ("Cancelled transaction", 0.0, TransactionType.CANCELLED),
            ("Transfer to Demat account", 0.0, TransactionType.DEMAT),
            ("Address Updated", 0.0, TransactionType.OTHER),
        ],
    )
    def test_classification(self, description, units, expected):
        assert get_transaction_type(description, units) == expected


class TestParseTransactionLine:
    """Tests for ledger row parsing."""

    def test_purchase_row(self):
        txn = parse_transaction_line("10-Jan-2024 1,000.00 45.1234 22.161 Purchase - SIP Instalment 1 22.161")

        assert txn.date == "2024-01-10"
        assert txn.amount == 1000.0
        assert txn.nav == 45.1234
        assert txn.units == 22.161
        assert txn.balance == 22.161
        assert txn.description == "Purchase - SIP Instalment 1"
        assert txn.type == TransactionType.PURCHASE

    def test_parenthesised_values_are_negative(self):
        txn = parse_transaction_line("15-Mar-2024 (5,000.00) 48.2000 (103.734) Redemption 118.427")

        assert txn.amount == -5000.0
        assert txn.units == -103.734
        assert txn.type == TransactionType.REDEMPTION

    def test_stamp_duty_row(self):
        txn = parse_transaction_line("10-Jan-2024 0.05 *** Stamp Duty ***")

        assert txn.description == "Stamp Duty"
        assert txn.amount == 0.05
        assert (txn.units, txn.nav, txn.balance) == (0.0, 0.0, 0.0)
        assert txn.type == TransactionType.STAMP_DUTY_TAX

    def test_stt_row(self):
        txn = parse_transaction_line("15-Mar-2024 0.25 *** STT Paid ***")

        assert txn.description == "STT Paid"
        assert txn.type == TransactionType.STT_TAX

    @pytest.mark.parametrize(
        "line",
        [
            "20-Mar-2024 0.00 0.00 10.000 Units Pledged 14.693",
            "20-Mar-2024 0.00 0.00 10.000 Lien Marked 14.693",
            "21-Mar-2024 0.00 0.00 10.000 Unpledge 14.693",
            "22-Mar-2024 *** Address Updated ***",
        ],
    )
    def test_skip_markers(self, line):
        assert parse_transaction_line(line) is None

    def test_zero_values_row_is_noise(self):
        """Test a row whose values are all zero is dropped even with a description."""
        assert parse_transaction_line("25-Mar-2024 0.00 0.00 0.00 Consolidation of folios 0.00") is None

    def test_short_row(self):
        assert parse_transaction_line("25-Mar-2024 100.00 10.00 10.000") is None

    def test_row_without_description(self):
        assert parse_transaction_line("25-Mar-2024 100.00 10.00 10.000 10.000") is None

    def test_impossible_date(self):
        assert parse_transaction_line("31-Feb-2024 100.00 10.00 10.000 Purchase 10.000") is None
