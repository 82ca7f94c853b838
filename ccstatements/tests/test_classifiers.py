"""
Tests for line classification.
"""
import pytest

from ..core.classifiers import (
    AccountNumberLine,
    HeaderLine,
    SectionMarker,
    TransactionRow,
    classify_line,
    match_header,
    match_section,
    match_transaction,
)
from ..models.schema import Category


class TestSectionMarkers:

    @pytest.mark.parametrize("line,category", [
        ("PAYMENTS AND OTHER CREDITS", Category.PAYMENTS),
        ("   PURCHASE", Category.PURCHASE),
        ("  FEES CHARGED  ", Category.FEES),
        ("PURCHASES AND REDEMPTIONS", Category.REDEMPTIONS),
    ])
    def test_recognized(self, line, category):
        assert match_section(line) == SectionMarker(category)

    def test_must_start_the_line(self):
        assert match_section("TOTAL FEES CHARGED FOR THIS PERIOD") is None

    def test_word_must_end(self):
        assert match_section("PURCHASEX") is None


class TestHeaderLines:

    def test_amount_header(self):
        assert match_header("   Payment, Credits          -$1,000.00") == \
            HeaderLine("Payment, Credits", "-$1,000.00")

    def test_date_range_header(self):
        assert match_header("Opening/Closing Date     12/26/17 - 01/25/18") == \
            HeaderLine("Opening/Closing Date", "12/26/17 - 01/25/18")

    def test_two_spaces_separate_label_and_value(self):
        assert match_header("Purchases  $150.00") == HeaderLine("Purchases", "$150.00")

    def test_single_space_is_not_a_header(self):
        assert match_header("Purchases $150.00") is None

    def test_value_needs_dollar_sign(self):
        assert match_header("Purchases          150.00") is None


class TestTransactionRows:

    def test_simple_row(self):
        row = match_transaction("  01/05     DELTA AIR LINES ATLANTA          1,200.00")
        assert row == TransactionRow("01/05", "DELTA AIR LINES ATLANTA", "1,200.00")

    def test_negative_amount_with_gap(self):
        row = match_transaction("1/7   PAYMENT THANK YOU       - 25.00")
        assert row.raw_amount == "- 25.00"
        assert row.descriptor == "PAYMENT THANK YOU"

    def test_joint_dates_use_the_first(self):
        row = match_transaction("01/12 & 01/13   REDEEMED POINTS      -5.00")
        assert row.raw_date == "01/12"
        assert row.descriptor == "REDEEMED POINTS"

    def test_amount_needs_three_spaces(self):
        assert match_transaction("01/05 DELTA AIR LINES  12.00") is None

    def test_free_text_is_ignored(self):
        assert match_transaction("Page 1 of 3") is None


class TestClassifyLine:

    def test_account_number(self):
        assert classify_line("Account Number: 4147 2020 1111 3456") == AccountNumberLine("3456")

    def test_section_wins_over_everything(self):
        assert isinstance(classify_line("PURCHASE"), SectionMarker)

    def test_header_wins_over_transaction(self):
        line = "01/05 Opening/Closing Date     12/26/17 - 01/25/18"
        assert isinstance(classify_line(line), HeaderLine)

    def test_blank_line(self):
        assert classify_line("") is None
