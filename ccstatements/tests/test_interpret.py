"""
Tests for date resolution and statement interpretation.
"""
from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from ..core.errors import DateOutOfRange, MalformedDate, MissingHeader
from ..core.extract import extract
from ..core.interpret import interpret, parse_billing_period, resolve_date
from ..models.schema import Category, RawStatement, Statement


class TestResolveDate:

    def test_year_rollover(self):
        start, end = date(2017, 12, 26), date(2018, 1, 25)
        assert resolve_date("12/27", start, end) == date(2017, 12, 27)
        assert resolve_date("01/05", start, end) == date(2018, 1, 5)

    def test_out_of_range(self):
        with pytest.raises(DateOutOfRange):
            resolve_date("06/15", date(2018, 1, 1), date(2018, 1, 31))

    def test_day_after_close_is_allowed(self):
        assert resolve_date("02/01", date(2018, 1, 1), date(2018, 1, 31)) == date(2018, 2, 1)

    def test_two_days_after_close_rolls_back_a_year(self):
        with pytest.raises(DateOutOfRange):
            resolve_date("02/02", date(2018, 1, 1), date(2018, 1, 31))

    def test_posted_shortly_before_opening(self):
        assert resolve_date("12/28", date(2018, 1, 1), date(2018, 1, 31)) == date(2017, 12, 28)

    def test_lower_slack_is_configurable(self):
        start, end = date(2018, 1, 1), date(2018, 1, 31)
        with pytest.raises(DateOutOfRange):
            resolve_date("11/15", start, end)
        assert resolve_date("11/15", start, end, lower_slack=timedelta(days=365)) == \
            date(2017, 11, 15)

    def test_leap_day_in_leap_year(self):
        assert resolve_date("2/29", date(2020, 2, 10), date(2020, 3, 9)) == date(2020, 2, 29)

    def test_leap_day_in_non_leap_year(self):
        with pytest.raises(DateOutOfRange):
            resolve_date("02/29", date(2019, 2, 10), date(2019, 3, 9))

    @pytest.mark.parametrize("raw_date", ["13/01", "02/30", "0/5", "1-5", ""])
    def test_malformed(self, raw_date):
        with pytest.raises(MalformedDate):
            resolve_date(raw_date, date(2018, 1, 1), date(2018, 1, 31))


class TestBillingPeriod:

    def test_parse(self):
        assert parse_billing_period("12/26/17 - 01/25/18") == (date(2017, 12, 26), date(2018, 1, 25))

    def test_garbage(self):
        with pytest.raises(MalformedDate):
            parse_billing_period("$12.00")

    def test_reversed(self):
        with pytest.raises(MalformedDate):
            parse_billing_period("01/25/18 - 12/26/17")


class TestInterpret:

    def test_sample_statement(self, sample_lines):
        stmt = interpret(extract(sample_lines))

        assert stmt.start_date == date(2017, 12, 26)
        assert stmt.end_date == date(2018, 1, 25)
        assert stmt.last4 == "3456"
        assert [t.date for t in stmt.transactions] == [
            date(2018, 1, 10),
            date(2017, 12, 27),
            date(2018, 1, 5),
            date(2018, 1, 25),
            date(2018, 1, 12),
        ]
        assert [t.amount_cents for t in stmt.transactions] == [-100000, 5456, 120000, 2500, -500]
        assert stmt.transactions[3].category == Category.FEES

    def test_missing_date_header(self):
        with pytest.raises(MissingHeader):
            interpret(RawStatement(headers={"Purchases": "$0.00"}))

    def test_statement_is_frozen(self, sample_lines):
        stmt = interpret(extract(sample_lines))
        with pytest.raises(ValidationError):
            stmt.last4 = "0000"

    def test_statement_period_must_be_ordered(self):
        with pytest.raises(ValidationError):
            Statement(start_date=date(2018, 2, 1), end_date=date(2018, 1, 1))
