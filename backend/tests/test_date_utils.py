"""Tests for date parsing and age calculation."""
from datetime import date

import pytest
from hypothesis import given, strategies as st

from exceptions import InvalidDateFormat, ValidationError
from utils.date_utils import calculate_age, format_date, parse_date


class TestParseDate:
    """Tests for parse_date."""

    def test_equivalent_layouts_yield_same_date(self):
        expected = date(2001, 5, 6)
        assert parse_date("2001-05-06") == expected
        assert parse_date("2001-05-06T00:00:00Z") == expected
        assert parse_date("2001-05-06T12:30:00+00:00") == expected

    def test_timestamp_date_taken_in_its_own_offset(self):
        """Late evening west of UTC stays on the written day."""
        assert parse_date("2001-05-06T23:30:00-05:00") == date(2001, 5, 6)
        assert parse_date("2001-05-06T00:30:00+09:00") == date(2001, 5, 6)

    def test_fractional_seconds(self):
        assert parse_date("1990-01-01T08:15:30.123456Z") == date(1990, 1, 1)

    def test_falls_back_to_prefix_before_t(self):
        assert parse_date("1990-01-01T00:00:00") == date(1990, 1, 1)
        assert parse_date("1990-01-01Tgarbage") == date(1990, 1, 1)

    def test_timestamp_with_bad_time_uses_date_prefix(self):
        assert parse_date("1990-01-01T25:00:00Z") == date(1990, 1, 1)

    @pytest.mark.parametrize("value", [
        "not-a-date",
        "",
        "2001-02-30",
        "2001-13-01",
        "2001-5-6",
        "01-05-2001",
        "2001/05/06",
        " 2001-05-06",
        "2001-05-06 12:00:00",
        "T2001-05-06",
        "٢٠٠١-٠٥-٠٦",
    ])
    def test_rejects_unrecognized_values(self, value):
        with pytest.raises(InvalidDateFormat):
            parse_date(value)

    def test_invalid_date_is_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_date("not-a-date")
        assert exc_info.value.message == "invalid date format: not-a-date"

    def test_rejects_non_string(self):
        with pytest.raises(InvalidDateFormat):
            parse_date(None)

    @given(st.dates(min_value=date(1000, 1, 1), max_value=date(9999, 12, 31)))
    def test_iso_dates_parse_to_themselves(self, value):
        assert parse_date(value.isoformat()) == value
        assert parse_date(f"{value.isoformat()}T00:00:00Z") == value


class TestCalculateAge:
    """Tests for calculate_age."""

    def test_birthday_today(self):
        assert calculate_age(date(1990, 6, 15), today=date(2021, 6, 15)) == 31

    def test_birthday_tomorrow(self):
        assert calculate_age(date(1990, 6, 16), today=date(2021, 6, 15)) == 30

    def test_birthday_passed(self):
        assert calculate_age(date(1990, 1, 1), today=date(2020, 6, 15)) == 30

    def test_born_today(self):
        assert calculate_age(date(2020, 6, 15), today=date(2020, 6, 15)) == 0

    def test_day_of_year_comparison_in_leap_years(self):
        """1 March is day 61 in a leap year and day 60 otherwise; ages follow day-of-year."""
        assert calculate_age(date(2000, 3, 1), today=date(2021, 3, 1)) == 20
        assert calculate_age(date(2001, 3, 1), today=date(2024, 2, 29)) == 23
        assert calculate_age(date(1990, 6, 16), today=date(2020, 6, 15)) == 30

    def test_defaults_to_current_date(self):
        today = date.today()
        assert calculate_age(date(today.year - 10, 1, 1)) == 10

    @given(
        years=st.integers(min_value=0, max_value=120),
        year=st.integers(min_value=1900, max_value=2100),
        month=st.sampled_from([1, 2]),
        day=st.integers(min_value=1, max_value=28),
    )
    def test_same_month_day_gives_year_difference(self, years, year, month, day):
        today = date(year, month, day)
        assert calculate_age(date(year - years, month, day), today=today) == years

    @given(
        years=st.integers(min_value=1, max_value=120),
        year=st.integers(min_value=1900, max_value=2100),
        month=st.sampled_from([1, 2]),
        day=st.integers(min_value=1, max_value=27),
    )
    def test_birthday_not_yet_reached_gives_one_less(self, years, year, month, day):
        today = date(year, month, day)
        assert calculate_age(date(year - years, month, day + 1), today=today) == years - 1


def test_format_date():
    assert format_date(date(1990, 1, 1)) == "1990-01-01"
    assert format_date(date(999, 12, 31)) == "0999-12-31"
