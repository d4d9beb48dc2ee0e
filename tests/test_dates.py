"""Tests for date normalization and ordering checks."""

from datetime import date, datetime

import pytest

from journal_streak.dates import DateOrderError, normalize_date, validate_dates


class TestNormalizeDate:
    def test_date_passes_through(self):
        assert normalize_date(date(2024, 1, 5)) == date(2024, 1, 5)

    def test_datetime_drops_time(self):
        assert normalize_date(datetime(2024, 1, 5, 23, 59, 59)) == date(2024, 1, 5)

    def test_result_is_plain_date(self):
        assert type(normalize_date(datetime(2024, 1, 5, 8, 0))) is date

    def test_iso_date_string(self):
        assert normalize_date("2024-01-05") == date(2024, 1, 5)

    def test_iso_timestamp_string(self):
        assert normalize_date("2024-01-05T21:30:00") == date(2024, 1, 5)

    def test_surrounding_whitespace(self):
        assert normalize_date(" 2024-01-05 ") == date(2024, 1, 5)

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            normalize_date("yesterday")


class TestValidateDates:
    def test_empty_is_valid(self):
        validate_dates([])

    def test_ascending_is_valid(self):
        validate_dates([date(2024, 1, 1), date(2024, 1, 3), date(2024, 2, 1)])

    def test_out_of_order_raises(self):
        with pytest.raises(DateOrderError, match="out of order") as exc_info:
            validate_dates([date(2024, 1, 3), date(2024, 1, 1)])
        assert exc_info.value.previous == date(2024, 1, 3)
        assert exc_info.value.current == date(2024, 1, 1)

    def test_duplicate_raises(self):
        with pytest.raises(DateOrderError, match="duplicate"):
            validate_dates([date(2024, 1, 1), date(2024, 1, 1)])

    def test_is_value_error(self):
        assert issubclass(DateOrderError, ValueError)
