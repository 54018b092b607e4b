"""Unit tests for lenient form field parsing."""

from datetime import date, datetime

import pytest

from src.models.draft.booking import GuestComposition
from src.models.fields import (
    parse_count,
    parse_form_date,
    parse_optional_price,
    parse_price,
)


class TestPriceParsing:
    """Tests for catalog price parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, None),
            ("", None),
            ("  ", None),
            (True, None),
            ("abc", None),
            ("45", 45.0),
            (12.5, 12.5),
            (-10, 0.0),
        ],
    )
    def test_parse_optional_price(self, value, expected):
        """Test blanks and garbage are absent, negatives clamp to 0."""
        assert parse_optional_price(value) == expected

    @pytest.mark.parametrize("value", ["Infinity", "-inf", "1e400", "nan", float("inf")])
    def test_non_finite_price_is_absent(self, value):
        """Test infinite and NaN prices are treated as unset."""
        assert parse_optional_price(value) is None
        assert parse_price(value) == 0.0


class TestCountParsing:
    """Tests for guest count parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [(None, 0), ("", 0), ("3", 3), (2.7, 2), (-1, 0), ("x", 0), ("inf", 0), ("nan", 0)],
    )
    def test_parse_count(self, value, expected):
        """Test counts are integers and never negative."""
        assert parse_count(value) == expected

    def test_guest_composition_with_infinite_count(self):
        """Test an infinite guest count builds a composition with 0 guests."""
        guests = GuestComposition(adults="inf", children6to12="1e400")

        assert guests.adults == 0
        assert guests.children_6_to_12 == 0


class TestFormDateParsing:
    """Tests for form date parsing."""

    def test_datetime_becomes_date(self):
        """Test datetimes are reduced to their calendar day."""
        assert parse_form_date(datetime(2024, 5, 30, 14, 0)) == date(2024, 5, 30)

    def test_iso_string_truncated(self):
        """Test ISO datetime strings keep only the date part."""
        assert parse_form_date("2024-05-30T00:00:00.000Z") == "2024-05-30"

    def test_blank_is_none(self):
        """Test blank strings are treated as missing."""
        assert parse_form_date("  ") is None
