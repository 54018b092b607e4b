"""Unit tests for RateResolver and room type parsing."""

from datetime import date

from src.models.catalog.hotel import RoomType
from src.models.enums import GuestClass
from src.pricing import RateResolver


class TestRateResolver:
    """Tests for nightly rate resolution."""

    def test_base_rate_without_override(self, double_room):
        """Test months without an override use the base rates."""
        assert RateResolver.resolve(double_room, date(2024, 5, 10)) == 100
        assert RateResolver.resolve(double_room, date(2024, 5, 10), GuestClass.CHILD) == 40

    def test_monthly_override_wins(self, double_room):
        """Test a June override replaces the base rates in June."""
        assert RateResolver.resolve(double_room, date(2024, 6, 1)) == 150
        assert RateResolver.resolve(double_room, date(2024, 6, 30), GuestClass.CHILD) == 60

    def test_zero_override_falls_back_to_base(self):
        """Test an override of 0 means no override."""
        room = RoomType(
            type="DOUBLE ROOM",
            pricePerNight=90,
            childrenPricePerNight=20,
            monthlyPrices={"july": {"adult": 0, "child": ""}},
        )

        assert RateResolver.resolve_for_month(room, 7, GuestClass.ADULT) == 90
        assert RateResolver.resolve_for_month(room, 7, GuestClass.CHILD) == 20

    def test_override_for_one_class_only(self):
        """Test an adult-only override leaves the child rate on base."""
        room = RoomType(
            pricePerNight=90,
            childrenPricePerNight=20,
            monthlyPrices={"august": {"adult": 130}},
        )

        assert RateResolver.resolve_for_month(room, 8, GuestClass.ADULT) == 130
        assert RateResolver.resolve_for_month(room, 8, GuestClass.CHILD) == 20


class TestRoomTypeParsing:
    """Tests for monthly override table parsing."""

    def test_monthly_prices_as_list(self):
        """Test a 12-entry list is keyed January to December."""
        table = [{"adult": 0}] * 12
        table[11] = {"adult": 300, "child": 120}
        room = RoomType(pricePerNight=100, monthlyPrices=table)

        assert RateResolver.resolve_for_month(room, 12) == 300
        assert RateResolver.resolve_for_month(room, 1) == 100

    def test_monthly_prices_by_number(self):
        """Test numeric month keys are accepted and bad keys ignored."""
        room = RoomType(
            pricePerNight=100,
            monthlyPrices={"3": {"adult": 110}, "13": {"adult": 999}, "spring": {"adult": 1}},
        )

        assert set(room.monthly_prices) == {3}

    def test_negative_prices_are_clamped(self):
        """Test malformed negative prices never produce a negative rate."""
        room = RoomType(
            pricePerNight=-50,
            childrenPricePerNight="-5",
            monthlyPrices={"may": {"adult": -10}},
        )

        assert RateResolver.resolve_for_month(room, 5) == 0
        assert RateResolver.resolve_for_month(room, 5, GuestClass.CHILD) == 0
