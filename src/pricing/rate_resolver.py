"""Nightly rate resolution with monthly overrides."""

from datetime import date

from src.models.catalog.hotel import RoomType
from src.models.enums import GuestClass


class RateResolver:
    """Resolves the nightly adult or child rate of a room type."""

    @staticmethod
    def resolve_for_month(
        room_type: RoomType,
        month: int,
        guest_class: GuestClass = GuestClass.ADULT,
    ) -> float:
        """Get the nightly rate for a calendar month.

        The monthly override wins when it is set and greater than 0,
        otherwise the room type's base price for the guest class applies.

        Args:
            room_type: Room type from the hotel catalog
            month: Calendar month (1-12)
            guest_class: Adult or child rate

        Returns:
            Nightly rate (never negative)
        """
        monthly_rate = room_type.monthly_prices.get(month)
        if monthly_rate is not None:
            override = monthly_rate.for_class(guest_class)
            if override is not None and override > 0:
                return override
        return max(0.0, room_type.base_price(guest_class))

    @staticmethod
    def resolve(
        room_type: RoomType,
        on: date,
        guest_class: GuestClass = GuestClass.ADULT,
    ) -> float:
        """Get the nightly rate for the night starting on a date."""
        return RateResolver.resolve_for_month(room_type, on.month, guest_class)
