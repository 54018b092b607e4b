"""Price breakdown models."""

from src.models.quote.breakdown import (
    HotelCostBreakdown,
    MonthSegment,
    PriceBreakdown,
    RoomCostResult,
    RoomTypeLine,
    TourCostLine,
    TransportCostResult,
)

__all__ = [
    "HotelCostBreakdown",
    "MonthSegment",
    "PriceBreakdown",
    "RoomCostResult",
    "RoomTypeLine",
    "TourCostLine",
    "TransportCostResult",
]
