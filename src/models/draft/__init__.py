"""Booking form state models."""

from src.models.draft.booking import (
    BookingDraft,
    DraftHotelEntry,
    GuestComposition,
    HotelEntry,
    RoomAllocation,
)

__all__ = [
    "BookingDraft",
    "DraftHotelEntry",
    "GuestComposition",
    "HotelEntry",
    "RoomAllocation",
]
