"""Accommodation and breakfast cost of one hotel leg."""

import math
from typing import Optional

from structlog import get_logger

from src.config import settings
from src.models.catalog.hotel import RoomType
from src.models.draft.booking import GuestComposition, HotelEntry
from src.models.enums import ChildBand, CostCategory, GuestClass
from src.models.quote.breakdown import MonthSegment, RoomCostResult, RoomTypeLine
from src.pricing.child_policy import band_charge
from src.pricing.date_segmenter import DateSegmenter
from src.pricing.rate_resolver import RateResolver

logger = get_logger(__name__)


class RoomCostCalculator:
    """Prices the rooms and breakfast of a hotel leg over its own dates."""

    @staticmethod
    def _stay_cost(
        room_type: RoomType,
        segments: list[MonthSegment],
        rooms: int,
        guests: GuestComposition,
    ) -> float:
        """Accrue ``rooms`` rooms of one type plus their chargeable children, month by month."""
        cost = 0.0
        for segment in segments:
            adult_rate = RateResolver.resolve_for_month(
                room_type, segment.month, GuestClass.ADULT
            )
            child_rate = RateResolver.resolve_for_month(
                room_type, segment.month, GuestClass.CHILD
            )
            cost += adult_rate * segment.night_count * rooms
            for band in ChildBand:
                cost += band_charge(
                    CostCategory.ACCOMMODATION,
                    band,
                    guests.children(band),
                    adult_price=adult_rate,
                    band_price=child_rate,
                ) * segment.night_count
        return cost

    @staticmethod
    def _allocated_cost(
        entry: HotelEntry,
        segments: list[MonthSegment],
    ) -> tuple[float, int, list[RoomTypeLine]]:
        """Price each allocated room; allocations with an unknown room type are skipped."""
        room_types = entry.hotel.room_types
        lines: dict[str, RoomTypeLine] = {}
        room_cost = 0.0
        room_count = 0

        for position, allocation in enumerate(entry.room_allocations):
            index = allocation.room_type_index
            if index is None or not 0 <= index < len(room_types):
                logger.warning(
                    "Skipping room allocation with unknown room type",
                    hotel=entry.hotel.name,
                    allocation=position,
                    room_type_index=index,
                    room_types=len(room_types),
                )
                continue

            room_type = room_types[index]
            cost = RoomCostCalculator._stay_cost(room_type, segments, 1, allocation)
            room_cost += cost
            room_count += 1

            label = room_type.label or f"Room type {index + 1}"
            line = lines.setdefault(label, RoomTypeLine(room_type=label))
            line.rooms += 1
            line.adults += allocation.adults
            line.children_6_to_12 += allocation.children_6_to_12
            line.cost += cost

        return room_cost, room_count, list(lines.values())

    @staticmethod
    def _estimated_cost(
        entry: HotelEntry,
        segments: list[MonthSegment],
        guests: GuestComposition,
        guests_per_room: int,
    ) -> tuple[float, int, list[RoomTypeLine]]:
        """Price implied rooms of the first room type when nothing is allocated yet."""
        room_type = entry.hotel.room_types[0]
        room_count = math.ceil(guests.adults / guests_per_room)
        cost = RoomCostCalculator._stay_cost(room_type, segments, room_count, guests)
        label = room_type.label or "Room type 1"
        line = RoomTypeLine(
            room_type=label,
            rooms=room_count,
            adults=guests.adults,
            children_6_to_12=guests.children_6_to_12,
            cost=cost,
        )
        return cost, room_count, [line]

    @staticmethod
    def _legacy_per_person_cost(
        entry: HotelEntry,
        nights: int,
        guests: GuestComposition,
        guests_per_room: int,
        legacy_child_rate_factor: float,
    ) -> tuple[float, int]:
        """Price a hotel record that predates room types: per person per night."""
        hotel = entry.hotel
        adult_rate = hotel.price_per_night_per_person or 0.0
        child_rate = hotel.children_price or adult_rate * legacy_child_rate_factor
        cost = adult_rate * nights * guests.adults
        for band in ChildBand:
            cost += band_charge(
                CostCategory.ACCOMMODATION,
                band,
                guests.children(band),
                adult_price=adult_rate,
                band_price=child_rate,
            ) * nights
        room_count = len(entry.room_allocations) or math.ceil(guests.adults / guests_per_room)
        return cost, room_count

    @staticmethod
    def calculate(
        entry: HotelEntry,
        guests: Optional[GuestComposition] = None,
        guests_per_room: Optional[int] = None,
        legacy_child_rate_factor: Optional[float] = None,
    ) -> RoomCostResult:
        """Calculate room and breakfast cost for a hotel leg.

        With room allocations, every allocated room is billed at its room
        type's adult rate per night, plus the child rate per night for each
        child aged 6-12 in it. Without allocations, ceil(adults / guests
        per room) rooms of the first room type are assumed. Breakfast is
        billed per room per night.

        Args:
            entry: Hotel leg with dates, allocations and options
            guests: Package guests, used when no rooms are allocated
            guests_per_room: Occupancy for implied rooms (default from settings)
            legacy_child_rate_factor: Child share of the legacy per-person rate
                (default from settings)

        Returns:
            Unrounded RoomCostResult
        """
        guests_per_room = max(1, guests_per_room or settings.pricing.guests_per_room)
        if legacy_child_rate_factor is None:
            legacy_child_rate_factor = settings.pricing.legacy_child_rate_factor

        hotel = entry.hotel
        segments = DateSegmenter.segment(entry.check_in, entry.check_out)
        nights = sum(segment.night_count for segment in segments)

        if entry.room_allocations:
            guests = GuestComposition.from_allocations(entry.room_allocations)
        elif guests is None:
            guests = GuestComposition()

        estimated = False
        room_lines: list[RoomTypeLine] = []
        if hotel.room_types:
            if entry.room_allocations:
                room_cost, room_count, room_lines = RoomCostCalculator._allocated_cost(
                    entry, segments
                )
            else:
                estimated = True
                room_cost, room_count, room_lines = RoomCostCalculator._estimated_cost(
                    entry, segments, guests, guests_per_room
                )
        elif hotel.price_per_night_per_person:
            room_cost, room_count = RoomCostCalculator._legacy_per_person_cost(
                entry, nights, guests, guests_per_room, legacy_child_rate_factor
            )
        else:
            logger.warning(
                "Hotel has no room pricing, accommodation priced at 0",
                hotel=hotel.name,
                hotel_id=hotel.id,
            )
            room_cost, room_count = 0.0, len(entry.room_allocations)

        breakfast_cost = 0.0
        if entry.include_breakfast:
            if hotel.breakfast_included and hotel.breakfast_price > 0:
                breakfast_cost = hotel.breakfast_price * room_count * nights
            else:
                logger.warning(
                    "Breakfast requested but hotel has no breakfast price",
                    hotel=hotel.name,
                    breakfast_included=hotel.breakfast_included,
                )

        logger.debug(
            "Calculated room cost",
            hotel=hotel.name,
            nights=nights,
            room_count=room_count,
            estimated=estimated,
            room_cost=room_cost,
            breakfast_cost=breakfast_cost,
        )

        return RoomCostResult(
            room_cost=room_cost,
            breakfast_cost=breakfast_cost,
            total_cost=room_cost + breakfast_cost,
            nights=nights,
            room_count=room_count,
            estimated=estimated,
            segments=segments,
            room_lines=room_lines,
        )
