"""Itemized quotation across every hotel leg and selected tour."""

from typing import Optional

from structlog import get_logger

from src.models.catalog.tour import Tour
from src.models.draft.booking import GuestComposition, HotelEntry
from src.models.quote.breakdown import (
    HotelCostBreakdown,
    PriceBreakdown,
    RoomTypeLine,
    TourCostLine,
    TransportCostResult,
)
from src.pricing.money import round_money, to_money
from src.pricing.room_cost_calculator import RoomCostCalculator
from src.pricing.tour_cost_calculator import TourCostCalculator
from src.pricing.transport_cost_resolver import TransportCostResolver

logger = get_logger(__name__)


class QuoteAggregator:
    """Combines room, breakfast, transfer and tour costs into a PriceBreakdown."""

    @staticmethod
    def _price_hotel_leg(
        entry: HotelEntry,
        guests: GuestComposition,
    ) -> tuple[HotelCostBreakdown, float, float]:
        """Price one hotel leg.

        Returns:
            Tuple of (rounded breakdown, unrounded subtotal, unrounded transfer cost)
        """
        leg_guests = (
            GuestComposition.from_allocations(entry.room_allocations)
            if entry.room_allocations
            else guests
        )
        rooms = RoomCostCalculator.calculate(entry, guests)
        transport = TransportCostResolver.resolve_for_entry(entry, leg_guests)
        subtotal = rooms.total_cost + transport.total_cost

        breakdown = HotelCostBreakdown(
            hotel_id=entry.hotel.id,
            hotel_name=entry.hotel.name,
            check_in=entry.check_in,
            check_out=entry.check_out,
            nights=rooms.nights,
            room_cost=to_money(rooms.room_cost),
            breakfast_cost=to_money(rooms.breakfast_cost),
            transport_cost=to_money(transport.total_cost),
            subtotal=to_money(subtotal),
            estimated_rooms=rooms.estimated,
            segments=rooms.segments,
            room_lines=[
                RoomTypeLine(
                    room_type=line.room_type,
                    rooms=line.rooms,
                    adults=line.adults,
                    children_6_to_12=line.children_6_to_12,
                    cost=to_money(line.cost),
                )
                for line in rooms.room_lines
            ],
            transport=TransportCostResult(
                reception_cost=to_money(transport.reception_cost),
                farewell_cost=to_money(transport.farewell_cost),
                total_cost=to_money(transport.total_cost),
                shape=transport.shape,
                airport=transport.airport,
            ),
        )
        return breakdown, max(0.0, subtotal), max(0.0, transport.total_cost)

    @staticmethod
    def aggregate(
        hotel_entries: list[HotelEntry],
        tours: list[Tour],
        guests: GuestComposition,
        manual_price: Optional[float] = None,
    ) -> PriceBreakdown:
        """Build the full price breakdown of a package.

        Each hotel subtotal holds its room, breakfast and transfer cost.
        ``transportation`` repeats the transfer costs for display only;
        ``total`` is hotel subtotals plus tours. Sums are accumulated
        unrounded and rounded once when surfaced. A manual price is carried
        alongside the total, never in place of it.

        Args:
            hotel_entries: Hotel legs, each with its own dates
            tours: Selected tours
            guests: Package guests (tours, and hotels without allocations)
            manual_price: Price typed by the user, if any

        Returns:
            PriceBreakdown
        """
        hotels: list[HotelCostBreakdown] = []
        hotels_total = 0.0
        transportation_total = 0.0

        for index, entry in enumerate(hotel_entries):
            try:
                breakdown, subtotal, transport_cost = QuoteAggregator._price_hotel_leg(
                    entry, guests
                )
            except Exception as e:
                logger.error(
                    "Failed to price hotel leg, leg priced at 0",
                    hotel=entry.hotel.name,
                    hotel_entry=index,
                    error=str(e),
                    exc_info=True,
                )
                breakdown = HotelCostBreakdown(
                    hotel_id=entry.hotel.id,
                    hotel_name=entry.hotel.name,
                    check_in=entry.check_in,
                    check_out=entry.check_out,
                )
                subtotal = transport_cost = 0.0

            hotels.append(breakdown)
            hotels_total += subtotal
            transportation_total += transport_cost

        tour_lines: list[TourCostLine] = []
        tours_total = 0.0
        for tour in tours:
            try:
                line = TourCostCalculator.calculate_line(tour, guests)
                cost = max(0.0, line.cost)
                line = line.model_copy(update={"cost": to_money(cost)})
            except Exception as e:
                logger.error(
                    "Failed to price tour, tour priced at 0",
                    tour=tour.name,
                    error=str(e),
                    exc_info=True,
                )
                line = TourCostLine(tour_id=tour.id, name=tour.name, tour_type=tour.tour_type)
                cost = 0.0
            tours_total += cost
            tour_lines.append(line)

        total = hotels_total + tours_total

        manual_price_difference = None
        if manual_price is not None:
            manual_price_difference = round_money(manual_price - to_money(total))

        breakdown = PriceBreakdown(
            hotels=hotels,
            transportation=to_money(transportation_total),
            tours=to_money(tours_total),
            tour_lines=tour_lines,
            total=to_money(total),
            manual_price=to_money(manual_price) if manual_price is not None else None,
            manual_price_difference=manual_price_difference,
        )

        logger.info(
            "Calculated quotation",
            hotel_legs=len(hotels),
            tours=len(tour_lines),
            transportation=breakdown.transportation,
            tours_total=breakdown.tours,
            total=breakdown.total,
            manual_price=breakdown.manual_price,
        )

        return breakdown
