"""Quotation of booking drafts against the catalog."""

from structlog import get_logger

from src.models.catalog.tour import Tour
from src.models.draft.booking import BookingDraft, HotelEntry
from src.models.quote.breakdown import PriceBreakdown
from src.pricing.quote_aggregator import QuoteAggregator
from src.services.catalog import CatalogIndex

logger = get_logger(__name__)


class QuotationService:
    """Binds a booking draft to catalog records and prices it.

    Every call recomputes from the draft; a previously stored total is
    never reused, so quotations stay in sync with edits.
    """

    def __init__(self, catalog: CatalogIndex):
        """Initialize the service.

        Args:
            catalog: Hotel and tour records to price against
        """
        self.catalog = catalog

    def hotel_entries(self, draft: BookingDraft) -> list[HotelEntry]:
        """Resolve the draft's hotel legs; legs with an unknown hotel are skipped."""
        entries = []
        for index, draft_entry in enumerate(draft.hotel_entries):
            hotel = self.catalog.hotel(draft_entry.hotel_id)
            if hotel is None:
                logger.warning(
                    "Skipping hotel leg with unknown hotel",
                    hotel_entry=index,
                    hotel_id=draft_entry.hotel_id,
                )
                continue
            entries.append(draft_entry.to_hotel_entry(hotel, draft.include_children))
        return entries

    def selected_tours(self, draft: BookingDraft) -> list[Tour]:
        """Resolve the draft's selected tour ids; unknown ids are skipped."""
        tours = []
        for tour_id in draft.selected_tours:
            tour = self.catalog.tour(tour_id)
            if tour is None:
                logger.warning("Skipping unknown selected tour", tour_id=tour_id)
                continue
            tours.append(tour)
        return tours

    def quote(self, draft: BookingDraft) -> PriceBreakdown:
        """Compute the itemized price of a booking draft.

        Args:
            draft: Booking form state

        Returns:
            PriceBreakdown with the manual price carried as an advisory field
        """
        logger.info(
            "Quoting booking draft",
            draft_id=draft.draft_id,
            hotel_legs=len(draft.hotel_entries),
            selected_tours=len(draft.selected_tours),
        )
        breakdown = QuoteAggregator.aggregate(
            hotel_entries=self.hotel_entries(draft),
            tours=self.selected_tours(draft),
            guests=draft.guest_composition(),
            manual_price=draft.manual_price,
        )
        if breakdown.has_manual_discrepancy:
            logger.warning(
                "Manual price differs from computed total",
                draft_id=draft.draft_id,
                manual_price=breakdown.manual_price,
                total=breakdown.total,
                difference=breakdown.manual_price_difference,
            )
        return breakdown
