"""Tour pricing under the VIP (flat) and Group (per person) models."""

from structlog import get_logger

from src.models.catalog.tour import Tour
from src.models.draft.booking import GuestComposition
from src.models.enums import ChildBand, CostCategory, TourType
from src.models.quote.breakdown import TourCostLine
from src.pricing.child_policy import band_charge

logger = get_logger(__name__)


class TourCostCalculator:
    """Prices a single tour for the package guests."""

    @staticmethod
    def calculate(tour: Tour, guests: GuestComposition) -> float:
        """Calculate the cost of one tour.

        VIP tours are one vehicle at one price whatever the headcount.
        Group tours bill adults at the tour price and children per the
        tour column of the child-band policy: 6-12 as adults, 3-6 at the
        children price when the tour has one, under 3 free.

        Args:
            tour: Tour catalog record
            guests: Package guests

        Returns:
            Unrounded tour cost
        """
        if tour.tour_type == TourType.VIP:
            return tour.price

        cost = tour.price * guests.adults
        for band in ChildBand:
            cost += band_charge(
                CostCategory.TOUR,
                band,
                guests.children(band),
                adult_price=tour.price,
                band_price=tour.children_price,
            )
        return cost

    @staticmethod
    def calculate_line(tour: Tour, guests: GuestComposition) -> TourCostLine:
        """Calculate one tour as an itemized line (unrounded)."""
        cost = TourCostCalculator.calculate(tour, guests)
        logger.debug(
            "Calculated tour cost",
            tour=tour.name,
            tour_type=tour.tour_type.value,
            cost=cost,
        )
        return TourCostLine(
            tour_id=tour.id,
            name=tour.name,
            tour_type=tour.tour_type,
            cost=cost,
        )
