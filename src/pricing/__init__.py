"""Stay pricing and quotation engine."""

from src.pricing.date_segmenter import DateSegmenter
from src.pricing.quote_aggregator import QuoteAggregator
from src.pricing.rate_resolver import RateResolver
from src.pricing.room_cost_calculator import RoomCostCalculator
from src.pricing.tour_cost_calculator import TourCostCalculator
from src.pricing.transport_cost_resolver import TransferRequest, TransportCostResolver

__all__ = [
    "DateSegmenter",
    "QuoteAggregator",
    "RateResolver",
    "RoomCostCalculator",
    "TourCostCalculator",
    "TransferRequest",
    "TransportCostResolver",
]
