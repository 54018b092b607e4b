"""Hotel and tour catalog models."""

from src.models.catalog.hotel import (
    MONTH_NAMES,
    AirportTransport,
    FlatPerPersonTransport,
    Hotel,
    IndexedTransport,
    MonthlyRate,
    RoomType,
    SingleTierTransport,
    TierPrices,
    TransportationData,
    transportation_from_record,
)
from src.models.catalog.tour import CarCapacity, Tour

__all__ = [
    "MONTH_NAMES",
    "AirportTransport",
    "CarCapacity",
    "FlatPerPersonTransport",
    "Hotel",
    "IndexedTransport",
    "MonthlyRate",
    "RoomType",
    "SingleTierTransport",
    "TierPrices",
    "Tour",
    "TransportationData",
    "transportation_from_record",
]
