"""Airport reception/farewell cost of one hotel leg."""

from typing import Callable, Optional

from structlog import get_logger

from src.config import settings
from src.models.catalog.hotel import (
    FlatPerPersonTransport,
    IndexedTransport,
    SingleTierTransport,
    TierPrices,
    TransportationData,
)
from src.models.draft.booking import GuestComposition, HotelEntry
from src.models.enums import CostCategory, TransferLeg, VehicleTier
from src.models.quote.breakdown import TransportCostResult
from src.pricing.child_policy import chargeable_bands

logger = get_logger(__name__)


class TransferRequest:
    """What a hotel leg asks of the transfer catalog."""

    def __init__(
        self,
        vehicle_tier: VehicleTier,
        include_reception: bool,
        include_farewell: bool,
        headcount: int = 0,
        airport: Optional[str] = None,
        hotel: Optional[str] = None,
        one_way_factor: Optional[float] = None,
    ):
        self.vehicle_tier = vehicle_tier
        self.include_reception = include_reception
        self.include_farewell = include_farewell
        self.headcount = max(0, headcount)
        self.airport = airport
        self.hotel = hotel
        self.one_way_factor = (
            settings.pricing.one_way_transfer_factor
            if one_way_factor is None
            else one_way_factor
        )

    @property
    def legs(self) -> list[TransferLeg]:
        legs = []
        if self.include_reception:
            legs.append(TransferLeg.RECEPTION)
        if self.include_farewell:
            legs.append(TransferLeg.FAREWELL)
        return legs


class TransportCostResolver:
    """Resolves transfer prices from any of the three catalog shapes.

    Missing data never raises: the affected leg costs 0 and a warning is logged.
    """

    @staticmethod
    def chargeable_headcount(guests: GuestComposition) -> int:
        """Guests billed by the legacy per-person price: adults and every seated child."""
        return guests.adults + sum(
            guests.children(band) for band in chargeable_bands(CostCategory.TRANSFER)
        )

    @staticmethod
    def _tier_cost(
        prices: TierPrices,
        request: TransferRequest,
        shape: str,
        airport: Optional[str] = None,
    ) -> TransportCostResult:
        costs = {TransferLeg.RECEPTION: 0.0, TransferLeg.FAREWELL: 0.0}
        for leg in request.legs:
            price = prices.price_for(request.vehicle_tier, leg)
            if price is None:
                logger.warning(
                    "No transfer price for vehicle tier, leg priced at 0",
                    hotel=request.hotel,
                    shape=shape,
                    airport=airport,
                    vehicle_tier=request.vehicle_tier.value,
                    leg=leg.value,
                )
                continue
            costs[leg] = price

        reception = costs[TransferLeg.RECEPTION]
        farewell = costs[TransferLeg.FAREWELL]
        return TransportCostResult(
            reception_cost=reception,
            farewell_cost=farewell,
            total_cost=reception + farewell,
            shape=shape,
            airport=airport,
        )

    @staticmethod
    def _resolve_indexed(
        transport: IndexedTransport,
        request: TransferRequest,
    ) -> TransportCostResult:
        entry, fell_back = transport.entry_for(request.airport)
        if entry is None:
            logger.warning(
                "Airport transfer table is empty, transfer priced at 0",
                hotel=request.hotel,
            )
            return TransportCostResult(shape=transport.kind)
        if fell_back:
            logger.info(
                "Selected airport not in transfer table, using first listed airport",
                hotel=request.hotel,
                selected_airport=request.airport,
                airport=entry.airport,
            )
        return TransportCostResolver._tier_cost(
            entry.transportation, request, transport.kind, entry.airport
        )

    @staticmethod
    def _resolve_single_tier(
        transport: SingleTierTransport,
        request: TransferRequest,
    ) -> TransportCostResult:
        return TransportCostResolver._tier_cost(
            transport.prices, request, transport.kind, request.airport
        )

    @staticmethod
    def _resolve_flat_per_person(
        transport: FlatPerPersonTransport,
        request: TransferRequest,
    ) -> TransportCostResult:
        """Round trip costs price x headcount; a one-way transfer costs a share of it."""
        round_trip = transport.price_per_person * request.headcount
        reception = farewell = 0.0
        if request.include_reception and request.include_farewell:
            reception = farewell = round_trip / 2
        elif request.include_reception:
            reception = round_trip * request.one_way_factor
        elif request.include_farewell:
            farewell = round_trip * request.one_way_factor
        return TransportCostResult(
            reception_cost=reception,
            farewell_cost=farewell,
            total_cost=reception + farewell,
            shape=transport.kind,
            airport=request.airport,
        )

    @staticmethod
    def resolve(
        transport: Optional[TransportationData],
        request: TransferRequest,
    ) -> TransportCostResult:
        """Price the requested transfer legs.

        Args:
            transport: Hotel transportation data in any catalog shape
            request: Airport, vehicle tier, legs and headcount of the hotel leg

        Returns:
            TransportCostResult with unrounded reception, farewell and total
        """
        if not request.legs:
            return TransportCostResult(airport=request.airport)

        if transport is None:
            logger.warning(
                "Transfer requested but hotel has no transportation data",
                hotel=request.hotel,
                legs=[leg.value for leg in request.legs],
            )
            return TransportCostResult(airport=request.airport)

        resolver = _RESOLVERS[type(transport)]
        result = resolver(transport, request)
        logger.debug(
            "Resolved transfer cost",
            hotel=request.hotel,
            shape=result.shape,
            reception_cost=result.reception_cost,
            farewell_cost=result.farewell_cost,
        )
        return result

    @staticmethod
    def resolve_for_entry(
        entry: HotelEntry,
        guests: GuestComposition,
        one_way_factor: Optional[float] = None,
    ) -> TransportCostResult:
        """Price the transfers of a hotel leg for the given guests."""
        request = TransferRequest(
            vehicle_tier=entry.vehicle_tier or VehicleTier(settings.pricing.default_vehicle_tier),
            include_reception=entry.include_reception,
            include_farewell=entry.include_farewell,
            headcount=TransportCostResolver.chargeable_headcount(guests),
            airport=entry.selected_airport or entry.hotel.airport,
            hotel=entry.hotel.name,
            one_way_factor=one_way_factor,
        )
        return TransportCostResolver.resolve(entry.hotel.transport, request)


_RESOLVERS: dict[type, Callable[..., TransportCostResult]] = {
    IndexedTransport: TransportCostResolver._resolve_indexed,
    SingleTierTransport: TransportCostResolver._resolve_single_tier,
    FlatPerPersonTransport: TransportCostResolver._resolve_flat_per_person,
}
