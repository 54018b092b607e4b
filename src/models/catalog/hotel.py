"""Pydantic models for hotel catalog records."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from src.models.enums import GuestClass, TransferLeg, VehicleTier
from src.models.fields import parse_optional_price, parse_price

MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]


class MonthlyRate(BaseModel):
    """Seasonal nightly rates for one calendar month. None or 0 means no override."""

    adult: Optional[float] = None
    child: Optional[float] = None

    @field_validator("adult", "child", mode="before")
    @classmethod
    def parse_rate(cls, v):
        return parse_optional_price(v)

    def for_class(self, guest_class: GuestClass) -> Optional[float]:
        return self.child if guest_class == GuestClass.CHILD else self.adult


class RoomType(BaseModel):
    """Room type with base nightly prices and optional monthly overrides."""

    label: str = Field(default="", alias="type")
    price_per_night: float = Field(default=0.0, alias="pricePerNight")
    children_price_per_night: float = Field(default=0.0, alias="childrenPricePerNight")
    monthly_prices: dict[int, MonthlyRate] = Field(
        default_factory=dict, alias="monthlyPrices"
    )

    @field_validator("price_per_night", "children_price_per_night", mode="before")
    @classmethod
    def parse_base_price(cls, v):
        return parse_price(v)

    @field_validator("monthly_prices", mode="before")
    @classmethod
    def parse_monthly_prices(cls, v):
        """Key monthly overrides by month number (1-12).

        Accepts a dict keyed by English month name or month number,
        or a 12-entry list ordered January to December.
        """
        if not v:
            return {}
        if isinstance(v, list):
            return {
                index + 1: entry
                for index, entry in enumerate(v[:12])
                if entry is not None
            }
        if not isinstance(v, dict):
            return {}

        monthly: dict[int, Any] = {}
        for key, entry in v.items():
            if entry is None:
                continue
            if isinstance(key, str) and key.strip().lower() in MONTH_NAMES:
                monthly[MONTH_NAMES.index(key.strip().lower()) + 1] = entry
                continue
            try:
                month = int(key)
            except (TypeError, ValueError):
                continue
            if 1 <= month <= 12:
                monthly[month] = entry
        return monthly

    def base_price(self, guest_class: GuestClass) -> float:
        if guest_class == GuestClass.CHILD:
            return self.children_price_per_night
        return self.price_per_night

    class Config:
        extra = "allow"
        populate_by_name = True


class TierPrices(BaseModel):
    """Reception/farewell transfer prices per vehicle tier."""

    vito_reception: Optional[float] = Field(None, alias="vitoReceptionPrice")
    vito_farewell: Optional[float] = Field(None, alias="vitoFarewellPrice")
    sprinter_reception: Optional[float] = Field(None, alias="sprinterReceptionPrice")
    sprinter_farewell: Optional[float] = Field(None, alias="sprinterFarewellPrice")
    bus_reception: Optional[float] = Field(None, alias="busReceptionPrice")
    bus_farewell: Optional[float] = Field(None, alias="busFarewellPrice")

    @field_validator("*", mode="before")
    @classmethod
    def parse_tier_price(cls, v):
        return parse_optional_price(v)

    def price_for(self, tier: VehicleTier, leg: TransferLeg) -> Optional[float]:
        """Get the price of one transfer leg for a vehicle tier, None when not set."""
        price = getattr(self, f"{tier.value.lower()}_{leg.value}")
        # A zero price in the catalog is an unfilled form field
        return price if price else None

    def has_any_price(self) -> bool:
        return any(getattr(self, name) for name in type(self).model_fields)

    class Config:
        extra = "allow"
        populate_by_name = True


class AirportTransport(BaseModel):
    """Transfer prices between one airport and the hotel."""

    airport: str = ""
    transportation: TierPrices = Field(default_factory=TierPrices)

    class Config:
        extra = "allow"
        populate_by_name = True


class IndexedTransport(BaseModel):
    """Airport-indexed transfer table (current catalog shape)."""

    kind: Literal["indexed"] = "indexed"
    airports: list[AirportTransport] = Field(default_factory=list)

    def entry_for(self, airport: Optional[str]) -> tuple[Optional[AirportTransport], bool]:
        """Find the entry for an airport, falling back to the first listed one.

        Returns:
            Tuple of (entry or None when the table is empty, fell_back flag)
        """
        if not self.airports:
            return None, False
        if airport:
            for entry in self.airports:
                if entry.airport == airport:
                    return entry, False
        return self.airports[0], True


class SingleTierTransport(BaseModel):
    """Airport-agnostic tier prices (previous catalog shape)."""

    kind: Literal["single_tier"] = "single_tier"
    prices: TierPrices = Field(default_factory=TierPrices)


class FlatPerPersonTransport(BaseModel):
    """Legacy per-person transfer price without vehicle tiers."""

    kind: Literal["flat_per_person"] = "flat_per_person"
    price_per_person: float = 0.0

    @field_validator("price_per_person", mode="before")
    @classmethod
    def parse_flat_price(cls, v):
        return parse_price(v)


TransportationData = Annotated[
    Union[IndexedTransport, SingleTierTransport, FlatPerPersonTransport],
    Field(discriminator="kind"),
]


def transportation_from_record(record: dict[str, Any]) -> Optional[TransportationData]:
    """Detect which transportation shape a raw hotel record carries.

    Precedence: a non-empty ``airportTransportation`` table, then a
    ``transportation`` object holding at least one tier price, then a
    positive legacy ``transportationPrice``.

    Args:
        record: Raw hotel catalog record

    Returns:
        The transportation variant, or None when the record has no transfer pricing
    """
    airport_table = record.get("airportTransportation")
    if isinstance(airport_table, list) and airport_table:
        return IndexedTransport(
            airports=[
                entry if isinstance(entry, AirportTransport) else AirportTransport(**entry)
                for entry in airport_table
                if entry
            ]
        )

    tier_object = record.get("transportation")
    if isinstance(tier_object, TierPrices):
        tier_object = tier_object.model_dump(by_alias=True)
    if isinstance(tier_object, dict):
        prices = TierPrices(**tier_object)
        if prices.has_any_price():
            return SingleTierTransport(prices=prices)

    flat_price = parse_optional_price(record.get("transportationPrice"))
    if flat_price:
        return FlatPerPersonTransport(price_per_person=flat_price)

    return None


class Hotel(BaseModel):
    """Hotel catalog record as seen by the quotation engine."""

    id: Optional[str] = Field(None, alias="_id")
    name: str = ""
    city: Optional[str] = None
    stars: Optional[int] = None
    room_types: list[RoomType] = Field(default_factory=list, alias="roomTypes")
    breakfast_included: bool = Field(default=False, alias="breakfastIncluded")
    breakfast_price: float = Field(default=0.0, alias="breakfastPrice")
    price_per_night_per_person: Optional[float] = Field(
        None, alias="pricePerNightPerPerson"
    )
    children_price: Optional[float] = Field(None, alias="childrenPrice")
    airport: Optional[str] = None
    transport: Optional[TransportationData] = None

    @model_validator(mode="before")
    @classmethod
    def detect_transportation(cls, data):
        """Resolve the raw transportation fields into a single variant."""
        if isinstance(data, dict) and data.get("transport") is None:
            data = dict(data)
            data["transport"] = transportation_from_record(data)
        return data

    @field_validator("breakfast_price", mode="before")
    @classmethod
    def parse_breakfast_price(cls, v):
        return parse_price(v)

    @field_validator("price_per_night_per_person", "children_price", mode="before")
    @classmethod
    def parse_legacy_price(cls, v):
        return parse_optional_price(v)

    @property
    def known_airports(self) -> list[str]:
        """Airports a transfer can be booked from, in catalog order."""
        if isinstance(self.transport, IndexedTransport):
            return [entry.airport for entry in self.transport.airports if entry.airport]
        return [self.airport] if self.airport else []

    class Config:
        extra = "allow"
        populate_by_name = True
