"""Pydantic models for itemized price breakdowns."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from src.models.enums import TourType


class MonthSegment(BaseModel):
    """Nights of a stay falling in one calendar month."""

    year: int
    month: int
    night_count: int = Field(alias="nightCount")

    class Config:
        populate_by_name = True


class RoomTypeLine(BaseModel):
    """Accommodation cost grouped by room type, for itemized display."""

    room_type: str = Field(alias="roomType")
    rooms: int = 0
    adults: int = 0
    children_6_to_12: int = Field(default=0, alias="children6to12")
    cost: float = 0.0

    class Config:
        populate_by_name = True


class RoomCostResult(BaseModel):
    """Accommodation and breakfast cost of one hotel leg (unrounded)."""

    room_cost: float = Field(default=0.0, alias="roomCost")
    breakfast_cost: float = Field(default=0.0, alias="breakfastCost")
    total_cost: float = Field(default=0.0, alias="totalCost")
    nights: int = 0
    room_count: int = Field(default=0, alias="roomCount")
    estimated: bool = False  # Rooms implied from the adult count
    segments: list[MonthSegment] = Field(default_factory=list)
    room_lines: list[RoomTypeLine] = Field(default_factory=list, alias="roomLines")

    class Config:
        populate_by_name = True


class TransportCostResult(BaseModel):
    """Airport reception and farewell cost of one hotel leg."""

    reception_cost: float = Field(default=0.0, alias="receptionCost")
    farewell_cost: float = Field(default=0.0, alias="farewellCost")
    total_cost: float = Field(default=0.0, alias="totalCost")
    shape: Optional[str] = None  # Transportation variant the price came from
    airport: Optional[str] = None

    class Config:
        populate_by_name = True


class TourCostLine(BaseModel):
    """Cost of one selected tour."""

    tour_id: Optional[str] = Field(None, alias="tourId")
    name: str = ""
    tour_type: TourType = Field(alias="tourType")
    cost: float = 0.0

    class Config:
        populate_by_name = True


class HotelCostBreakdown(BaseModel):
    """Surfaced, rounded costs of one hotel leg."""

    hotel_id: Optional[str] = Field(None, alias="hotelId")
    hotel_name: str = Field(default="", alias="hotelName")
    check_in: Optional[date] = Field(None, alias="checkIn")
    check_out: Optional[date] = Field(None, alias="checkOut")
    nights: int = 0
    room_cost: float = Field(default=0.0, alias="roomCost")
    breakfast_cost: float = Field(default=0.0, alias="breakfastCost")
    transport_cost: float = Field(default=0.0, alias="transportCost")
    subtotal: float = 0.0
    estimated_rooms: bool = Field(default=False, alias="estimatedRooms")
    segments: list[MonthSegment] = Field(default_factory=list)
    room_lines: list[RoomTypeLine] = Field(default_factory=list, alias="roomLines")
    transport: TransportCostResult = Field(default_factory=TransportCostResult)

    class Config:
        populate_by_name = True


class PriceBreakdown(BaseModel):
    """Complete quotation for a package.

    ``total`` is the sum of hotel subtotals plus ``tours``. ``transportation``
    repeats the transfer costs already inside the hotel subtotals for display.
    ``manual_price`` is advisory and never replaces ``total``.
    """

    hotels: list[HotelCostBreakdown] = Field(default_factory=list)
    transportation: float = 0.0
    tours: float = 0.0
    tour_lines: list[TourCostLine] = Field(default_factory=list, alias="tourLines")
    total: float = 0.0
    manual_price: Optional[float] = Field(None, alias="manualPrice")
    manual_price_difference: Optional[float] = Field(
        None, alias="manualPriceDifference"
    )

    class Config:
        populate_by_name = True

    @property
    def has_manual_discrepancy(self) -> bool:
        """True when a manually typed price differs from the computed total."""
        return bool(self.manual_price_difference)

    def to_dict(self) -> dict:
        """Convert to the camelCase JSON shape stored with bookings and vouchers."""
        return self.model_dump(mode="json", by_alias=True)
