"""Pydantic models for booking form state (hotel legs, rooms, guests)."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.models.catalog.hotel import Hotel
from src.models.enums import ChildBand, VehicleTier
from src.models.fields import parse_count, parse_form_date, parse_optional_price


class GuestComposition(BaseModel):
    """Adults and children per age band."""

    adults: int = 0
    children_under_3: int = Field(default=0, alias="childrenUnder3")
    children_3_to_6: int = Field(default=0, alias="children3to6")
    children_6_to_12: int = Field(default=0, alias="children6to12")

    @field_validator(
        "adults", "children_under_3", "children_3_to_6", "children_6_to_12",
        mode="before",
    )
    @classmethod
    def parse_guest_count(cls, v):
        return parse_count(v)

    @classmethod
    def from_allocations(cls, allocations: list["RoomAllocation"]) -> "GuestComposition":
        """Aggregate guest counts over room allocations."""
        return cls(
            adults=sum(allocation.adults for allocation in allocations),
            children_under_3=sum(a.children_under_3 for a in allocations),
            children_3_to_6=sum(a.children_3_to_6 for a in allocations),
            children_6_to_12=sum(a.children_6_to_12 for a in allocations),
        )

    def children(self, band: ChildBand) -> int:
        return {
            ChildBand.UNDER_3: self.children_under_3,
            ChildBand.FROM_3_TO_6: self.children_3_to_6,
            ChildBand.FROM_6_TO_12: self.children_6_to_12,
        }[band]

    @property
    def headcount(self) -> int:
        return (
            self.adults
            + self.children_under_3
            + self.children_3_to_6
            + self.children_6_to_12
        )

    class Config:
        populate_by_name = True


class RoomAllocation(GuestComposition):
    """One room of a given room type and the guests assigned to it."""

    room_type_index: Optional[int] = Field(None, alias="roomTypeIndex")
    adults: int = Field(default=0, alias="occupants")

    @field_validator("room_type_index", mode="before")
    @classmethod
    def parse_room_type_index(cls, v):
        if v is None or v == "":
            return None
        try:
            return int(v)
        except (TypeError, ValueError):
            return None


class HotelEntry(BaseModel):
    """One hotel leg of a package, priced over its own dates."""

    hotel: Hotel
    check_in: Optional[date] = Field(None, alias="checkIn")
    check_out: Optional[date] = Field(None, alias="checkOut")
    room_allocations: list[RoomAllocation] = Field(
        default_factory=list, alias="roomAllocations"
    )
    include_breakfast: bool = Field(default=False, alias="includeBreakfast")
    selected_airport: Optional[str] = Field(None, alias="selectedAirport")
    include_reception: bool = Field(default=False, alias="includeReception")
    include_farewell: bool = Field(default=False, alias="includeFarewell")
    vehicle_tier: Optional[VehicleTier] = Field(None, alias="transportVehicleType")

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def parse_stay_date(cls, v):
        return parse_form_date(v)

    @field_validator("vehicle_tier", mode="before")
    @classmethod
    def parse_vehicle_tier(cls, v):
        return v or None

    class Config:
        populate_by_name = True


class DraftHotelEntry(BaseModel):
    """Serializable hotel leg of a booking draft, referencing the hotel by id."""

    hotel_id: str = Field(alias="hotelId")
    check_in: Optional[date] = Field(None, alias="checkIn")
    check_out: Optional[date] = Field(None, alias="checkOut")
    room_allocations: list[RoomAllocation] = Field(
        default_factory=list, alias="roomAllocations"
    )
    include_breakfast: bool = Field(default=False, alias="includeBreakfast")
    selected_airport: Optional[str] = Field(None, alias="selectedAirport")
    include_reception: bool = Field(default=False, alias="includeReception")
    include_farewell: bool = Field(default=False, alias="includeFarewell")
    vehicle_tier: Optional[VehicleTier] = Field(None, alias="transportVehicleType")

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def parse_stay_date(cls, v):
        return parse_form_date(v)

    @field_validator("vehicle_tier", mode="before")
    @classmethod
    def parse_vehicle_tier(cls, v):
        return v or None

    def to_hotel_entry(self, hotel: Hotel, include_children: bool = True) -> HotelEntry:
        """Bind this leg to its catalog hotel."""
        allocations = self.room_allocations
        if not include_children:
            allocations = [
                allocation.model_copy(
                    update={
                        "children_under_3": 0,
                        "children_3_to_6": 0,
                        "children_6_to_12": 0,
                    }
                )
                for allocation in allocations
            ]
        return HotelEntry(
            hotel=hotel,
            check_in=self.check_in,
            check_out=self.check_out,
            room_allocations=allocations,
            include_breakfast=self.include_breakfast,
            selected_airport=self.selected_airport,
            include_reception=self.include_reception,
            include_farewell=self.include_farewell,
            vehicle_tier=self.vehicle_tier,
        )

    class Config:
        populate_by_name = True


class BookingDraft(BaseModel):
    """Serializable booking form state that a quotation is computed from."""

    draft_id: Optional[str] = Field(None, alias="draftId")
    hotel_entries: list[DraftHotelEntry] = Field(default_factory=list, alias="hotelEntries")
    adults: int = Field(default=0, alias="numGuests")
    include_children: bool = Field(default=False, alias="includeChildren")
    children_under_3: int = Field(default=0, alias="childrenUnder3")
    children_3_to_6: int = Field(default=0, alias="children3to6")
    children_6_to_12: int = Field(default=0, alias="children6to12")
    selected_tours: list[str] = Field(default_factory=list, alias="selectedTours")
    manual_price: Optional[float] = Field(None, alias="tripPrice")

    @field_validator(
        "adults", "children_under_3", "children_3_to_6", "children_6_to_12",
        mode="before",
    )
    @classmethod
    def parse_guest_count(cls, v):
        return parse_count(v)

    @field_validator("manual_price", mode="before")
    @classmethod
    def parse_manual_price(cls, v):
        """A blank or zero manual price means the user has not typed one."""
        price = parse_optional_price(v)
        return price if price else None

    def guest_composition(self) -> GuestComposition:
        """Package-level guests; children are ignored when the children switch is off."""
        if not self.include_children:
            return GuestComposition(adults=self.adults)
        return GuestComposition(
            adults=self.adults,
            children_under_3=self.children_under_3,
            children_3_to_6=self.children_3_to_6,
            children_6_to_12=self.children_6_to_12,
        )

    class Config:
        populate_by_name = True
