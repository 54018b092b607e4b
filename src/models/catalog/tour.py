"""Pydantic models for tour catalog records."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.models.enums import TourType, VehicleTier
from src.models.fields import parse_optional_price, parse_price


class CarCapacity(BaseModel):
    """Seat range of a VIP vehicle. Informational only."""

    min: Optional[int] = None
    max: Optional[int] = None


class Tour(BaseModel):
    """Tour catalog record."""

    id: Optional[str] = Field(None, alias="_id")
    name: str = ""
    city: Optional[str] = None
    tour_type: TourType = Field(alias="tourType")
    price: float = 0.0
    children_price: Optional[float] = Field(None, alias="childrenPrice")
    vip_car_type: Optional[VehicleTier] = Field(None, alias="vipCarType")
    car_capacity: Optional[CarCapacity] = Field(None, alias="carCapacity")

    @field_validator("price", mode="before")
    @classmethod
    def parse_tour_price(cls, v):
        return parse_price(v)

    @field_validator("children_price", mode="before")
    @classmethod
    def parse_children_price(cls, v):
        return parse_optional_price(v)

    class Config:
        extra = "allow"
        populate_by_name = True
