"""Enumerations shared by catalog, draft and pricing models."""

from enum import Enum


class TourType(str, Enum):
    """Tour billing model."""

    GROUP = "Group"  # Per person, age-band policy applies
    VIP = "VIP"  # One flat price per vehicle


class VehicleTier(str, Enum):
    """Airport transfer vehicle tier."""

    VITO = "Vito"
    SPRINTER = "Sprinter"
    BUS = "Bus"


class GuestClass(str, Enum):
    """Rate class used when resolving a nightly price."""

    ADULT = "adult"
    CHILD = "child"


class ChildBand(str, Enum):
    """Children age bands."""

    UNDER_3 = "under3"
    FROM_3_TO_6 = "3to6"
    FROM_6_TO_12 = "6to12"


class CostCategory(str, Enum):
    """Cost categories with their own children policy."""

    ACCOMMODATION = "accommodation"
    TOUR = "tour"
    TRANSFER = "transfer"


class ChargeRule(str, Enum):
    """How a child band is billed within a cost category.

    - FREE: not billed at all
    - CHARGED_AS_ADULT: billed at the adult price
    - CHARGED_AT_BAND_RATE: billed at the category's child rate
      (room child rate for accommodation, tour children price for tours);
      free when no such rate is defined
    """

    FREE = "free"
    CHARGED_AS_ADULT = "chargedAsAdult"
    CHARGED_AT_BAND_RATE = "chargedAtBandRate"


class TransferLeg(str, Enum):
    """Airport transfer direction."""

    RECEPTION = "reception"  # Airport to hotel
    FAREWELL = "farewell"  # Hotel to airport
