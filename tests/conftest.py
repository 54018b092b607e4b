import json
from pathlib import Path

import pytest

from src.config import configure_logging
from src.models.catalog.hotel import Hotel, RoomType
from src.models.draft.booking import GuestComposition


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True, scope="session")
def structured_logging():
    """Route structlog through stdlib logging so stdout stays clean for CLI output."""
    configure_logging()


@pytest.fixture
def catalog_path():
    """Path of the sample catalog fixture."""
    return FIXTURES_DIR / "catalog" / "catalog.json"


@pytest.fixture
def catalog_data(catalog_path):
    """Load hotel and tour catalog records from fixture."""
    with open(catalog_path) as f:
        return json.load(f)


@pytest.fixture
def draft_path():
    """Path of the multi-hotel booking draft fixture."""
    return FIXTURES_DIR / "drafts" / "multi_hotel_draft.json"


@pytest.fixture
def multi_hotel_draft(draft_path):
    """Load a two-hotel booking draft with children and tours."""
    with open(draft_path) as f:
        return json.load(f)


@pytest.fixture
def double_room():
    """Room type at $100/night ($40 child) with a June override of $150 ($60 child)."""
    return RoomType(
        label="DOUBLE ROOM",
        price_per_night=100,
        children_price_per_night=40,
        monthly_prices={"june": {"adult": 150, "child": 60}},
    )


@pytest.fixture
def simple_hotel(double_room):
    """Hotel with one room type and breakfast at $10 per room per night."""
    return Hotel(
        id="h-simple",
        name="Simple Hotel",
        room_types=[double_room],
        breakfast_included=True,
        breakfast_price=10,
    )


@pytest.fixture
def one_adult():
    return GuestComposition(adults=1)
