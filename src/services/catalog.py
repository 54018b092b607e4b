"""In-memory index of hotel and tour catalog records."""

from typing import Any, Optional

from pydantic import ValidationError
from structlog import get_logger

from src.exceptions import CatalogRecordError
from src.models.catalog.hotel import Hotel
from src.models.catalog.tour import Tour

logger = get_logger(__name__)


def parse_hotel(record: dict[str, Any] | Hotel) -> Hotel:
    """Parse a raw hotel record.

    Raises:
        CatalogRecordError: If the record is not a valid hotel
    """
    if isinstance(record, Hotel):
        return record
    try:
        return Hotel(**record)
    except (TypeError, ValidationError) as e:
        raise CatalogRecordError(f"Invalid hotel record: {e}") from e


def parse_tour(record: dict[str, Any] | Tour) -> Tour:
    """Parse a raw tour record.

    Raises:
        CatalogRecordError: If the record is not a valid tour
    """
    if isinstance(record, Tour):
        return record
    try:
        return Tour(**record)
    except (TypeError, ValidationError) as e:
        raise CatalogRecordError(f"Invalid tour record: {e}") from e


class CatalogIndex:
    """Hotels and tours keyed by id, built fresh per quotation request."""

    def __init__(
        self,
        hotels: Optional[list[dict[str, Any] | Hotel]] = None,
        tours: Optional[list[dict[str, Any] | Tour]] = None,
    ):
        """Parse catalog records, skipping the ones that fail validation.

        Args:
            hotels: Raw hotel records or Hotel models
            tours: Raw tour records or Tour models
        """
        self.hotels: dict[str, Hotel] = {}
        self.tours: dict[str, Tour] = {}
        self.skipped: list[dict[str, str]] = []

        for record in hotels or []:
            try:
                hotel = parse_hotel(record)
            except CatalogRecordError as e:
                self._skip("hotel", record, e)
                continue
            if not hotel.id:
                self._skip("hotel", record, "missing id")
                continue
            self.hotels[hotel.id] = hotel

        for record in tours or []:
            try:
                tour = parse_tour(record)
            except CatalogRecordError as e:
                self._skip("tour", record, e)
                continue
            if not tour.id:
                self._skip("tour", record, "missing id")
                continue
            self.tours[tour.id] = tour

        logger.info(
            "Catalog indexed",
            hotels=len(self.hotels),
            tours=len(self.tours),
            skipped=len(self.skipped),
        )

    @classmethod
    def from_dict(cls, catalog: dict[str, Any]) -> "CatalogIndex":
        """Build from a ``{"hotels": [...], "tours": [...]}`` document."""
        return cls(hotels=catalog.get("hotels", []), tours=catalog.get("tours", []))

    def _skip(self, kind: str, record: Any, reason: Any) -> None:
        record_id = record.get("_id") or record.get("id") if isinstance(record, dict) else None
        logger.warning(
            "Skipping invalid catalog record",
            kind=kind,
            record_id=record_id,
            error=str(reason),
        )
        self.skipped.append({"kind": kind, "id": str(record_id), "error": str(reason)})

    def hotel(self, hotel_id: str) -> Optional[Hotel]:
        return self.hotels.get(hotel_id)

    def tour(self, tour_id: str) -> Optional[Tour]:
        return self.tours.get(tour_id)
