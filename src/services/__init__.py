"""Services package for quotation workflows."""

from src.services.catalog import CatalogIndex, parse_hotel, parse_tour
from src.services.draft_store import DraftStore
from src.services.quotation_service import QuotationService

__all__ = [
    "CatalogIndex",
    "DraftStore",
    "QuotationService",
    "parse_hotel",
    "parse_tour",
]
