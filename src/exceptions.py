"""Exceptions raised at the quotation service boundary."""


class QuotationError(Exception):
    """Base exception for quotation errors."""


class CatalogRecordError(QuotationError):
    """A hotel or tour catalog record could not be parsed."""


class DraftNotFoundError(QuotationError):
    """No saved booking draft exists under the requested id."""


class DraftStoreError(QuotationError):
    """A saved booking draft could not be read or written."""
