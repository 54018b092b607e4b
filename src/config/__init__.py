"""Settings and logging for the quotation engine."""

from src.config.logging import configure_logging, get_logger
from src.config.settings import (
    LoggingSettings,
    PricingSettings,
    Settings,
    StorageSettings,
    settings,
)

__all__ = [
    "settings",
    "Settings",
    "PricingSettings",
    "StorageSettings",
    "LoggingSettings",
    "configure_logging",
    "get_logger",
]
