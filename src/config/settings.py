"""Application settings and configuration management."""
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    """Quotation engine pricing constants."""

    guests_per_room: int = 2  # Implied occupancy when no rooms are allocated
    one_way_transfer_factor: float = 0.5  # Legacy flat price, reception-only or farewell-only
    legacy_child_rate_factor: float = 0.5  # Legacy per-person hotels without a children price
    money_decimals: int = 2
    default_vehicle_tier: Literal["Vito", "Sprinter", "Bus"] = "Vito"

    model_config = SettingsConfigDict(env_prefix="PRICING_")


class StorageSettings(BaseSettings):
    """Local storage for saved booking drafts."""

    drafts_dir: Path = Path(".drafts")

    model_config = SettingsConfigDict(env_prefix="STORAGE_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    pricing: PricingSettings = PricingSettings()
    storage: StorageSettings = StorageSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
