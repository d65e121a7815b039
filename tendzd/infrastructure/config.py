"""Application configuration.

Loads settings from environment variables (prefixed ``TENDZD_``) with
defaults matching the platform's seeded site settings.
"""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TENDZD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Taxes and fees (amounts in dinars)
    vat_rate: Decimal = Field(default=Decimal("0.10"), ge=0, lt=1)
    default_commission_rate: Decimal = Field(default=Decimal("0.10"), ge=0, le=1)
    default_free_shipping_threshold: Decimal = Field(default=Decimal("50.000"), ge=0)

    # Locale
    currency_code: str = "BHD"
    default_locale: str = "ar"

    # Orders
    order_number_max_attempts: int = Field(default=5, ge=1)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


settings = Settings()
