"""Application configuration via Pydantic Settings v2."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "SalesAnalytics"
    app_env: Literal["development", "testing", "staging", "production"] = "development"
    debug: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # API
    api_host: str = "0.0.0.0"  # noqa: S104
    api_port: int = 8123

    # Sales report
    sales_report_top_products_limit: int = Field(default=10, ge=1, le=100)

    # Bonus policy (fractions of profit per rank tier)
    bonus_top_rate: Decimal = Decimal("0.15")
    bonus_podium_rate: Decimal = Decimal("0.10")
    bonus_default_rate: Decimal = Decimal("0.05")
    bonus_last_rate: Decimal = Decimal("0")
    bonus_floor_at_zero: bool = False

    @field_validator(
        "bonus_top_rate",
        "bonus_podium_rate",
        "bonus_default_rate",
        "bonus_last_rate",
    )
    @classmethod
    def validate_bonus_rate(cls, v: Decimal) -> Decimal:
        """Validate that a bonus rate is a fraction between 0 and 1.

        Args:
            v: Bonus rate.

        Returns:
            Validated bonus rate.

        Raises:
            ValueError: If the rate is outside [0, 1].
        """
        if not Decimal("0") <= v <= Decimal("1"):
            raise ValueError(f"Bonus rate {v} must be between 0 and 1 (e.g. 0.15 for 15%)")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.app_env == "testing"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton."""
    return Settings()
