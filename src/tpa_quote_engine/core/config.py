# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Configuration management using Pydantic Settings."""

from decimal import Decimal

from beartype import beartype
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Jurisdiction tax rates applied to VSC premiums, as fractions.
DEFAULT_STATE_TAX_RATES: dict[str, Decimal] = {
    "CA": Decimal("0.0825"),
    "NY": Decimal("0.08"),
    "TX": Decimal("0.0625"),
    "FL": Decimal("0.06"),
    "WA": Decimal("0.095"),
    "AZ": Decimal("0.083"),
    "OR": Decimal("0"),
    "NH": Decimal("0"),
    "MT": Decimal("0"),
    "DE": Decimal("0"),
}


class Settings(BaseSettings):
    """Application settings with immutable configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TPA_",
        env_file=None,
        env_file_encoding="utf-8",
        frozen=True,
        validate_default=True,
        extra="forbid",
    )

    # API Configuration
    app_name: str = Field(
        default="TPA Quote Engine",
        description="Application name",
        min_length=1,
    )
    api_host: str = Field(
        default="0.0.0.0",  # nosec B104 - Binding to all interfaces is needed for containerized deployment
        description="API host to bind to",
    )
    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="API port to bind to",
    )
    api_env: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="API environment",
    )
    api_cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level",
    )

    # Tenancy
    default_tenant_id: str = Field(
        default="default-tenant",
        min_length=1,
        description="Tenant used when a request does not name one",
    )

    # Pricing
    default_tax_rate: Decimal = Field(
        default=Decimal("0.065"),
        ge=Decimal("0"),
        le=Decimal("1"),
        description="Tax rate for jurisdictions without a specific entry",
    )
    state_tax_rates: dict[str, Decimal] = Field(
        default_factory=lambda: dict(DEFAULT_STATE_TAX_RATES),
        description="Tax rate per two-letter state code",
    )
    quote_validity_days: int = Field(
        default=30,
        ge=1,
        le=60,
        description="Days a priced quote stays valid",
    )

    # Reference numbers
    quote_number_prefix: str = Field(
        default="QTE-",
        min_length=1,
        max_length=10,
        description="Prefix for generated quote numbers",
    )
    special_request_prefix: str = Field(
        default="SQR-",
        min_length=1,
        max_length=10,
        description="Prefix for generated special quote request numbers",
    )
    reference_retry_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Regeneration attempts when a reference number collides",
    )

    # Special quote requests
    special_request_lifetime_days: int = Field(
        default=30,
        ge=1,
        le=365,
        description="Days before an unresolved special quote request expires",
    )

    @field_validator("state_tax_rates")
    @classmethod
    def validate_state_tax_rates(
        cls: type["Settings"], v: dict[str, Decimal]
    ) -> dict[str, Decimal]:
        """Normalise state codes and reject out-of-range rates."""
        normalised: dict[str, Decimal] = {}
        for state, rate in v.items():
            code = state.strip().upper()
            if len(code) != 2 or not code.isalpha():
                raise ValueError(f"Invalid state code: {state}")
            if rate < 0 or rate > 1:
                raise ValueError(f"Tax rate for {code} must be between 0 and 1")
            normalised[code] = rate
        return normalised

    @field_validator("api_cors_origins")
    @classmethod
    def validate_cors_origins(cls: type["Settings"], v: list[str]) -> list[str]:
        """Validate CORS origins are proper URLs."""
        for origin in v:
            if not origin.startswith(("http://", "https://")):
                raise ValueError(f"Invalid CORS origin: {origin}")
        return v

    @property
    @beartype
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.api_env == "production"

    @property
    @beartype
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.api_env == "development"


_settings: Settings | None = None


@beartype
def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


@beartype
def clear_settings_cache() -> None:
    """Clear settings cache (for testing)."""
    global _settings
    _settings = None
