# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Product domain models.

Eligibility and fee configuration used to live in admin-editable JSON
blobs. Here they are closed, validated models so the eligibility engine
works against a fixed contract and bad thresholds fail at load time.
"""

from decimal import Decimal
from enum import Enum

from beartype import beartype
from pydantic import Field, field_validator, model_validator

from .base import BaseModelConfig


class ProductCategory(str, Enum):
    """Lines of business a product can belong to."""

    AUTO = "auto"
    RV = "rv"
    MARINE = "marine"
    POWERSPORTS = "powersports"
    HOME = "home"


class FeeKind(str, Enum):
    """How the administrative fee is derived."""

    FLAT = "flat"
    PERCENTAGE = "percentage"


@beartype
class CoverageOptionDefinition(BaseModelConfig):
    """A named choice offered by a product, e.g. term length."""

    name: str = Field(..., min_length=1, max_length=100)
    options: list[str] = Field(..., min_length=1)
    description: str | None = Field(None, max_length=500)


@beartype
class EligibilityRules(BaseModelConfig):
    """Thresholds a vehicle must satisfy for automated pricing."""

    max_vehicle_age: int = Field(
        ..., ge=0, le=100, description="Maximum vehicle age in model years"
    )
    max_mileage: int = Field(
        ..., ge=0, description="Maximum odometer reading at time of sale"
    )
    excluded_makes: frozenset[str] = Field(
        default_factory=frozenset,
        description="Makes never priced automatically (case-insensitive)",
    )
    supported_classes: frozenset[str] = Field(
        ...,
        min_length=1,
        description="Vehicle classes the product's rate table covers",
    )

    @field_validator("excluded_makes", "supported_classes", mode="before")
    @classmethod
    def normalize_names(cls, v: object) -> object:
        """Upper-case and de-duplicate names so comparisons ignore case."""
        if isinstance(v, (list, tuple, set, frozenset)):
            names = {str(item).strip().upper() for item in v}
            if "" in names:
                raise ValueError("Names must not be blank")
            return frozenset(names)
        return v


@beartype
class FeeConfig(BaseModelConfig):
    """Administrative fee: a flat amount or a fraction of base premium."""

    kind: FeeKind = Field(default=FeeKind.FLAT)
    amount: Decimal = Field(
        ...,
        ge=Decimal("0"),
        description="Dollar amount for flat fees, fractional rate for percentage fees",
    )
    cap: Decimal | None = Field(
        None,
        ge=Decimal("0"),
        description="Upper bound for percentage fees",
    )

    @model_validator(mode="after")
    def validate_fee_shape(self) -> "FeeConfig":
        """Percentage fees are fractions; caps only apply to percentages."""
        if self.kind == FeeKind.PERCENTAGE and self.amount > Decimal("1"):
            raise ValueError("Percentage fee must be expressed as a fraction <= 1")
        if self.kind == FeeKind.FLAT and self.cap is not None:
            raise ValueError("Cap is only valid for percentage fees")
        return self


@beartype
class SurchargeRules(BaseModelConfig):
    """Flat amounts added to base premium for costlier powertrains."""

    four_wheel_drive: Decimal = Field(
        default=Decimal("0"), ge=Decimal("0"), description="4WD and AWD vehicles"
    )
    diesel: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    forced_induction: Decimal = Field(
        default=Decimal("0"),
        ge=Decimal("0"),
        description="Turbocharged or supercharged engines",
    )


@beartype
class Product(BaseModelConfig):
    """A named insurance offering with its pricing configuration."""

    id: str = Field(..., min_length=1, max_length=100)
    tenant_id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    category: ProductCategory
    description: str | None = Field(None, max_length=1000)
    coverage_options: list[CoverageOptionDefinition] = Field(default_factory=list)
    eligibility: EligibilityRules
    fee: FeeConfig
    surcharges: SurchargeRules = Field(default_factory=SurchargeRules)
    is_active: bool = Field(default=True)
