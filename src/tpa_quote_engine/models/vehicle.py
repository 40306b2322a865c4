# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Vehicle, coverage and customer input models."""

from typing import Any

from beartype import beartype
from pydantic import Field, field_validator

from .base import BaseModelConfig


@beartype
class VehicleData(BaseModelConfig):
    """Vehicle attributes used as eligibility input."""

    year: int = Field(..., ge=1900, le=2100, description="Vehicle model year")
    make: str = Field(
        ..., min_length=1, max_length=50, description="Manufacturer (e.g., Toyota)"
    )
    model: str = Field(
        ..., min_length=1, max_length=50, description="Model (e.g., Camry)"
    )
    mileage: int = Field(..., ge=0, description="Current odometer reading")
    vin: str | None = Field(
        None,
        pattern=r"^[A-HJ-NPR-Z0-9]{17}$",
        description="Vehicle Identification Number (17 characters, no I/O/Q)",
    )
    drivetrain: str | None = Field(
        None, max_length=50, description="Drivetrain, e.g. FWD, AWD or 4WD"
    )
    fuel_type: str | None = Field(
        None, max_length=50, description="Fuel type, e.g. Gasoline or Diesel"
    )
    engine: str | None = Field(
        None, max_length=50, description="Engine description, e.g. 2.0L Turbo"
    )

    @field_validator("vin", mode="before")
    @classmethod
    def normalize_vin(cls, v: Any) -> Any:
        """VINs are compared upper-case."""
        if isinstance(v, str):
            return v.strip().upper() or None
        return v


@beartype
class CoverageSelections(BaseModelConfig):
    """Coverage choices made for a quote plus the vehicle class tag."""

    tier: str = Field(
        ..., min_length=1, max_length=50, description="Coverage tier, e.g. Gold"
    )
    term_months: int = Field(..., ge=1, le=120, description="Contract term")
    vehicle_class: str = Field(
        ..., min_length=1, max_length=20, description="Rating class, e.g. A"
    )
    coverage_miles: str | None = Field(
        None, max_length=20, description="Mileage band covered, e.g. 75000"
    )
    options: dict[str, bool | str] = Field(
        default_factory=dict,
        description="Named optional coverages (e.g. technology_coverage)",
    )

    @field_validator("vehicle_class")
    @classmethod
    def normalize_vehicle_class(cls, v: str) -> str:
        """Accept 'a' or 'Class A' for class A."""
        value = v.strip().upper()
        if value.startswith("CLASS "):
            value = value[len("CLASS ") :].strip()
        return value


@beartype
class CustomerContact(BaseModelConfig):
    """Contact details passed through to special quote requests."""

    name: str | None = Field(None, max_length=200)
    email: str | None = Field(
        None, max_length=254, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
    )
    phone: str | None = Field(None, max_length=30)
    state: str | None = Field(
        None, pattern=r"^[A-Za-z]{2}$", description="Two-letter state code"
    )

    @field_validator("state")
    @classmethod
    def normalize_state(cls, v: str | None) -> str | None:
        return v.upper() if v else v
