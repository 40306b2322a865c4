# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Priced quote model."""

from datetime import datetime
from decimal import Decimal

from beartype import beartype
from pydantic import Field, model_validator

from .base import BaseModelConfig


@beartype
class QuoteResult(BaseModelConfig):
    """Premium breakdown produced once per pricing request.

    The engine builds it; persisting it is the caller's job.
    """

    quote_number: str = Field(..., min_length=1, max_length=50)
    tenant_id: str = Field(..., min_length=1, max_length=100)
    product_id: str = Field(..., min_length=1, max_length=100)
    tier: str = Field(..., min_length=1)
    term_months: int = Field(..., ge=1)
    vehicle_class: str = Field(..., min_length=1)

    base_premium: Decimal = Field(..., ge=Decimal("0"), decimal_places=2)
    surcharges: Decimal = Field(
        default=Decimal("0.00"),
        ge=Decimal("0"),
        decimal_places=2,
        description="Vehicle surcharges already included in base_premium",
    )
    taxes: Decimal = Field(..., ge=Decimal("0"), decimal_places=2)
    fees: Decimal = Field(..., ge=Decimal("0"), decimal_places=2)
    total_premium: Decimal = Field(..., ge=Decimal("0"), decimal_places=2)
    tax_rate: Decimal = Field(..., ge=Decimal("0"), le=Decimal("1"))

    created_at: datetime
    expires_at: datetime

    @model_validator(mode="after")
    def validate_breakdown(self) -> "QuoteResult":
        """Total must be exactly the sum of its parts."""
        if self.total_premium != self.base_premium + self.taxes + self.fees:
            raise ValueError("Total premium must equal base premium + taxes + fees")
        if self.surcharges > self.base_premium:
            raise ValueError("Surcharges cannot exceed base premium")
        if self.expires_at <= self.created_at:
            raise ValueError("Quote must expire after it is created")
        return self

    @beartype
    def is_expired_at(self, now: datetime) -> bool:
        """Check whether the quote is past its validity window."""
        return now > self.expires_at
