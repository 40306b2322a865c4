# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Quote API request/response schemas."""

from typing import Literal

from beartype import beartype
from pydantic import Field

from ..models.base import BaseModelConfig
from ..models.quote import QuoteResult
from ..models.vehicle import CoverageSelections, CustomerContact, VehicleData
from .special_quote import SpecialQuoteRequestResponse


@beartype
class QuoteCreateRequest(BaseModelConfig):
    """Inbound quote request from the quote widget or admin portal."""

    product_id: str = Field(..., min_length=1, max_length=100)
    vehicle: VehicleData
    tier: str = Field(..., min_length=1, max_length=50)
    term_months: int = Field(..., ge=1, le=120)
    vehicle_class: str | None = Field(
        None,
        max_length=20,
        description="Rating class; derived from make and model when omitted",
    )
    coverage_miles: str | None = Field(None, max_length=20)
    options: dict[str, bool | str] = Field(default_factory=dict)
    customer: CustomerContact = Field(default_factory=CustomerContact)
    request_reason: str | None = Field(
        None,
        max_length=2000,
        description="Reason recorded if the vehicle is routed to manual review",
    )

    @beartype
    def to_selections(self, vehicle_class: str) -> CoverageSelections:
        return CoverageSelections(
            tier=self.tier,
            term_months=self.term_months,
            vehicle_class=vehicle_class,
            coverage_miles=self.coverage_miles,
            options=self.options,
        )


@beartype
class QuoteResponse(BaseModelConfig):
    """Either a priced quote or the special quote request it was routed to."""

    status: Literal["quoted", "ineligible"]
    message: str
    quote: QuoteResult | None = None
    eligibility_reasons: list[str] = Field(default_factory=list)
    special_quote_request: SpecialQuoteRequestResponse | None = None



@beartype
class QuoteDetailResponse(BaseModelConfig):
    """A stored quote and whether its validity window has passed."""

    quote: QuoteResult
    is_expired: bool
