# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Special quote request API schemas."""

from datetime import datetime

from beartype import beartype
from pydantic import Field

from ..models.base import BaseModelConfig, IdentifiableModel
from ..models.special_quote import (
    AlternativeQuote,
    SpecialQuoteRequest,
    SpecialQuoteStatus,
)
from ..models.vehicle import CoverageSelections, CustomerContact, VehicleData


@beartype
class SpecialQuoteCreateRequest(BaseModelConfig):
    """Customer submission after an ineligible quote response."""

    product_id: str = Field(..., min_length=1, max_length=100)
    vehicle: VehicleData
    coverage_selections: CoverageSelections
    customer: CustomerContact
    request_reason: str = Field(
        default="Customer requested special review",
        min_length=1,
        max_length=2000,
    )


@beartype
class SpecialQuoteRequestResponse(IdentifiableModel):
    """Stored request plus its status as seen at read time."""

    request_number: str
    tenant_id: str
    product_id: str

    vehicle: VehicleData
    coverage_selections: CoverageSelections
    customer: CustomerContact

    eligibility_reasons: list[str]
    request_reason: str

    status: SpecialQuoteStatus
    effective_status: SpecialQuoteStatus = Field(
        ..., description="Stored status, or 'expired' once expires_at has passed"
    )
    alternative_quote: AlternativeQuote | None = None
    decline_reason: str | None = None
    reviewed_by: str | None = None
    review_notes: str | None = None
    reviewed_at: datetime | None = None

    expires_at: datetime

    @classmethod
    @beartype
    def from_request(
        cls, request: SpecialQuoteRequest, now: datetime
    ) -> "SpecialQuoteRequestResponse":
        return cls.model_validate(
            {**request.model_dump(), "effective_status": request.effective_status(now)}
        )


@beartype
class SpecialQuoteCreateResponse(BaseModelConfig):
    """Acknowledgement returned to the submitting customer."""

    message: str
    request_id: str
    request_number: str
    eligibility_reasons: list[str]
