# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Special quote request models.

A special quote request hands a vehicle that failed automated eligibility
to a human underwriter. The engine only ever creates requests in
``pending``; reviewers move them along ``ALLOWED_TRANSITIONS``.
``expired`` is derived from ``expires_at`` when read and never stored.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Final

from beartype import beartype
from pydantic import Field, model_validator

from .base import BaseModelConfig, IdentifiableModel
from .vehicle import CoverageSelections, CustomerContact, VehicleData


class SpecialQuoteStatus(str, Enum):
    """Lifecycle states of a special quote request."""

    PENDING = "pending"
    REVIEWING = "reviewing"
    QUOTED = "quoted"
    DECLINED = "declined"
    EXPIRED = "expired"


TERMINAL_STATUSES: Final = frozenset(
    {SpecialQuoteStatus.QUOTED, SpecialQuoteStatus.DECLINED}
)

# pending -> quoted is deliberately absent: a reviewer must open the case first.
ALLOWED_TRANSITIONS: Final[dict[SpecialQuoteStatus, frozenset[SpecialQuoteStatus]]] = {
    SpecialQuoteStatus.PENDING: frozenset({SpecialQuoteStatus.REVIEWING}),
    SpecialQuoteStatus.REVIEWING: frozenset(
        {SpecialQuoteStatus.QUOTED, SpecialQuoteStatus.DECLINED}
    ),
    SpecialQuoteStatus.QUOTED: frozenset(),
    SpecialQuoteStatus.DECLINED: frozenset(),
    SpecialQuoteStatus.EXPIRED: frozenset(),
}


@beartype
def is_transition_allowed(
    current: SpecialQuoteStatus, target: SpecialQuoteStatus
) -> bool:
    """Check a requested status change against the transition table."""
    return target in ALLOWED_TRANSITIONS[current]


@beartype
class AlternativeQuote(BaseModelConfig):
    """Custom terms offered by an underwriter in place of standard pricing."""

    total_premium: Decimal = Field(..., gt=Decimal("0"), decimal_places=2)
    term_months: int | None = Field(None, ge=1, le=120)
    tier: str | None = Field(None, max_length=50)
    terms: str | None = Field(
        None, max_length=2000, description="Custom coverage terms or exclusions"
    )


@beartype
class SpecialQuoteRequest(IdentifiableModel):
    """Manual-underwriting hand-off for a vehicle that failed eligibility."""

    request_number: str = Field(..., min_length=1, max_length=50)
    tenant_id: str = Field(..., min_length=1, max_length=100)
    product_id: str = Field(..., min_length=1, max_length=100)

    vehicle: VehicleData
    coverage_selections: CoverageSelections
    customer: CustomerContact

    eligibility_reasons: list[str] = Field(default_factory=list)
    request_reason: str = Field(..., min_length=1, max_length=2000)

    status: SpecialQuoteStatus = Field(default=SpecialQuoteStatus.PENDING)
    alternative_quote: AlternativeQuote | None = None
    decline_reason: str | None = Field(None, max_length=2000)
    reviewed_by: str | None = Field(None, max_length=100)
    review_notes: str | None = Field(None, max_length=2000)
    reviewed_at: datetime | None = None

    expires_at: datetime

    @model_validator(mode="after")
    def validate_request(self) -> "SpecialQuoteRequest":
        """Stored status is never ``expired`` and expiry follows creation."""
        if self.status == SpecialQuoteStatus.EXPIRED:
            raise ValueError("Expired is derived from expires_at and cannot be stored")
        if self.expires_at <= self.created_at:
            raise ValueError("Special quote request must expire after creation")
        if self.status == SpecialQuoteStatus.QUOTED and self.alternative_quote is None:
            raise ValueError("Quoted requests require an alternative quote")
        if self.status == SpecialQuoteStatus.DECLINED and not self.decline_reason:
            raise ValueError("Declined requests require a decline reason")
        if self.status != SpecialQuoteStatus.QUOTED and self.alternative_quote is not None:
            raise ValueError("Only quoted requests carry an alternative quote")
        if self.status != SpecialQuoteStatus.DECLINED and self.decline_reason:
            raise ValueError("Only declined requests carry a decline reason")
        return self

    @beartype
    def is_expired_at(self, now: datetime) -> bool:
        """True once ``now`` is past ``expires_at``, whatever the stored status."""
        return now > self.expires_at

    @beartype
    def effective_status(self, now: datetime) -> SpecialQuoteStatus:
        """Status as seen by readers at ``now``."""
        if self.is_expired_at(now):
            return SpecialQuoteStatus.EXPIRED
        return self.status

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


@beartype
class ReviewAction(BaseModelConfig):
    """A reviewer's request to move a special quote request forward."""

    target_status: SpecialQuoteStatus
    reviewed_by: str = Field(..., min_length=1, max_length=100)
    review_notes: str | None = Field(None, max_length=2000)
    alternative_quote: AlternativeQuote | None = None
    decline_reason: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def validate_payload(self) -> "ReviewAction":
        """Each outcome carries the data it needs."""
        if self.target_status == SpecialQuoteStatus.QUOTED and not self.alternative_quote:
            raise ValueError("Quoting a special request requires an alternative quote")
        if self.target_status == SpecialQuoteStatus.DECLINED and not self.decline_reason:
            raise ValueError("Declining a special request requires a decline reason")
        if self.target_status != SpecialQuoteStatus.QUOTED and self.alternative_quote is not None:
            raise ValueError("Only a quoted outcome takes an alternative quote")
        if self.target_status != SpecialQuoteStatus.DECLINED and self.decline_reason:
            raise ValueError("Only a declined outcome takes a decline reason")
        return self


@beartype
class SpecialQuoteSummary(BaseModelConfig):
    """Counts for the admin dashboard."""

    total: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)
    reviewing: int = Field(..., ge=0)
    quoted: int = Field(..., ge=0)
    declined: int = Field(..., ge=0)
    expired: int = Field(..., ge=0, description="Derived from expires_at")
