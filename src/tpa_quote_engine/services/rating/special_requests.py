# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Special quote request routing and review transitions.

Creating a request is the only step the engine owns. Review transitions
are requested by external actors (underwriters through the admin API) and
are validated here against ``ALLOWED_TRANSITIONS`` before any update is
accepted.
"""

from collections.abc import Iterable
from datetime import datetime, timedelta
from uuid import uuid4

from beartype import beartype

from ...core.result_types import Err, Ok, Result
from ...models.special_quote import (
    ReviewAction,
    SpecialQuoteRequest,
    SpecialQuoteStatus,
    SpecialQuoteSummary,
    is_transition_allowed,
)
from ...models.vehicle import CoverageSelections, CustomerContact, VehicleData
from .eligibility import Ineligible
from .identifiers import generate_reference_number

SPECIAL_REQUEST_LIFETIME = timedelta(days=30)


@beartype
def create_special_quote_request(
    ineligible: Ineligible,
    *,
    tenant_id: str,
    product_id: str,
    vehicle: VehicleData,
    selections: CoverageSelections,
    customer: CustomerContact,
    request_reason: str,
    now: datetime,
    request_number_prefix: str = "SQR-",
    lifetime: timedelta = SPECIAL_REQUEST_LIFETIME,
) -> SpecialQuoteRequest:
    """Build the pending hand-off record for a vehicle that failed eligibility."""
    return SpecialQuoteRequest(
        id=uuid4(),
        request_number=generate_reference_number(request_number_prefix, now),
        tenant_id=tenant_id,
        product_id=product_id,
        vehicle=vehicle,
        coverage_selections=selections,
        customer=customer,
        eligibility_reasons=ineligible.reasons,
        request_reason=request_reason,
        status=SpecialQuoteStatus.PENDING,
        created_at=now,
        updated_at=now,
        expires_at=now + lifetime,
    )


@beartype
def apply_review_action(
    request: SpecialQuoteRequest, action: ReviewAction, now: datetime
) -> Result[SpecialQuoteRequest, str]:
    """Validate a reviewer's transition and return the updated copy.

    Returns:
        Ok with the updated request, or Err when the request has expired or
        the transition is not in the transition table
    """
    if request.is_expired_at(now):
        return Err(
            f"Special quote request {request.request_number} has expired "
            "and can no longer be reviewed"
        )

    if not is_transition_allowed(request.status, action.target_status):
        return Err(
            f"Transition from '{request.status.value}' to "
            f"'{action.target_status.value}' is not allowed"
        )

    updates: dict[str, object] = {
        "status": action.target_status,
        "reviewed_by": action.reviewed_by,
        "reviewed_at": now,
        "updated_at": now,
    }
    if action.review_notes:
        updates["review_notes"] = action.review_notes
    if action.target_status == SpecialQuoteStatus.QUOTED:
        updates["alternative_quote"] = action.alternative_quote
    if action.target_status == SpecialQuoteStatus.DECLINED:
        updates["decline_reason"] = action.decline_reason

    # model_copy skips validation; re-validate so model invariants hold.
    updated = SpecialQuoteRequest.model_validate(
        {**request.model_dump(), **updates}
    )
    return Ok(updated)


@beartype
def summarize(
    requests: Iterable[SpecialQuoteRequest], now: datetime
) -> SpecialQuoteSummary:
    """Count requests per stored status plus the derived expired count."""
    counts = {status: 0 for status in SpecialQuoteStatus}
    expired = 0
    total = 0
    for request in requests:
        total += 1
        counts[request.status] += 1
        if request.is_expired_at(now):
            expired += 1

    return SpecialQuoteSummary(
        total=total,
        pending=counts[SpecialQuoteStatus.PENDING],
        reviewing=counts[SpecialQuoteStatus.REVIEWING],
        quoted=counts[SpecialQuoteStatus.QUOTED],
        declined=counts[SpecialQuoteStatus.DECLINED],
        expired=expired,
    )
