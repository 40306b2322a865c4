# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Special quote request endpoints.

Customers submit requests for vehicles that failed automated eligibility;
underwriters list, summarise and review them.
"""

from datetime import datetime, timezone
from uuid import UUID

from beartype import beartype
from fastapi import APIRouter, HTTPException

from ...models.special_quote import ReviewAction, SpecialQuoteSummary
from ...schemas.special_quote import (
    SpecialQuoteCreateRequest,
    SpecialQuoteCreateResponse,
    SpecialQuoteRequestResponse,
)
from ..dependencies import SpecialQuoteServiceDep, TenantId

router = APIRouter(prefix="/special-quote-requests", tags=["special-quotes"])


@beartype
def _review_error_status(error_msg: str) -> int:
    lowered = error_msg.lower()
    if "not found" in lowered:
        return 404
    if "not allowed" in lowered or "has expired" in lowered:
        return 409
    return 400


@router.post("", response_model=SpecialQuoteCreateResponse, status_code=201)
@beartype
async def submit_special_quote_request(
    request_data: SpecialQuoteCreateRequest,
    tenant_id: TenantId,
    service: SpecialQuoteServiceDep,
) -> SpecialQuoteCreateResponse:
    """Submit a vehicle for manual underwriting review."""
    result = await service.submit(
        tenant_id=tenant_id,
        product_id=request_data.product_id,
        vehicle=request_data.vehicle,
        selections=request_data.coverage_selections,
        customer=request_data.customer,
        request_reason=request_data.request_reason,
    )
    if result.is_err():
        error_msg = result.err_value
        raise HTTPException(
            status_code=404 if "not found" in error_msg.lower() else 400,
            detail=error_msg,
        )

    request = result.unwrap()
    return SpecialQuoteCreateResponse(
        message="Special quote request submitted for review",
        request_id=str(request.id),
        request_number=request.request_number,
        eligibility_reasons=request.eligibility_reasons,
    )


@router.get("", response_model=list[SpecialQuoteRequestResponse])
@beartype
async def list_special_quote_requests(
    tenant_id: TenantId,
    service: SpecialQuoteServiceDep,
) -> list[SpecialQuoteRequestResponse]:
    """All of the tenant's requests, newest first."""
    now = datetime.now(timezone.utc)
    requests = await service.list_requests(tenant_id)
    return [SpecialQuoteRequestResponse.from_request(r, now) for r in requests]


@router.get("/summary", response_model=SpecialQuoteSummary)
@beartype
async def special_quote_summary(
    tenant_id: TenantId,
    service: SpecialQuoteServiceDep,
) -> SpecialQuoteSummary:
    """Request counts by status for the admin dashboard."""
    return await service.summary(tenant_id)


@router.get("/{request_id}", response_model=SpecialQuoteRequestResponse)
@beartype
async def get_special_quote_request(
    request_id: UUID,
    tenant_id: TenantId,
    service: SpecialQuoteServiceDep,
) -> SpecialQuoteRequestResponse:
    result = await service.get(tenant_id, request_id)
    if result.is_err():
        raise HTTPException(status_code=404, detail=result.err_value)
    return SpecialQuoteRequestResponse.from_request(
        result.unwrap(), datetime.now(timezone.utc)
    )


@router.put("/{request_id}", response_model=SpecialQuoteRequestResponse)
@beartype
async def review_special_quote_request(
    request_id: UUID,
    action: ReviewAction,
    tenant_id: TenantId,
    service: SpecialQuoteServiceDep,
) -> SpecialQuoteRequestResponse:
    """Move a request through the review workflow.

    Transitions outside the review workflow, or on an expired request,
    answer 409 and leave the stored request unchanged.
    """
    now = datetime.now(timezone.utc)
    result = await service.review(tenant_id, request_id, action, now=now)
    if result.is_err():
        error_msg = result.err_value
        raise HTTPException(
            status_code=_review_error_status(error_msg), detail=error_msg
        )
    return SpecialQuoteRequestResponse.from_request(result.unwrap(), now)
