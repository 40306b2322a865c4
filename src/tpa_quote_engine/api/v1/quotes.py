# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Quote API endpoints."""

from datetime import datetime, timezone

from beartype import beartype
from fastapi import APIRouter, HTTPException

from ...core.exceptions import RateNotFoundError
from ...core.logging_utils import get_logger
from ...models.quote import QuoteResult
from ...schemas.quote import QuoteCreateRequest, QuoteDetailResponse, QuoteResponse
from ...schemas.special_quote import SpecialQuoteRequestResponse
from ...services.rating.vehicle_class import vehicle_class_tag
from ..dependencies import QuoteServiceDep, TenantId

logger = get_logger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("", response_model=QuoteResponse)
@beartype
async def create_quote(
    quote_data: QuoteCreateRequest,
    tenant_id: TenantId,
    quote_service: QuoteServiceDep,
) -> QuoteResponse:
    """Price a vehicle, or open a special quote request when it is ineligible."""
    now = datetime.now(timezone.utc)
    vehicle_class = quote_data.vehicle_class or vehicle_class_tag(
        quote_data.vehicle.make, quote_data.vehicle.model
    )

    try:
        result = await quote_service.request_quote(
            tenant_id=tenant_id,
            product_id=quote_data.product_id,
            vehicle=quote_data.vehicle,
            selections=quote_data.to_selections(vehicle_class),
            customer=quote_data.customer,
            request_reason=quote_data.request_reason,
            now=now,
        )
    except RateNotFoundError as e:
        logger.error("Rate table gap for product %s: %s", quote_data.product_id, e)
        raise HTTPException(
            status_code=422,
            detail={
                "message": str(e),
                "tier": e.tier,
                "term_months": e.term_months,
                "vehicle_class": e.vehicle_class,
            },
        ) from e

    if result.is_err():
        error_msg = result.err_value
        raise HTTPException(
            status_code=404 if "not found" in error_msg.lower() else 422,
            detail=error_msg,
        )

    outcome = result.unwrap()
    if isinstance(outcome, QuoteResult):
        return QuoteResponse(
            status="quoted",
            message="Quote generated",
            quote=outcome,
        )
    return QuoteResponse(
        status="ineligible",
        message="Vehicle requires manual review; a special quote request was created",
        eligibility_reasons=outcome.eligibility_reasons,
        special_quote_request=SpecialQuoteRequestResponse.from_request(outcome, now),
    )


@router.get("/{quote_number}", response_model=QuoteDetailResponse)
@beartype
async def get_quote(
    quote_number: str,
    tenant_id: TenantId,
    quote_service: QuoteServiceDep,
) -> QuoteDetailResponse:
    """Fetch a stored quote; expired quotes are still returned, flagged."""
    result = await quote_service.get_quote(tenant_id, quote_number)
    if result.is_err():
        raise HTTPException(status_code=404, detail=result.err_value)
    quote = result.unwrap()
    return QuoteDetailResponse(
        quote=quote, is_expired=quote.is_expired_at(datetime.now(timezone.utc))
    )
