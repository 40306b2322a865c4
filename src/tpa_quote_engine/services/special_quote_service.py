# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Special quote request management service.

Handles customer-submitted requests and the underwriter review workflow.
Eligibility reasons are always recomputed here rather than trusted from
the submitting client.
"""

from datetime import datetime, timezone
from uuid import UUID

from beartype import beartype

from ..core.config import Settings
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.special_quote import (
    ReviewAction,
    SpecialQuoteRequest,
    SpecialQuoteSummary,
)
from ..models.vehicle import CoverageSelections, CustomerContact, VehicleData
from .catalog import ProductCatalog
from .rating.eligibility import Eligible
from .rating.engine import QuoteEngine
from .rating.special_requests import apply_review_action, summarize
from .stores import SpecialQuoteRequestStore, insert_with_retry

logger = get_logger(__name__)


@beartype
class SpecialQuoteRequestService:
    """Service for special quote request submission and review."""

    def __init__(
        self,
        catalog: ProductCatalog,
        store: SpecialQuoteRequestStore,
        engine: QuoteEngine,
        settings: Settings,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._engine = engine
        self._settings = settings

    @beartype
    async def submit(
        self,
        tenant_id: str,
        product_id: str,
        vehicle: VehicleData,
        selections: CoverageSelections,
        customer: CustomerContact,
        request_reason: str,
        now: datetime | None = None,
    ) -> Result[SpecialQuoteRequest, str]:
        """Create a pending request for a vehicle that fails eligibility."""
        now = now or datetime.now(timezone.utc)

        product = await self._catalog.get_product(tenant_id, product_id)
        if product is None:
            return Err(f"Product {product_id} not found")

        eligibility = self._engine.checker.check(
            vehicle, selections, product, now.date()
        )
        if isinstance(eligibility, Eligible):
            return Err(
                "Invalid special quote request: vehicle qualifies for standard "
                "pricing, request a quote instead"
            )

        result = await insert_with_retry(
            lambda: self._engine.route_to_review(
                eligibility,
                tenant_id=tenant_id,
                product=product,
                vehicle=vehicle,
                selections=selections,
                customer=customer,
                request_reason=request_reason,
                now=now,
            ),
            self._store.add,
            self._settings.reference_retry_attempts,
        )
        if result.is_ok():
            logger.info(
                "Special quote request %s submitted for product %s",
                result.unwrap().request_number,
                product_id,
            )
        return result

    @beartype
    async def get(
        self, tenant_id: str, request_id: UUID
    ) -> Result[SpecialQuoteRequest, str]:
        request = await self._store.get(request_id)
        if request is None or request.tenant_id != tenant_id:
            return Err(f"Special quote request {request_id} not found")
        return Ok(request)

    @beartype
    async def list_requests(self, tenant_id: str) -> list[SpecialQuoteRequest]:
        """All requests for a tenant, newest first."""
        return await self._store.list_for_tenant(tenant_id)

    @beartype
    async def summary(
        self, tenant_id: str, now: datetime | None = None
    ) -> SpecialQuoteSummary:
        requests = await self._store.list_for_tenant(tenant_id)
        return summarize(requests, now or datetime.now(timezone.utc))

    @beartype
    async def review(
        self,
        tenant_id: str,
        request_id: UUID,
        action: ReviewAction,
        now: datetime | None = None,
    ) -> Result[SpecialQuoteRequest, str]:
        """Apply a reviewer's transition after validating it."""
        now = now or datetime.now(timezone.utc)

        found = await self.get(tenant_id, request_id)
        if found.is_err():
            return found

        result = apply_review_action(found.unwrap(), action, now)
        if result.is_err():
            logger.warning(
                "Rejected review of %s by %s: %s",
                request_id,
                action.reviewed_by,
                result.unwrap_err(),
            )
            return result

        updated = result.unwrap()
        await self._store.replace(updated)
        logger.info(
            "Special quote request %s moved to %s by %s",
            updated.request_number,
            updated.status.value,
            action.reviewed_by,
        )
        return Ok(updated)
