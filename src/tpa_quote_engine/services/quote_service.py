# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Quote generation service.

Looks up the tenant's product and rate table, runs the pricing core and
persists whatever it produced: a priced quote, or a special quote request
for an ineligible vehicle.
"""

from datetime import datetime, timezone

from beartype import beartype

from ..core.config import Settings
from ..core.exceptions import ProductInactiveError
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.quote import QuoteResult
from ..models.special_quote import SpecialQuoteRequest
from ..models.vehicle import CoverageSelections, CustomerContact, VehicleData
from .catalog import ProductCatalog
from .rating.engine import QuoteEngine
from .rating.tax_rates import TaxRateSchedule
from .stores import QuoteStore, SpecialQuoteRequestStore, insert_with_retry

logger = get_logger(__name__)


@beartype
class QuoteService:
    """Service for quote pricing and persistence."""

    def __init__(
        self,
        catalog: ProductCatalog,
        quotes: QuoteStore,
        special_requests: SpecialQuoteRequestStore,
        engine: QuoteEngine,
        tax_rates: TaxRateSchedule,
        settings: Settings,
    ) -> None:
        self._catalog = catalog
        self._quotes = quotes
        self._special_requests = special_requests
        self._engine = engine
        self._tax_rates = tax_rates
        self._settings = settings

    @beartype
    async def request_quote(
        self,
        tenant_id: str,
        product_id: str,
        vehicle: VehicleData,
        selections: CoverageSelections,
        customer: CustomerContact,
        request_reason: str | None = None,
        now: datetime | None = None,
    ) -> Result[QuoteResult | SpecialQuoteRequest, str]:
        """Price a vehicle or route it to manual review.

        Returns:
            Ok with a stored QuoteResult or pending SpecialQuoteRequest, or
            Err when the product is unknown, inactive or unpriceable

        Raises:
            RateNotFoundError: The vehicle is eligible but the rate table has
                no entry for the selection
        """
        now = now or datetime.now(timezone.utc)

        product = await self._catalog.get_product(tenant_id, product_id)
        if product is None:
            return Err(f"Product {product_id} not found")

        rate_table = await self._catalog.get_rate_table(tenant_id, product_id)
        if rate_table is None:
            return Err(f"Product {product_id} has no active rate table")

        tax_rate = self._tax_rates.rate_for(customer.state)

        def build() -> QuoteResult | SpecialQuoteRequest:
            return self._engine.evaluate(
                tenant_id=tenant_id,
                product=product,
                vehicle=vehicle,
                selections=selections,
                customer=customer,
                rate_lookup=rate_table,
                tax_rate=tax_rate,
                now=now,
                request_reason=request_reason,
            )

        async def insert(outcome: QuoteResult | SpecialQuoteRequest) -> None:
            if isinstance(outcome, QuoteResult):
                await self._quotes.add(outcome)
            else:
                await self._special_requests.add(outcome)

        try:
            result = await insert_with_retry(
                build, insert, self._settings.reference_retry_attempts
            )
        except ProductInactiveError as e:
            return Err(str(e))

        if result.is_err():
            return result

        outcome = result.unwrap()
        if isinstance(outcome, QuoteResult):
            logger.info(
                "Quote %s priced for product %s: total %s",
                outcome.quote_number,
                product_id,
                outcome.total_premium,
            )
        else:
            logger.info(
                "Vehicle routed to manual review as %s: %s",
                outcome.request_number,
                "; ".join(outcome.eligibility_reasons),
            )
        return Ok(outcome)

    @beartype
    async def get_quote(
        self, tenant_id: str, quote_number: str
    ) -> Result[QuoteResult, str]:
        """Get a stored quote visible to ``tenant_id``."""
        quote = await self._quotes.get(quote_number)
        if quote is None or quote.tenant_id != tenant_id:
            return Err(f"Quote {quote_number} not found")
        return Ok(quote)
