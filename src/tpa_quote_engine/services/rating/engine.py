# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Quote engine: eligibility, then pricing or routing to manual review."""

from datetime import datetime, timedelta
from decimal import Decimal

from beartype import beartype

from ...core.exceptions import ProductInactiveError
from ...models.product import Product
from ...models.quote import QuoteResult
from ...models.special_quote import SpecialQuoteRequest
from ...models.vehicle import CoverageSelections, CustomerContact, VehicleData
from .calculators import PremiumCalculator
from .eligibility import EligibilityChecker, Ineligible
from .rate_tables import RateLookup
from .special_requests import SPECIAL_REQUEST_LIFETIME, create_special_quote_request

DEFAULT_REQUEST_REASON = "Vehicle did not meet automated eligibility rules"


@beartype
class QuoteEngine:
    """Stateless pricing core.

    Tenant and product context are passed to every call; the engine holds
    only its numbering and lifetime configuration.
    """

    def __init__(
        self,
        *,
        quote_number_prefix: str = "QTE-",
        request_number_prefix: str = "SQR-",
        quote_validity_days: int = 30,
        special_request_lifetime: timedelta = SPECIAL_REQUEST_LIFETIME,
        checker: EligibilityChecker | None = None,
    ) -> None:
        self._quote_number_prefix = quote_number_prefix
        self._request_number_prefix = request_number_prefix
        self._quote_validity_days = quote_validity_days
        self._special_request_lifetime = special_request_lifetime
        self._checker = checker or EligibilityChecker()

    @property
    def checker(self) -> EligibilityChecker:
        return self._checker

    @beartype
    def evaluate(
        self,
        *,
        tenant_id: str,
        product: Product,
        vehicle: VehicleData,
        selections: CoverageSelections,
        customer: CustomerContact,
        rate_lookup: RateLookup,
        tax_rate: Decimal,
        now: datetime,
        request_reason: str | None = None,
    ) -> QuoteResult | SpecialQuoteRequest:
        """Price the selection, or build a pending special quote request.

        Raises:
            ProductInactiveError: The product is not offered for sale
            RateNotFoundError: Eligible, but no rate matches the selection
        """
        if not product.is_active:
            raise ProductInactiveError(product.id)

        eligibility = self._checker.check(vehicle, selections, product, now.date())
        if isinstance(eligibility, Ineligible):
            return self.route_to_review(
                eligibility,
                tenant_id=tenant_id,
                product=product,
                vehicle=vehicle,
                selections=selections,
                customer=customer,
                request_reason=request_reason or DEFAULT_REQUEST_REASON,
                now=now,
            )

        return PremiumCalculator.calculate_quote(
            tenant_id=tenant_id,
            product=product,
            selections=selections,
            rate_lookup=rate_lookup,
            tax_rate=tax_rate,
            now=now,
            vehicle=vehicle,
            quote_number_prefix=self._quote_number_prefix,
            validity_days=self._quote_validity_days,
        )

    @beartype
    def route_to_review(
        self,
        ineligible: Ineligible,
        *,
        tenant_id: str,
        product: Product,
        vehicle: VehicleData,
        selections: CoverageSelections,
        customer: CustomerContact,
        request_reason: str,
        now: datetime,
    ) -> SpecialQuoteRequest:
        """Create the special quote request for an ineligible vehicle."""
        return create_special_quote_request(
            ineligible,
            tenant_id=tenant_id,
            product_id=product.id,
            vehicle=vehicle,
            selections=selections,
            customer=customer,
            request_reason=request_reason,
            now=now,
            request_number_prefix=self._request_number_prefix,
            lifetime=self._special_request_lifetime,
        )
