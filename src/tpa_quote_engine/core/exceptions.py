# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Typed failures raised by the pricing core.

Eligibility failures are not errors; they are returned as ``Ineligible``
outcomes. Everything here aborts a pricing attempt.
"""


class QuoteEngineError(Exception):
    """Base class for pricing-core failures."""


class RateNotFoundError(QuoteEngineError):
    """No rate-table entry matches the requested tier, term and class."""

    def __init__(self, tier: str, term_months: int, vehicle_class: str) -> None:
        self.tier = tier
        self.term_months = term_months
        self.vehicle_class = vehicle_class
        super().__init__(
            f"No rate found for tier '{tier}', term {term_months} months, "
            f"vehicle class '{vehicle_class}'"
        )


class RateTableValidationError(QuoteEngineError):
    """An uploaded rate table failed structural or business validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid rate table: " + "; ".join(errors))


class ProductInactiveError(QuoteEngineError):
    """The product is not currently offered for sale."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} is not active")
