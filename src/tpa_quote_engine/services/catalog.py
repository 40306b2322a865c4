# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Product catalog and rate tables per tenant.

Seeded with the Connected Auto Care "Elevate" vehicle service contract.
Admins replace rate tables through the rate-table upload endpoint; the
upload is validated when it is loaded, so the pricing core only ever sees
well-formed rates.
"""

import asyncio
from decimal import Decimal
from typing import Any

from beartype import beartype

from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.product import (
    CoverageOptionDefinition,
    EligibilityRules,
    FeeConfig,
    FeeKind,
    Product,
    ProductCategory,
    SurchargeRules,
)
from .rating.rate_tables import RateTable
from .rating.vehicle_class import INELIGIBLE_MAKES

logger = get_logger(__name__)

ELEVATE_PRODUCT_ID = "cac-elevate-vsc"

# (tier, vehicle class) -> {term months: base rate}
ELEVATE_BASE_RATES: dict[tuple[str, str], dict[int, str]] = {
    ("PLATINUM", "A"): {12: "1807.00", 24: "1935.40", 36: "2069.85", 48: "2212.30", 60: "2371.60"},
    ("PLATINUM", "B"): {12: "1960.00", 24: "2098.75", 36: "2244.20", 48: "2399.05", 60: "2571.90"},
    ("PLATINUM", "C"): {12: "2617.00", 24: "2801.60", 36: "2996.15", 48: "3203.40", 60: "3433.85"},
    ("GOLD", "A"): {12: "1549.00", 24: "1658.12", 36: "1772.30", 48: "1894.46", 60: "2031.75"},
    ("GOLD", "B"): {12: "1762.00", 24: "1884.50", 36: "2013.95", 48: "2151.20", 60: "2306.40"},
    ("GOLD", "C"): {12: "2214.00", 24: "2371.35", 36: "2536.80", 48: "2712.65", 60: "2905.10"},
}


@beartype
def elevate_rate_rows() -> list[dict[str, Any]]:
    """Seed rate table in the admin upload row format."""
    return [
        {
            "tier": tier,
            "term_months": term,
            "vehicle_class": vehicle_class,
            "base_rate": Decimal(rate),
        }
        for (tier, vehicle_class), terms in ELEVATE_BASE_RATES.items()
        for term, rate in terms.items()
    ]


@beartype
def elevate_product(tenant_id: str) -> Product:
    """Elevate VSC product definition for ``tenant_id``."""
    return Product(
        id=ELEVATE_PRODUCT_ID,
        tenant_id=tenant_id,
        name="Elevate Vehicle Service Contract",
        category=ProductCategory.AUTO,
        description="Comprehensive mechanical breakdown coverage with roadside assistance",
        coverage_options=[
            CoverageOptionDefinition(
                name="Tier",
                options=["Platinum", "Gold"],
                description="Coverage level",
            ),
            CoverageOptionDefinition(
                name="Term Length",
                options=["12", "24", "36", "48", "60"],
                description="Contract duration in months",
            ),
            CoverageOptionDefinition(
                name="Vehicle Class",
                options=["A", "B", "C"],
                description="Vehicle classification for pricing",
            ),
        ],
        eligibility=EligibilityRules(
            max_vehicle_age=15,
            max_mileage=150000,
            excluded_makes=INELIGIBLE_MAKES,
            supported_classes=frozenset({"A", "B", "C"}),
        ),
        fee=FeeConfig(kind=FeeKind.FLAT, amount=Decimal("50.00")),
        surcharges=SurchargeRules(
            four_wheel_drive=Decimal("200.00"),
            diesel=Decimal("200.00"),
            forced_induction=Decimal("200.00"),
        ),
    )


@beartype
class ProductCatalog:
    """Products and their active rate tables, scoped by tenant."""

    def __init__(self) -> None:
        self._products: dict[tuple[str, str], Product] = {}
        self._rate_tables: dict[tuple[str, str], RateTable] = {}
        self._lock = asyncio.Lock()

    @classmethod
    @beartype
    def seeded(cls, tenant_id: str) -> "ProductCatalog":
        """Catalog holding the Elevate VSC product for ``tenant_id``."""
        catalog = cls()
        catalog.register(
            elevate_product(tenant_id),
            RateTable.from_rate_data(elevate_rate_rows(), version="seed"),
        )
        return catalog

    @beartype
    def register(self, product: Product, rate_table: RateTable | None = None) -> None:
        key = (product.tenant_id, product.id)
        self._products[key] = product
        if rate_table is not None:
            self._rate_tables[key] = rate_table

    async def get_product(self, tenant_id: str, product_id: str) -> Product | None:
        return self._products.get((tenant_id, product_id))

    async def list_products(
        self, tenant_id: str, *, active_only: bool = True
    ) -> list[Product]:
        products = [
            product
            for (owner, _), product in self._products.items()
            if owner == tenant_id and (product.is_active or not active_only)
        ]
        return sorted(products, key=lambda p: p.name)

    async def get_rate_table(self, tenant_id: str, product_id: str) -> RateTable | None:
        return self._rate_tables.get((tenant_id, product_id))

    async def replace_rate_table(
        self, tenant_id: str, product_id: str, rate_table: RateTable
    ) -> Result[RateTable, str]:
        """Install a validated rate table for an existing product."""
        key = (tenant_id, product_id)
        async with self._lock:
            if key not in self._products:
                return Err(f"Product {product_id} not found")
            self._rate_tables[key] = rate_table

        logger.info(
            "Installed rate table version %s for product %s (%d rates)",
            rate_table.version,
            product_id,
            len(rate_table),
        )
        return Ok(rate_table)
