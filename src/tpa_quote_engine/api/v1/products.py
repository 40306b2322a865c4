# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Product catalog and rate table administration endpoints."""

from typing import Annotated

from beartype import beartype
from fastapi import APIRouter, HTTPException, Query

from ...core.exceptions import RateTableValidationError
from ...core.logging_utils import get_logger
from ...models.product import Product
from ...schemas.product import (
    ProductListResponse,
    RateTableResponse,
    RateTableUploadRequest,
)
from ...services.rating.rate_tables import RateTable
from ..dependencies import Catalog, TenantId

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


@router.get("/products", response_model=ProductListResponse)
@beartype
async def list_products(
    tenant_id: TenantId,
    catalog: Catalog,
    include_inactive: Annotated[
        bool, Query(description="Include inactive products")
    ] = False,
) -> ProductListResponse:
    """List the tenant's products."""
    products = await catalog.list_products(tenant_id, active_only=not include_inactive)
    return ProductListResponse(products=products, total=len(products))


@router.get("/products/{product_id}", response_model=Product)
@beartype
async def get_product(
    product_id: str,
    tenant_id: TenantId,
    catalog: Catalog,
) -> Product:
    product = await catalog.get_product(tenant_id, product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    return product


@router.get("/products/{product_id}/rate-table", response_model=RateTableResponse)
@beartype
async def get_rate_table(
    product_id: str,
    tenant_id: TenantId,
    catalog: Catalog,
) -> RateTableResponse:
    """Active rate table for a product."""
    rate_table = await catalog.get_rate_table(tenant_id, product_id)
    if rate_table is None:
        raise HTTPException(
            status_code=404, detail=f"No rate table found for product {product_id}"
        )
    return RateTableResponse(
        product_id=product_id,
        version=rate_table.version,
        entries=rate_table.entries(),
    )


@router.put(
    "/admin/products/{product_id}/rate-table",
    response_model=RateTableResponse,
    tags=["admin"],
)
@beartype
async def upload_rate_table(
    product_id: str,
    upload: RateTableUploadRequest,
    tenant_id: TenantId,
    catalog: Catalog,
) -> RateTableResponse:
    """Validate and activate an uploaded rate table.

    A table that fails validation is rejected as a whole; the previously
    active table stays in place.
    """
    try:
        rate_table = RateTable.from_rate_data(upload.rows, version=upload.version)
    except RateTableValidationError as e:
        logger.warning("Rejected rate table for product %s: %s", product_id, e)
        raise HTTPException(status_code=422, detail=e.errors) from e

    result = await catalog.replace_rate_table(tenant_id, product_id, rate_table)
    if result.is_err():
        raise HTTPException(status_code=404, detail=result.err_value)

    return RateTableResponse(
        product_id=product_id,
        version=rate_table.version,
        entries=rate_table.entries(),
    )
