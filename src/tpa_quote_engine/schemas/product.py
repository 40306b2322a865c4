# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Product and rate table API schemas."""

from typing import Any

from beartype import beartype
from pydantic import Field

from ..models.base import BaseModelConfig
from ..models.product import Product
from ..services.rating.rate_tables import RateTableEntry


@beartype
class ProductListResponse(BaseModelConfig):
    products: list[Product]
    total: int = Field(..., ge=0)


@beartype
class RateTableUploadRequest(BaseModelConfig):
    """Admin-uploaded rate table rows, validated before activation."""

    version: str = Field(..., min_length=1, max_length=50)
    rows: list[dict[str, Any]] = Field(..., description="Rate table rows")


@beartype
class RateTableResponse(BaseModelConfig):
    product_id: str
    version: str
    entries: list[RateTableEntry]
