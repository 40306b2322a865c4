# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Health check endpoint."""

from datetime import datetime, timezone

from beartype import beartype
from fastapi import APIRouter
from pydantic import Field

from ... import __version__
from ...models.base import BaseModelConfig
from ..dependencies import Container

router = APIRouter()


class HealthResponse(BaseModelConfig):
    """Overall service health response."""

    status: str = Field(..., pattern=r"^(healthy|degraded)$")
    timestamp: datetime = Field(..., description="Health check timestamp")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")
    products_loaded: int = Field(..., ge=0)


@router.get("/health", response_model=HealthResponse)
@beartype
async def health_check(
    container: Container,
) -> HealthResponse:
    """Report service status and whether the default catalog is loaded."""
    settings = container.settings
    products = await container.catalog.list_products(settings.default_tenant_id)
    return HealthResponse(
        status="healthy" if products else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=settings.api_env,
        products_loaded=len(products),
    )
