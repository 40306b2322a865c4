# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""FastAPI dependencies for tenant context and service access.

The application builds one ``ServiceContainer`` at startup and stores it on
``app.state``; endpoints receive its services through these dependencies.
"""

from datetime import timedelta
from typing import Annotated

from attrs import frozen
from beartype import beartype
from fastapi import Depends, Header, Request

from ..core.config import Settings
from ..services.catalog import ProductCatalog
from ..services.quote_service import QuoteService
from ..services.rating.engine import QuoteEngine
from ..services.rating.tax_rates import TaxRateSchedule
from ..services.special_quote_service import SpecialQuoteRequestService
from ..services.stores import QuoteStore, SpecialQuoteRequestStore


@frozen
class ServiceContainer:
    """Application-wide services sharing one catalog and set of stores."""

    settings: Settings
    catalog: ProductCatalog
    quote_service: QuoteService
    special_quote_service: SpecialQuoteRequestService

    @classmethod
    @beartype
    def build(
        cls, settings: Settings, catalog: ProductCatalog | None = None
    ) -> "ServiceContainer":
        """Wire services over fresh in-memory stores."""
        catalog = catalog or ProductCatalog.seeded(settings.default_tenant_id)
        special_requests = SpecialQuoteRequestStore()
        engine = QuoteEngine(
            quote_number_prefix=settings.quote_number_prefix,
            request_number_prefix=settings.special_request_prefix,
            quote_validity_days=settings.quote_validity_days,
            special_request_lifetime=timedelta(
                days=settings.special_request_lifetime_days
            ),
        )
        return cls(
            settings=settings,
            catalog=catalog,
            quote_service=QuoteService(
                catalog=catalog,
                quotes=QuoteStore(),
                special_requests=special_requests,
                engine=engine,
                tax_rates=TaxRateSchedule.from_settings(settings),
                settings=settings,
            ),
            special_quote_service=SpecialQuoteRequestService(
                catalog=catalog,
                store=special_requests,
                engine=engine,
                settings=settings,
            ),
        )


@beartype
def get_container(request: Request) -> ServiceContainer:
    container: ServiceContainer = request.app.state.container
    return container


Container = Annotated[ServiceContainer, Depends(get_container)]


@beartype
def get_tenant_id(
    container: Container,
    x_tenant_id: Annotated[str | None, Header()] = None,
) -> str:
    """Resolve the calling tenant from the ``X-Tenant-ID`` header."""
    if x_tenant_id is None or not x_tenant_id.strip():
        return container.settings.default_tenant_id
    return x_tenant_id.strip()


@beartype
def get_catalog(container: Container) -> ProductCatalog:
    return container.catalog


@beartype
def get_quote_service(container: Container) -> QuoteService:
    return container.quote_service


@beartype
def get_special_quote_service(container: Container) -> SpecialQuoteRequestService:
    return container.special_quote_service


# Dependency aliases for route signatures
TenantId = Annotated[str, Depends(get_tenant_id)]
Catalog = Annotated[ProductCatalog, Depends(get_catalog)]
QuoteServiceDep = Annotated[QuoteService, Depends(get_quote_service)]
SpecialQuoteServiceDep = Annotated[
    SpecialQuoteRequestService, Depends(get_special_quote_service)
]
