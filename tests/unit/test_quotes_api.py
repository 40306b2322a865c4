"""Unit tests for the quote and product API endpoints."""

from datetime import datetime, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient

from tpa_quote_engine.api.dependencies import ServiceContainer
from tpa_quote_engine.api.v1.quotes import get_quote
from tpa_quote_engine.core.config import Settings
from tpa_quote_engine.models.quote import QuoteResult
from tpa_quote_engine.models.vehicle import CoverageSelections, CustomerContact, VehicleData
from tpa_quote_engine.services.catalog import ELEVATE_PRODUCT_ID


def _quote_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "product_id": ELEVATE_PRODUCT_ID,
        "vehicle": {"year": 2021, "make": "Toyota", "model": "Camry", "mileage": 42000},
        "tier": "Gold",
        "term_months": 48,
        "vehicle_class": "A",
        "customer": {"name": "Jane Driver", "email": "jane@example.com"},
    }
    payload.update(overrides)
    return payload


class TestRootAndHealth:
    def test_root(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["products_loaded"] == 1
        assert data["environment"] == "development"


class TestProductsAPI:
    def test_list_products(self, client: TestClient) -> None:
        response = client.get("/api/v1/products")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["products"][0]["id"] == ELEVATE_PRODUCT_ID

    def test_products_scoped_by_tenant_header(self, client: TestClient) -> None:
        response = client.get("/api/v1/products", headers={"X-Tenant-ID": "other"})

        assert response.status_code == 200
        assert response.json()["total"] == 0

    def test_get_unknown_product(self, client: TestClient) -> None:
        response = client.get("/api/v1/products/nope")

        assert response.status_code == 404

    def test_upload_rate_table(self, client: TestClient) -> None:
        response = client.put(
            f"/api/v1/admin/products/{ELEVATE_PRODUCT_ID}/rate-table",
            json={
                "version": "2025-07",
                "rows": [
                    {"tier": "Gold", "term_months": 48, "vehicle_class": "A", "base_rate": "2000.00"},
                ],
            },
        )

        assert response.status_code == 200
        assert response.json()["version"] == "2025-07"

        quote = client.post("/api/v1/quotes", json=_quote_payload())
        assert quote.json()["quote"]["base_premium"] == "2000.00"

    def test_invalid_rate_table_rejected(self, client: TestClient) -> None:
        response = client.put(
            f"/api/v1/admin/products/{ELEVATE_PRODUCT_ID}/rate-table",
            json={
                "version": "bad",
                "rows": [
                    {"tier": "Gold", "term_months": 48, "vehicle_class": "A", "base_rate": "-5"},
                ],
            },
        )

        assert response.status_code == 422
        assert response.json()["detail"][0].startswith("row 0:")

        table = client.get(f"/api/v1/products/{ELEVATE_PRODUCT_ID}/rate-table")
        assert table.json()["version"] == "seed"


class TestQuotesAPI:
    def test_eligible_quote(self, client: TestClient) -> None:
        response = client.post("/api/v1/quotes", json=_quote_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "quoted"
        quote = data["quote"]
        assert quote["base_premium"] == "1894.46"
        assert quote["taxes"] == "123.14"
        assert quote["fees"] == "50.00"
        assert quote["total_premium"] == "2067.60"

        fetched = client.get(f"/api/v1/quotes/{quote['quote_number']}")
        assert fetched.status_code == 200
        assert fetched.json()["quote"]["total_premium"] == "2067.60"
        assert fetched.json()["is_expired"] is False

    def test_vehicle_class_derived_when_omitted(self, client: TestClient) -> None:
        payload = _quote_payload(vehicle_class=None)
        payload["vehicle"] = {"year": 2021, "make": "Ford", "model": "F-150", "mileage": 1000}

        response = client.post("/api/v1/quotes", json=payload)

        assert response.status_code == 200
        assert response.json()["quote"]["vehicle_class"] == "B"

    def test_ineligible_vehicle_routed_to_review(self, client: TestClient) -> None:
        payload = _quote_payload()
        payload["vehicle"] = {"year": 2015, "make": "Honda", "model": "Accord", "mileage": 160000}

        response = client.post("/api/v1/quotes", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ineligible"
        assert data["quote"] is None
        assert data["eligibility_reasons"] == ["vehicle exceeds maximum mileage of 150000"]
        request = data["special_quote_request"]
        assert request["status"] == "pending"
        assert request["effective_status"] == "pending"
        assert request["request_number"].startswith("SQR-")

    def test_unclassified_vehicle_routed_to_review(self, client: TestClient) -> None:
        payload = _quote_payload(vehicle_class=None)
        payload["vehicle"] = {"year": 2022, "make": "Subaru", "model": "WRX", "mileage": 100}

        response = client.post("/api/v1/quotes", json=payload)

        data = response.json()
        assert data["status"] == "ineligible"
        assert data["eligibility_reasons"] == [
            "vehicle class UNCLASSIFIED is not supported by this product"
        ]

    def test_missing_rate_is_unprocessable(self, client: TestClient) -> None:
        response = client.post("/api/v1/quotes", json=_quote_payload(term_months=72))

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["tier"] == "Gold"
        assert detail["term_months"] == 72
        assert detail["vehicle_class"] == "A"

    def test_unknown_product(self, client: TestClient) -> None:
        response = client.post("/api/v1/quotes", json=_quote_payload(product_id="nope"))

        assert response.status_code == 404

    def test_invalid_vehicle_rejected(self, client: TestClient) -> None:
        payload = _quote_payload()
        payload["vehicle"]["mileage"] = -1

        response = client.post("/api/v1/quotes", json=payload)

        assert response.status_code == 422

    def test_unknown_quote(self, client: TestClient) -> None:
        response = client.get("/api/v1/quotes/QTE-0-NOPE00")

        assert response.status_code == 404


class TestGetQuoteExpiry:
    @pytest.mark.asyncio
    async def test_lapsed_quote_is_flagged_expired(
        self,
        settings: Settings,
        eligible_vehicle: VehicleData,
        gold_selections: CoverageSelections,
        customer: CustomerContact,
        tenant_id: str,
    ) -> None:
        container = ServiceContainer.build(settings)
        created = await container.quote_service.request_quote(
            tenant_id=tenant_id,
            product_id=ELEVATE_PRODUCT_ID,
            vehicle=eligible_vehicle,
            selections=gold_selections,
            customer=customer,
            now=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        quote = created.unwrap()
        assert isinstance(quote, QuoteResult)

        response = await get_quote(quote.quote_number, tenant_id, container.quote_service)

        assert response.is_expired is True
        assert response.quote.quote_number == quote.quote_number
        assert response.quote.total_premium == quote.total_premium
