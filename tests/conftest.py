"""Test configuration and shared fixtures for the TPA Quote Engine."""

from collections.abc import Generator
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from tpa_quote_engine.core.config import Settings, clear_settings_cache
from tpa_quote_engine.main import create_app
from tpa_quote_engine.models.product import (
    EligibilityRules,
    FeeConfig,
    FeeKind,
    Product,
    ProductCategory,
)
from tpa_quote_engine.models.vehicle import (
    CoverageSelections,
    CustomerContact,
    VehicleData,
)
from tpa_quote_engine.services.catalog import (
    ELEVATE_PRODUCT_ID,
    elevate_product,
    elevate_rate_rows,
)
from tpa_quote_engine.services.rating.rate_tables import RateTable

TENANT_ID = "tenant-test"


@pytest.fixture(autouse=True)
def _reset_settings() -> Generator[None, None, None]:
    """Never leak cached settings between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def now() -> datetime:
    """Fixed clock used across pricing and review tests."""
    return datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def tenant_id() -> str:
    return TENANT_ID


@pytest.fixture
def product() -> Product:
    """Elevate VSC product: 15 years, 150,000 miles, flat $50 fee."""
    return elevate_product(TENANT_ID)


@pytest.fixture
def percentage_fee_product() -> Product:
    return Product(
        id="pct-fee-product",
        tenant_id=TENANT_ID,
        name="Percentage Fee Product",
        category=ProductCategory.AUTO,
        eligibility=EligibilityRules(
            max_vehicle_age=10,
            max_mileage=100000,
            supported_classes=["A", "B"],
        ),
        fee=FeeConfig(
            kind=FeeKind.PERCENTAGE, amount=Decimal("0.02"), cap=Decimal("25.00")
        ),
    )


@pytest.fixture
def rate_table() -> RateTable:
    return RateTable.from_rate_data(elevate_rate_rows(), version="test")


@pytest.fixture
def eligible_vehicle() -> VehicleData:
    return VehicleData(year=2021, make="Toyota", model="Camry", mileage=42000)


@pytest.fixture
def high_mileage_vehicle() -> VehicleData:
    """2010 vehicle over the mileage limit but within the age limit in 2025."""
    return VehicleData(year=2010, make="Honda", model="Accord", mileage=160000)


@pytest.fixture
def gold_selections() -> CoverageSelections:
    return CoverageSelections(tier="Gold", term_months=48, vehicle_class="A")


@pytest.fixture
def customer() -> CustomerContact:
    return CustomerContact(
        name="Jane Driver", email="jane@example.com", phone="555-0100"
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(default_tenant_id=TENANT_ID, api_env="development")


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client over a fresh application and empty stores."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def product_id() -> str:
    return ELEVATE_PRODUCT_ID
