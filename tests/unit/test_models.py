"""Unit tests for domain model validation."""

from datetime import datetime, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from tpa_quote_engine.models import (
    EligibilityRules,
    FeeConfig,
    FeeKind,
    QuoteResult,
    SpecialQuoteRequest,
    SpecialQuoteStatus,
    round_currency,
)
from tpa_quote_engine.models.special_quote import ALLOWED_TRANSITIONS, is_transition_allowed
from tpa_quote_engine.models.vehicle import (
    CoverageSelections,
    CustomerContact,
    VehicleData,
)
from tpa_quote_engine.schemas.special_quote import SpecialQuoteRequestResponse


class TestRoundCurrency:
    def test_half_up(self) -> None:
        assert round_currency(Decimal("123.145")) == Decimal("123.15")
        assert round_currency(Decimal("123.144")) == Decimal("123.14")
        assert round_currency(Decimal("0.005")) == Decimal("0.01")


class TestVehicleData:
    def test_vin_normalized(self) -> None:
        vehicle = VehicleData(
            year=2020, make="Honda", model="Civic", mileage=10, vin=" 1hgbh41jxmn109186 "
        )

        assert vehicle.vin == "1HGBH41JXMN109186"

    def test_vin_rejects_ioq(self) -> None:
        with pytest.raises(ValidationError):
            VehicleData(
                year=2020, make="Honda", model="Civic", mileage=10, vin="1HGBH41JXMN10918O"
            )

    def test_blank_vin_is_none(self) -> None:
        vehicle = VehicleData(year=2020, make="Honda", model="Civic", mileage=10, vin="")

        assert vehicle.vin is None

    def test_negative_mileage(self) -> None:
        with pytest.raises(ValidationError):
            VehicleData(year=2020, make="Honda", model="Civic", mileage=-5)

    def test_immutable(self) -> None:
        vehicle = VehicleData(year=2020, make="Honda", model="Civic", mileage=10)

        with pytest.raises(ValidationError):
            vehicle.mileage = 20  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            VehicleData(year=2020, make="Honda", model="Civic", mileage=10, color="red")


class TestCoverageSelections:
    @pytest.mark.parametrize("raw", ["a", "A", " Class A ", "class a"])
    def test_vehicle_class_normalized(self, raw: str) -> None:
        selections = CoverageSelections(tier="Gold", term_months=12, vehicle_class=raw)

        assert selections.vehicle_class == "A"


class TestCustomerContact:
    def test_state_upper_cased(self) -> None:
        assert CustomerContact(state="ca").state == "CA"

    def test_invalid_email(self) -> None:
        with pytest.raises(ValidationError):
            CustomerContact(email="not-an-email")


class TestEligibilityRules:
    def test_names_normalized(self) -> None:
        rules = EligibilityRules(
            max_vehicle_age=10,
            max_mileage=100000,
            excluded_makes=["ferrari", "Lotus "],
            supported_classes=["a", "B"],
        )

        assert rules.excluded_makes == frozenset({"FERRARI", "LOTUS"})
        assert rules.supported_classes == frozenset({"A", "B"})

    def test_supported_classes_required(self) -> None:
        with pytest.raises(ValidationError):
            EligibilityRules(max_vehicle_age=10, max_mileage=100000, supported_classes=[])

    def test_negative_threshold(self) -> None:
        with pytest.raises(ValidationError):
            EligibilityRules(max_vehicle_age=-1, max_mileage=100000, supported_classes=["A"])


class TestFeeConfig:
    def test_percentage_must_be_fraction(self) -> None:
        with pytest.raises(ValidationError):
            FeeConfig(kind=FeeKind.PERCENTAGE, amount=Decimal("2"))

    def test_cap_only_for_percentage(self) -> None:
        with pytest.raises(ValidationError):
            FeeConfig(kind=FeeKind.FLAT, amount=Decimal("50"), cap=Decimal("10"))


class TestQuoteResult:
    def test_total_must_match_breakdown(self, now: datetime) -> None:
        with pytest.raises(ValidationError):
            QuoteResult(
                quote_number="QTE-1-ABCDEF",
                tenant_id="t",
                product_id="p",
                tier="Gold",
                term_months=12,
                vehicle_class="A",
                base_premium=Decimal("100.00"),
                taxes=Decimal("6.50"),
                fees=Decimal("50.00"),
                total_premium=Decimal("150.00"),
                tax_rate=Decimal("0.065"),
                created_at=now,
                expires_at=now + timedelta(days=30),
            )

    def test_negative_premium_rejected(self, now: datetime) -> None:
        with pytest.raises(ValidationError):
            QuoteResult(
                quote_number="QTE-1-ABCDEF",
                tenant_id="t",
                product_id="p",
                tier="Gold",
                term_months=12,
                vehicle_class="A",
                base_premium=Decimal("-10.00"),
                taxes=Decimal("0.00"),
                fees=Decimal("10.00"),
                total_premium=Decimal("0.00"),
                tax_rate=Decimal("0"),
                created_at=now,
                expires_at=now + timedelta(days=30),
            )


class TestSpecialQuoteRequestModel:
    def _request(self, now: datetime, **overrides: object) -> SpecialQuoteRequest:
        data: dict[str, object] = {
            "id": uuid4(),
            "request_number": "SQR-1-ABCDEF",
            "tenant_id": "t",
            "product_id": "p",
            "vehicle": {"year": 2010, "make": "Honda", "model": "Accord", "mileage": 160000},
            "coverage_selections": {"tier": "Gold", "term_months": 48, "vehicle_class": "A"},
            "customer": {},
            "eligibility_reasons": ["vehicle exceeds maximum mileage of 150000"],
            "request_reason": "Review please",
            "created_at": now,
            "updated_at": now,
            "expires_at": now + timedelta(days=30),
        }
        data.update(overrides)
        return SpecialQuoteRequest.model_validate(data)

    def test_expired_status_is_never_stored(self, now: datetime) -> None:
        with pytest.raises(ValidationError):
            self._request(now, status=SpecialQuoteStatus.EXPIRED)

    def test_quoted_requires_alternative(self, now: datetime) -> None:
        with pytest.raises(ValidationError):
            self._request(now, status=SpecialQuoteStatus.QUOTED)

    def test_expiry_after_creation(self, now: datetime) -> None:
        with pytest.raises(ValidationError):
            self._request(now, expires_at=now)

    def test_response_reports_effective_status(self, now: datetime) -> None:
        request = self._request(now)
        later = now + timedelta(days=31)

        response = SpecialQuoteRequestResponse.from_request(request, later)

        assert not issubclass(SpecialQuoteRequestResponse, SpecialQuoteRequest)
        assert response.effective_status == SpecialQuoteStatus.EXPIRED
        assert response.status == SpecialQuoteStatus.PENDING
        assert request.effective_status(later) == SpecialQuoteStatus.EXPIRED
        assert request.effective_status(now) == SpecialQuoteStatus.PENDING

    def test_open_request_rejects_stray_review_fields(self, now: datetime) -> None:
        with pytest.raises(ValidationError):
            self._request(now, status=SpecialQuoteStatus.REVIEWING, decline_reason="junk")
        with pytest.raises(ValidationError):
            self._request(now, alternative_quote={"total_premium": "100.00"})


class TestTransitionTable:
    def test_allowed_edges(self) -> None:
        edges = {
            (current, target)
            for current, targets in ALLOWED_TRANSITIONS.items()
            for target in targets
        }

        assert edges == {
            (SpecialQuoteStatus.PENDING, SpecialQuoteStatus.REVIEWING),
            (SpecialQuoteStatus.REVIEWING, SpecialQuoteStatus.QUOTED),
            (SpecialQuoteStatus.REVIEWING, SpecialQuoteStatus.DECLINED),
        }

    def test_expired_is_never_a_target(self) -> None:
        assert not any(
            is_transition_allowed(status, SpecialQuoteStatus.EXPIRED)
            for status in SpecialQuoteStatus
        )
