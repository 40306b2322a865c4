"""Unit tests for the jurisdiction tax schedule."""

from decimal import Decimal

import pytest

from tpa_quote_engine.core.config import Settings
from tpa_quote_engine.services.rating.tax_rates import TaxRateSchedule


class TestTaxRateSchedule:
    def test_defaults_from_settings(self) -> None:
        schedule = TaxRateSchedule.from_settings(Settings())

        assert schedule.default_rate == Decimal("0.065")
        assert schedule.rate_for("CA") == Decimal("0.0825")
        assert schedule.rate_for("wa") == Decimal("0.095")

    def test_zero_rated_state_is_not_defaulted(self) -> None:
        schedule = TaxRateSchedule.from_settings(Settings())

        assert schedule.rate_for("OR") == Decimal("0")

    def test_unknown_or_missing_state_uses_default(self) -> None:
        schedule = TaxRateSchedule(Decimal("0.05"), {"NY": Decimal("0.08")})

        assert schedule.rate_for("OH") == Decimal("0.05")
        assert schedule.rate_for(None) == Decimal("0.05")
        assert schedule.rate_for("") == Decimal("0.05")

    def test_invalid_default_rate(self) -> None:
        with pytest.raises(ValueError):
            TaxRateSchedule(Decimal("1.2"))
