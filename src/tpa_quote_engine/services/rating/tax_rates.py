# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Jurisdiction tax rates for VSC premiums."""

from collections.abc import Mapping
from decimal import Decimal

from beartype import beartype

from ...core.config import Settings


@beartype
class TaxRateSchedule:
    """Resolve a fractional tax rate for a state, falling back to a default."""

    def __init__(
        self, default_rate: Decimal, state_rates: Mapping[str, Decimal] | None = None
    ) -> None:
        if default_rate < 0 or default_rate > 1:
            raise ValueError("Default tax rate must be between 0 and 1")
        self._default_rate = default_rate
        self._state_rates = {
            state.upper(): rate for state, rate in (state_rates or {}).items()
        }

    @classmethod
    @beartype
    def from_settings(cls, settings: Settings) -> "TaxRateSchedule":
        return cls(settings.default_tax_rate, settings.state_tax_rates)

    @property
    def default_rate(self) -> Decimal:
        return self._default_rate

    @beartype
    def rate_for(self, state: str | None) -> Decimal:
        """Tax rate for ``state``; zero-rated states return 0, not the default."""
        if not state:
            return self._default_rate
        return self._state_rates.get(state.upper(), self._default_rate)
