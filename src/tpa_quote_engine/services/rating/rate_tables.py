# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Rate tables and the base-rate lookup contract.

The calculator only needs ``rate(tier, term_months, vehicle_class)``. Where
rates live (uploaded file, database row, seed data) is the caller's
concern; ``RateTable`` is the in-memory implementation used by the
catalog, built from the admin-uploaded JSON rows.
"""

from collections.abc import Callable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from beartype import beartype
from pydantic import Field, ValidationError, field_validator

from ...core.exceptions import RateNotFoundError, RateTableValidationError
from ...models.base import BaseModelConfig

RateKey = tuple[str, int, str]


# Synchronous base-rate lookup supplied by the caller: (tier, term, class) -> rate.
RateLookup = Callable[[str, int, str], Decimal]


@beartype
class RateTableEntry(BaseModelConfig):
    """One row of an uploaded rate table."""

    tier: str = Field(..., min_length=1, max_length=50)
    term_months: int = Field(..., ge=1, le=120)
    vehicle_class: str = Field(..., min_length=1, max_length=20)
    base_rate: Decimal = Field(..., ge=Decimal("0"), decimal_places=2)

    @field_validator("tier", "vehicle_class")
    @classmethod
    def normalize_key(cls, v: str) -> str:
        return v.strip().upper()


@beartype
def _make_key(tier: str, term_months: int, vehicle_class: str) -> RateKey:
    return (tier.strip().upper(), term_months, vehicle_class.strip().upper())


@beartype
class RateTable:
    """Immutable base-rate table keyed by (tier, term, vehicle class)."""

    def __init__(self, rates: Mapping[RateKey, Decimal], version: str = "1") -> None:
        """Initialize rate table.

        Args:
            rates: Base rates keyed by (tier, term_months, vehicle_class)
            version: Label of the uploaded table version
        """
        self._rates: dict[RateKey, Decimal] = {
            _make_key(*key): amount for key, amount in rates.items()
        }
        self.version = version

    def __call__(self, tier: str, term_months: int, vehicle_class: str) -> Decimal:
        return self.lookup(tier, term_months, vehicle_class)

    def __len__(self) -> int:
        return len(self._rates)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 3:
            return False
        tier, term_months, vehicle_class = key
        return _make_key(tier, term_months, vehicle_class) in self._rates

    @beartype
    def lookup(self, tier: str, term_months: int, vehicle_class: str) -> Decimal:
        """Return the base rate or raise ``RateNotFoundError``.

        A missing entry is never defaulted: an unpriced product must not
        be sold.
        """
        amount = self._rates.get(_make_key(tier, term_months, vehicle_class))
        if amount is None:
            raise RateNotFoundError(tier, term_months, vehicle_class)
        return amount

    @beartype
    def entries(self) -> list[RateTableEntry]:
        """Rows of the table in a stable order."""
        return [
            RateTableEntry(
                tier=tier,
                term_months=term_months,
                vehicle_class=vehicle_class,
                base_rate=amount,
            )
            for (tier, term_months, vehicle_class), amount in sorted(
                self._rates.items()
            )
        ]

    @classmethod
    @beartype
    def from_rate_data(
        cls, rows: list[Mapping[str, Any]], version: str = "1"
    ) -> "RateTable":
        """Validate uploaded rows and build a table.

        Raises:
            RateTableValidationError: listing every bad row, duplicate key,
                or an empty upload
        """
        errors: list[str] = []
        rates: dict[RateKey, Decimal] = {}

        if not rows:
            raise RateTableValidationError(["rate table has no rows"])

        for index, row in enumerate(rows):
            try:
                entry = RateTableEntry.model_validate(dict(row))
            except (ValidationError, InvalidOperation) as e:
                errors.append(f"row {index}: {_describe_validation_error(e)}")
                continue

            key = (entry.tier, entry.term_months, entry.vehicle_class)
            if key in rates:
                errors.append(
                    f"row {index}: duplicate rate for tier {entry.tier}, "
                    f"term {entry.term_months}, class {entry.vehicle_class}"
                )
                continue
            rates[key] = entry.base_rate

        if errors:
            raise RateTableValidationError(errors)

        return cls(rates, version=version)


def _describe_validation_error(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return ", ".join(
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
            for item in error.errors()
        )
    return str(error)
