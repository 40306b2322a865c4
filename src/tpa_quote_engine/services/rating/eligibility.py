# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Eligibility rules for automated pricing.

Every rule is evaluated on every check so a single ``Ineligible`` result
lists all failures at once and a reviewer never needs a resubmission to
see the full picture.
"""

from datetime import date

from attrs import field, frozen
from beartype import beartype

from ...models.product import Product
from ...models.vehicle import CoverageSelections, VehicleData


@frozen
class EligibilityViolation:
    """A single failed eligibility rule."""

    rule_id: str
    field: str
    message: str


@frozen
class Eligible:
    """The vehicle qualifies for standard pricing."""

    @property
    def is_eligible(self) -> bool:
        return True


@frozen
class Ineligible:
    """The vehicle failed one or more rules and needs manual review."""

    violations: tuple[EligibilityViolation, ...] = field()

    @violations.validator
    def _check_not_empty(self, attribute: object, value: tuple) -> None:
        if not value:
            raise ValueError("Ineligible requires at least one violation")

    @property
    def is_eligible(self) -> bool:
        return False

    @property
    def reasons(self) -> list[str]:
        """Human-readable reason strings, one per violated rule."""
        return [violation.message for violation in self.violations]


EligibilityResult = Eligible | Ineligible


@beartype
class EligibilityChecker:
    """Evaluate a vehicle and coverage selection against a product's rules."""

    @beartype
    def check(
        self,
        vehicle: VehicleData,
        selections: CoverageSelections,
        product: Product,
        as_of: date,
    ) -> Eligible | Ineligible:
        """Run all rules; thresholds come from ``product.eligibility``.

        Args:
            vehicle: Vehicle attributes
            selections: Coverage selections carrying the vehicle class
            product: Product whose eligibility rules apply
            as_of: Date the vehicle age is measured at

        Returns:
            Eligible, or Ineligible with one violation per failed rule
        """
        rules = product.eligibility
        violations: list[EligibilityViolation] = []

        vehicle_age = as_of.year - vehicle.year
        if vehicle_age > rules.max_vehicle_age:
            violations.append(
                EligibilityViolation(
                    rule_id="VEHICLE_AGE_MAX",
                    field="year",
                    message=f"vehicle exceeds maximum age of {rules.max_vehicle_age} years",
                )
            )

        if vehicle.mileage > rules.max_mileage:
            violations.append(
                EligibilityViolation(
                    rule_id="VEHICLE_MILEAGE_MAX",
                    field="mileage",
                    message=f"vehicle exceeds maximum mileage of {rules.max_mileage}",
                )
            )

        if vehicle.make.strip().upper() in rules.excluded_makes:
            violations.append(
                EligibilityViolation(
                    rule_id="VEHICLE_MAKE_EXCLUDED",
                    field="make",
                    message=f"vehicle make {vehicle.make} is excluded from this product",
                )
            )

        if selections.vehicle_class not in rules.supported_classes:
            violations.append(
                EligibilityViolation(
                    rule_id="VEHICLE_CLASS_UNSUPPORTED",
                    field="vehicle_class",
                    message=(
                        f"vehicle class {selections.vehicle_class} "
                        "is not supported by this product"
                    ),
                )
            )

        if violations:
            return Ineligible(violations=tuple(violations))
        return Eligible()
