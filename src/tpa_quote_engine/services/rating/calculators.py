# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium calculation for eligible vehicles.

All arithmetic is ``Decimal`` with round-half-up to cents. The calculator
performs no I/O; rates come from the injected lookup and the result is
returned for the caller to persist.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Final

from beartype import beartype

from ...models.base import round_currency
from ...models.product import FeeConfig, FeeKind, Product, SurchargeRules
from ...models.quote import QuoteResult
from ...models.vehicle import CoverageSelections, VehicleData
from .identifiers import generate_reference_number
from .rate_tables import RateLookup

FOUR_WHEEL_DRIVETRAINS: Final = frozenset(
    {"4WD", "AWD", "4X4", "ALL WHEEL DRIVE", "FOUR WHEEL DRIVE"}
)


class PremiumCalculator:
    """Compute base, taxes, fees and total for a coverage selection."""

    @beartype
    @staticmethod
    def calculate_taxes(base_premium: Decimal, tax_rate: Decimal) -> Decimal:
        """Taxes = base premium x tax rate, rounded to cents."""
        if tax_rate < 0 or tax_rate > 1:
            raise ValueError(f"Tax rate {tax_rate} outside valid range [0, 1]")
        return round_currency(base_premium * tax_rate)

    @beartype
    @staticmethod
    def calculate_fees(base_premium: Decimal, fee: FeeConfig) -> Decimal:
        """Flat fee as configured, or a capped percentage of base premium."""
        if fee.kind == FeeKind.FLAT:
            return round_currency(fee.amount)

        amount = round_currency(base_premium * fee.amount)
        if fee.cap is not None:
            amount = min(amount, round_currency(fee.cap))
        return amount

    @beartype
    @staticmethod
    def calculate_surcharges(vehicle: VehicleData, rules: SurchargeRules) -> Decimal:
        """Sum the flat surcharges the vehicle's powertrain attracts."""
        total = Decimal("0")
        drivetrain = (vehicle.drivetrain or "").strip().upper()
        if drivetrain in FOUR_WHEEL_DRIVETRAINS:
            total += rules.four_wheel_drive
        if "DIESEL" in (vehicle.fuel_type or "").upper():
            total += rules.diesel
        engine = (vehicle.engine or "").upper()
        if "TURBO" in engine or "SUPERCHARGED" in engine:
            total += rules.forced_induction
        return round_currency(total)

    @beartype
    @staticmethod
    def calculate_quote(
        *,
        tenant_id: str,
        product: Product,
        selections: CoverageSelections,
        rate_lookup: RateLookup,
        tax_rate: Decimal,
        now: datetime,
        vehicle: VehicleData | None = None,
        quote_number_prefix: str = "QTE-",
        validity_days: int = 30,
    ) -> QuoteResult:
        """Price an eligible selection.

        Args:
            tenant_id: Tenant the quote belongs to
            product: Product supplying the fee configuration
            selections: Tier, term and vehicle class to rate
            rate_lookup: ``(tier, term_months, vehicle_class) -> base rate``
            tax_rate: Fractional tax rate for the customer's jurisdiction
            now: Creation timestamp
            vehicle: Vehicle whose powertrain may attract surcharges; none
                when omitted
            quote_number_prefix: Prefix of the generated quote number
            validity_days: Days until the quote expires

        Returns:
            Immutable quote with the full premium breakdown

        Raises:
            RateNotFoundError: No rate-table entry for the selection
        """
        rate = round_currency(
            rate_lookup(
                selections.tier, selections.term_months, selections.vehicle_class
            )
        )
        surcharges = (
            PremiumCalculator.calculate_surcharges(vehicle, product.surcharges)
            if vehicle is not None
            else Decimal("0.00")
        )
        # Surcharges are part of the taxable base.
        base_premium = rate + surcharges
        taxes = PremiumCalculator.calculate_taxes(base_premium, tax_rate)
        fees = PremiumCalculator.calculate_fees(base_premium, product.fee)
        total_premium = round_currency(base_premium + taxes + fees)

        return QuoteResult(
            quote_number=generate_reference_number(quote_number_prefix, now),
            tenant_id=tenant_id,
            product_id=product.id,
            tier=selections.tier,
            term_months=selections.term_months,
            vehicle_class=selections.vehicle_class,
            base_premium=base_premium,
            surcharges=surcharges,
            taxes=taxes,
            fees=fees,
            total_premium=total_premium,
            tax_rate=tax_rate,
            created_at=now,
            expires_at=now + timedelta(days=validity_days),
        )
