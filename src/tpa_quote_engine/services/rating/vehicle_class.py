# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Vehicle rating-class assignment for VSC products.

Class A covers economy makes and class C luxury makes. Class B covers
the domestic and near-luxury makes in between. Exotic makes and a handful of
performance models have no class at all; those vehicles can only be
quoted through a special quote request.
"""

from enum import Enum
from typing import Final

from beartype import beartype


class VehicleClass(str, Enum):
    """Coarse rating buckets used by VSC rate tables."""

    A = "A"
    B = "B"
    C = "C"


UNCLASSIFIED: Final = "UNCLASSIFIED"

INELIGIBLE_MAKES: Final = frozenset(
    {
        "ALFA ROMEO", "ASTON MARTIN", "BENTLEY", "BUGATTI", "CORVETTE",
        "DAEWOO", "DELOREAN", "FERRARI", "HUMMER", "LAMBORGHINI", "LOTUS",
        "MASERATI", "MAYBACH", "MCLAREN", "PEUGEOT", "RIVIAN",
        "ROLLS ROYCE", "SAAB", "SATURN", "SMART", "STERLING", "SUZUKI",
        "YUGO",
    }
)

# Make -> model fragments that have no class under that make.
INELIGIBLE_MODELS: Final[dict[str, tuple[str, ...]]] = {
    "AUDI": ("A8", "RS", "S6", "S7", "R8"),
    "BMW": ("7", "M", "Z"),
    "DODGE": ("SRT",),
    "MERCEDES": ("AMG", "M CLASS", "S CLASS", "SL CLASS"),
    "MITSUBISHI": ("LANCER EVOLUTION",),
    "SUBARU": ("WRX",),
    "VOLKSWAGEN": ("V8",),
}

CLASS_A_MAKES: Final = frozenset(
    {
        "HONDA", "HYUNDAI", "ISUZU", "KIA", "MAZDA", "MITSUBISHI", "SCION",
        "SUBARU", "TOYOTA", "LEXUS", "NISSAN", "INFINITI",
    }
)

CLASS_C_MAKES: Final = frozenset(
    {"CADILLAC", "JAGUAR", "LAND ROVER", "PORSCHE", "TESLA"}
)

CLASS_B_MAKES: Final = frozenset(
    {
        "ACURA", "AUDI", "BMW", "BUICK", "CHEVROLET", "CHRYSLER", "DODGE",
        "PLYMOUTH", "FIAT", "FORD", "GMC", "JEEP", "MERCURY", "MERCEDES",
        "MINI", "OLDSMOBILE", "PONTIAC", "VOLKSWAGEN", "VOLVO",
    }
)


@beartype
def classify_vehicle(make: str, model: str | None = None) -> VehicleClass | None:
    """Assign a rating class, or ``None`` when the vehicle has no class."""
    upper_make = make.strip().upper()
    upper_model = (model or "").strip().upper()

    if upper_make in INELIGIBLE_MAKES:
        return None
    if any(part in upper_model for part in INELIGIBLE_MODELS.get(upper_make, ())):
        return None

    if upper_make in CLASS_A_MAKES:
        return VehicleClass.A
    if upper_make in CLASS_C_MAKES:
        return VehicleClass.C
    if upper_make in CLASS_B_MAKES:
        return VehicleClass.B
    return None


@beartype
def vehicle_class_tag(make: str, model: str | None = None) -> str:
    """Class tag for coverage selections; ``UNCLASSIFIED`` when none applies."""
    vehicle_class = classify_vehicle(make, model)
    return vehicle_class.value if vehicle_class is not None else UNCLASSIFIED
