"""Rating engine services package.

This package is the pure pricing core:
- Eligibility rules evaluated without short-circuiting
- Base-rate lookup through injected rate tables
- Premium calculation with round-half-up currency math
- Special quote request routing and review transitions
- Vehicle rating-class assignment
"""

from .calculators import PremiumCalculator
from .eligibility import (
    EligibilityChecker,
    EligibilityResult,
    EligibilityViolation,
    Eligible,
    Ineligible,
)
from .engine import QuoteEngine
from .identifiers import generate_reference_number
from .rate_tables import RateLookup, RateTable, RateTableEntry
from .special_requests import (
    SPECIAL_REQUEST_LIFETIME,
    apply_review_action,
    create_special_quote_request,
    summarize,
)
from .tax_rates import TaxRateSchedule
from .vehicle_class import UNCLASSIFIED, VehicleClass, classify_vehicle, vehicle_class_tag

__all__ = [
    # Main Engine
    "QuoteEngine",
    # Eligibility
    "EligibilityChecker",
    "EligibilityResult",
    "EligibilityViolation",
    "Eligible",
    "Ineligible",
    # Pricing
    "PremiumCalculator",
    "RateLookup",
    "RateTable",
    "RateTableEntry",
    "TaxRateSchedule",
    "generate_reference_number",
    # Special quote requests
    "SPECIAL_REQUEST_LIFETIME",
    "create_special_quote_request",
    "apply_review_action",
    "summarize",
    # Vehicle classes
    "VehicleClass",
    "UNCLASSIFIED",
    "classify_vehicle",
    "vehicle_class_tag",
]
