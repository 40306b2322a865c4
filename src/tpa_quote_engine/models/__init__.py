"""Domain models package for the TPA Quote Engine.

This package exports all Pydantic domain models with strict validation
and immutability.
"""

from .base import BaseModelConfig, IdentifiableModel, TimestampedModel, round_currency
from .product import (
    CoverageOptionDefinition,
    EligibilityRules,
    FeeConfig,
    FeeKind,
    Product,
    ProductCategory,
    SurchargeRules,
)
from .quote import QuoteResult
from .special_quote import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    AlternativeQuote,
    ReviewAction,
    SpecialQuoteRequest,
    SpecialQuoteStatus,
    SpecialQuoteSummary,
    is_transition_allowed,
)
from .vehicle import CoverageSelections, CustomerContact, VehicleData

__all__ = [
    # Base models
    "BaseModelConfig",
    "TimestampedModel",
    "IdentifiableModel",
    "round_currency",
    # Product models
    "Product",
    "ProductCategory",
    "CoverageOptionDefinition",
    "EligibilityRules",
    "FeeConfig",
    "FeeKind",
    "SurchargeRules",
    # Inputs
    "VehicleData",
    "CoverageSelections",
    "CustomerContact",
    # Outputs
    "QuoteResult",
    "SpecialQuoteRequest",
    "SpecialQuoteStatus",
    "SpecialQuoteSummary",
    "AlternativeQuote",
    "ReviewAction",
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "is_transition_allowed",
]
