"""Benefit premium calculation."""

from benefit_pricing.calculators.engine import EnrollmentQuote, PriceQuote, PricingEngine
from benefit_pricing.calculators.pricing import (
    InvalidSelectionError,
    UnknownBenefitError,
    calculate_commuter_price,
    calculate_ltd_price,
    calculate_product_price,
    calculate_vol_life_price,
    calculate_vol_life_price_per_role,
    format_price,
    get_employer_contribution,
)
from benefit_pricing.calculators.rate_resolver import CoverageNotFoundError, RateNotFoundError
from benefit_pricing.calculators.types import (
    PricingError,
    UnknownContributionTypeError,
    UnknownProductTypeError,
)

__all__ = [
    "PricingEngine",
    "PriceQuote",
    "EnrollmentQuote",
    "calculate_product_price",
    "calculate_vol_life_price",
    "calculate_vol_life_price_per_role",
    "calculate_ltd_price",
    "calculate_commuter_price",
    "get_employer_contribution",
    "format_price",
    "PricingError",
    "UnknownProductTypeError",
    "UnknownContributionTypeError",
    "UnknownBenefitError",
    "InvalidSelectionError",
    "CoverageNotFoundError",
    "RateNotFoundError",
]
