"""Premium pricing for voluntary benefit products."""

from benefit_pricing.calculators import (
    PricingEngine,
    PricingError,
    UnknownProductTypeError,
    calculate_product_price,
)
from benefit_pricing.config import Settings, get_settings

__version__ = "1.0.0"

__all__ = [
    "PricingEngine",
    "PricingError",
    "Settings",
    "UnknownProductTypeError",
    "calculate_product_price",
    "get_settings",
]
