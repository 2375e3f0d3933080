"""Benefit pricing engine - prices products and whole enrollments."""

from __future__ import annotations

import dataclasses
import hashlib
import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any
from uuid import UUID

from benefit_pricing.calculators.pricing import calculate_product_price
from benefit_pricing.calculators.types import (
    Employee,
    Product,
    ProductType,
    SelectedOptions,
)
from benefit_pricing.config import Settings, get_settings
from benefit_pricing.schemas import parse_employee, parse_product, parse_selected_options

logger = logging.getLogger(__name__)


@dataclass
class PriceQuote:
    """Result of pricing one product for one employee."""

    quote_id: UUID
    product_type: ProductType
    product_name: str
    price: Decimal
    inputs_fingerprint: str


@dataclass
class EnrollmentQuote:
    """Result of pricing every product an employee elected."""

    quotes: list[PriceQuote] = field(default_factory=list)
    total: Decimal = Decimal("0.00")


class PricingEngine:
    """Prices benefit elections with configured settings.

    Each quote carries a deterministic ID: the same product, employee,
    selections and engine version always yield the same quote_id.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def price_product(
        self,
        product: Product | Mapping[str, Any],
        employee: Employee | Mapping[str, Any] | None,
        selected_options: SelectedOptions | Mapping[str, Any],
    ) -> PriceQuote:
        """Price a single product election."""
        if isinstance(product, Mapping):
            product = parse_product(product)
        if isinstance(selected_options, Mapping):
            selected_options = parse_selected_options(product.type, selected_options)
        if isinstance(employee, Mapping):
            employee = parse_employee(employee) if employee else None

        price = calculate_product_price(
            product,
            employee,
            selected_options,
            clamp_contribution=self.settings.clamp_employer_contribution,
        )

        inputs_fingerprint = self._compute_inputs_fingerprint(
            product, employee, selected_options
        )
        return PriceQuote(
            quote_id=self._generate_quote_id(inputs_fingerprint),
            product_type=product.type,
            product_name=product.name,
            price=price,
            inputs_fingerprint=inputs_fingerprint,
        )

    def price_enrollment(
        self,
        employee: Employee | Mapping[str, Any] | None,
        elections: Iterable[
            tuple[Product | Mapping[str, Any], SelectedOptions | Mapping[str, Any]]
        ],
    ) -> EnrollmentQuote:
        """Price every (product, selected_options) election and total them.

        Pricing errors propagate; a partial enrollment total is never returned.
        """
        result = EnrollmentQuote()
        for product, selected_options in elections:
            quote = self.price_product(product, employee, selected_options)
            result.quotes.append(quote)
            result.total += quote.price

        logger.debug(
            "Priced enrollment of %d products, total %s", len(result.quotes), result.total
        )
        return result

    def _generate_quote_id(self, inputs_fingerprint: str) -> UUID:
        """Generate deterministic quote ID."""
        data = {
            "engine_version": self.settings.engine_version,
            "clamp_employer_contribution": self.settings.clamp_employer_contribution,
            "inputs_fingerprint": inputs_fingerprint,
        }
        json_str = json.dumps(data, sort_keys=True)
        hash_bytes = hashlib.sha256(json_str.encode()).digest()
        return UUID(bytes=hash_bytes[:16])

    def _compute_inputs_fingerprint(self, *inputs: Any) -> str:
        """Compute fingerprint of all inputs used in a quote."""
        canonical = [self._to_canonical(i) for i in inputs]
        json_str = json.dumps(canonical, sort_keys=True, default=str)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]

    @classmethod
    def _to_canonical(cls, value: Any) -> Any:
        """Reduce a value to JSON-ready data; ints and floats hash alike."""
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return cls._to_canonical(dataclasses.asdict(value))
        if isinstance(value, Mapping):
            return {str(k): cls._to_canonical(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [cls._to_canonical(v) for v in value]
        if isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        return value
