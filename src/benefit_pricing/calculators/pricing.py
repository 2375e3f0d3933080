"""Premium pricing for voluntary benefit products.

Pipeline (same for every product type):
1) Dispatch on product type to a calculator for the pre-contribution price
2) Compute the employer contribution against that price
3) Subtract and truncate to cents

Pre-contribution prices are binary floats computed in rate-table order
(coverage / divisor * rate, price * percent / 100). The enrollment app's
published prices are derived the same way, so the float results are kept
until the final truncation.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from decimal import ROUND_DOWN, Decimal
from typing import Any

from benefit_pricing.calculators.rate_resolver import (
    find_coverage,
    resolve_age_band_rate,
    resolve_role_cost,
)
from benefit_pricing.calculators.types import (
    EMPLOYEE_ROLE,
    CommuterOptions,
    CommuterProduct,
    ContributionType,
    CoverageElection,
    DisabilityOptions,
    DisabilityProduct,
    Employee,
    EmployerContribution,
    PricingError,
    Product,
    ProductType,
    RoleCost,
    SelectedOptions,
    UnknownContributionTypeError,
    UnknownProductTypeError,
    VolLifeOptions,
    VolLifeProduct,
)
from benefit_pricing.schemas import (
    parse_employee,
    parse_product,
    parse_product_type,
    parse_selected_options,
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

_OPTIONS_BY_PRODUCT: dict[ProductType, type] = {
    ProductType.VOLUNTARY_LIFE: VolLifeOptions,
    ProductType.LONG_TERM_DISABILITY: DisabilityOptions,
    ProductType.COMMUTER: CommuterOptions,
}


class UnknownBenefitError(PricingError):
    """Raised when a commuter benefit is not in the product's price list."""

    def __init__(self, benefit: str):
        self.benefit = benefit
        super().__init__(f"Unknown commuter benefit: {benefit}")


class InvalidSelectionError(PricingError):
    """Raised when selections don't fit the product being priced."""


def format_price(price: float | Decimal) -> Decimal:
    """Truncate a price toward zero at two decimal places.

    Floats are scaled by 100 in binary before truncation, so 71.1 (the float
    result of 79 - 7.9) becomes 71.09. When the scaled product rounds up onto
    a whole cent the input never reached, the cent is dropped, so the result
    never lies further from zero than the input. Decimals truncate exactly,
    which makes format_price(format_price(x)) == format_price(x).
    """
    if isinstance(price, Decimal):
        return price.quantize(CENTS, rounding=ROUND_DOWN)
    cents = math.trunc(price * 100)
    if price >= 0 and cents / 100 > price:
        cents -= 1
    elif price < 0 and cents / 100 < price:
        cents += 1
    return Decimal(cents).scaleb(-2)


def get_employer_contribution(
    employer_contribution: EmployerContribution, price: float
) -> float:
    """Return the employer's share of a pre-contribution price.

    Dollar contributions are returned unchanged, not capped at `price`.

    Raises:
        UnknownContributionTypeError: If the contribution type is not recognized
    """
    if employer_contribution.type == ContributionType.DOLLARS:
        return employer_contribution.amount
    if employer_contribution.type == ContributionType.PERCENTAGE:
        return price * employer_contribution.amount / 100
    raise UnknownContributionTypeError(employer_contribution.type)


def calculate_vol_life_price_per_role(
    role: str,
    coverage_level: tuple[CoverageElection, ...] | list[CoverageElection],
    costs: tuple[RoleCost, ...] | list[RoleCost],
) -> float:
    """Price one role's elected vol life coverage."""
    coverage = find_coverage(role, coverage_level)
    cost = resolve_role_cost(role, costs)
    return coverage / cost.cost_divisor * cost.rate


def calculate_vol_life_price(product: VolLifeProduct, selected_options: VolLifeOptions) -> float:
    """Sum the per-role price over every covered family member."""
    price = 0.0
    for role in selected_options.family_members_to_cover:
        price += calculate_vol_life_price_per_role(
            role, selected_options.coverage_level, product.costs
        )
    return price


def calculate_ltd_price(
    product: DisabilityProduct, employee: Employee, selected_options: DisabilityOptions
) -> float:
    """Price long-term disability on the employee's covered salary.

    Covered salary is `coverage_percentage` of salary, capped at
    `max_covered_salary` when set. The rate comes from the employee's age band.

    Raises:
        InvalidSelectionError: If any dependent role is selected
    """
    dependents = [r for r in selected_options.family_members_to_cover if r != EMPLOYEE_ROLE]
    if dependents:
        raise InvalidSelectionError(
            f"Disability covers the employee only, got roles: {', '.join(dependents)}"
        )

    covered_salary = employee.salary * product.coverage_percentage / 100
    if product.max_covered_salary is not None:
        covered_salary = min(covered_salary, product.max_covered_salary)

    rate = resolve_age_band_rate(employee.age, product.rate_bands)
    return covered_salary / product.cost_divisor * rate


def calculate_commuter_price(product: CommuterProduct, selected_options: CommuterOptions) -> float:
    """Return the flat price of the selected commuter benefit."""
    try:
        return product.benefits[selected_options.benefit]
    except KeyError:
        raise UnknownBenefitError(selected_options.benefit) from None


def calculate_product_price(
    product: Product | Mapping[str, Any],
    employee: Employee | Mapping[str, Any] | None,
    selected_options: SelectedOptions | Mapping[str, Any],
    *,
    clamp_contribution: bool = False,
) -> Decimal:
    """Return the employee's post-contribution premium, truncated to cents.

    Accepts domain objects or raw payload mappings. With `clamp_contribution`
    the employer contribution never exceeds the pre-contribution price.

    Raises:
        UnknownProductTypeError: If the product type has no calculator
    """
    if isinstance(product, Mapping):
        product = parse_product(product)
    product_type = parse_product_type(product.type)

    if isinstance(selected_options, Mapping):
        selected_options = parse_selected_options(product_type, selected_options)
    if not isinstance(selected_options, _OPTIONS_BY_PRODUCT[product_type]):
        raise InvalidSelectionError(
            f"{type(selected_options).__name__} cannot price a {product_type.value} product"
        )

    logger.debug("Pricing %s product %r", product_type.value, product.name)

    if product_type == ProductType.VOLUNTARY_LIFE:
        price = calculate_vol_life_price(product, selected_options)
    elif product_type == ProductType.LONG_TERM_DISABILITY:
        if employee is None:
            raise InvalidSelectionError("Disability pricing requires an employee")
        if isinstance(employee, Mapping):
            employee = parse_employee(employee)
        price = calculate_ltd_price(product, employee, selected_options)
    elif product_type == ProductType.COMMUTER:
        price = calculate_commuter_price(product, selected_options)
    else:
        raise UnknownProductTypeError(product_type)

    contribution = get_employer_contribution(product.employer_contribution, price)
    if clamp_contribution:
        contribution = min(contribution, price)

    return format_price(price - contribution)
