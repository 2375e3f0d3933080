"""Type definitions for the pricing pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

EMPLOYEE_ROLE = "ee"


class ProductType(str, Enum):
    """Benefit product discriminators."""

    VOLUNTARY_LIFE = "voluntaryLife"
    LONG_TERM_DISABILITY = "longTermDisability"
    COMMUTER = "commuter"


class ContributionType(str, Enum):
    """How the employer subsidises a product."""

    DOLLARS = "dollars"
    PERCENTAGE = "percentage"


@dataclass(frozen=True)
class EmployerContribution:
    """Employer subsidy subtracted from the pre-contribution price."""

    type: ContributionType
    amount: float  # Dollars, or whole percent (10 = 10%)


@dataclass(frozen=True)
class RoleCost:
    """Rate charged per `cost_divisor` dollars of elected coverage."""

    role: str
    rate: float
    cost_divisor: float = 1000


@dataclass(frozen=True)
class AgeBand:
    """Inclusive age band. `max_age` of None = no upper limit."""

    min_age: int
    max_age: int | None
    rate: float

    def contains(self, age: int) -> bool:
        if age < self.min_age:
            return False
        return self.max_age is None or age <= self.max_age


# ============================================================================
# Products
# ============================================================================


@dataclass(frozen=True)
class VolLifeProduct:
    """Voluntary life: priced per role per unit of coverage."""

    employer_contribution: EmployerContribution
    costs: tuple[RoleCost, ...]
    name: str = "Voluntary Life"
    type: ProductType = field(default=ProductType.VOLUNTARY_LIFE, init=False)


@dataclass(frozen=True)
class DisabilityProduct:
    """Long-term disability: priced on covered salary, employee only."""

    employer_contribution: EmployerContribution
    coverage_percentage: float  # Percent of salary covered
    cost_divisor: float
    rate_bands: tuple[AgeBand, ...]
    max_covered_salary: float | None = None
    name: str = "Long Term Disability"
    type: ProductType = field(default=ProductType.LONG_TERM_DISABILITY, init=False)


@dataclass(frozen=True)
class CommuterProduct:
    """Commuter benefits: flat price per benefit category."""

    employer_contribution: EmployerContribution
    benefits: dict[str, float] = field(default_factory=dict, hash=False)
    name: str = "Commuter"
    type: ProductType = field(default=ProductType.COMMUTER, init=False)


Product = Union[VolLifeProduct, DisabilityProduct, CommuterProduct]


# ============================================================================
# Employee and selections
# ============================================================================


@dataclass(frozen=True)
class Employee:
    """Employee attributes read by disability pricing."""

    salary: float
    age: int
    employee_id: str | None = None


@dataclass(frozen=True)
class CoverageElection:
    """Elected face amount for one role."""

    role: str
    coverage: float


@dataclass(frozen=True)
class VolLifeOptions:
    family_members_to_cover: tuple[str, ...]
    coverage_level: tuple[CoverageElection, ...]


@dataclass(frozen=True)
class DisabilityOptions:
    family_members_to_cover: tuple[str, ...] = (EMPLOYEE_ROLE,)


@dataclass(frozen=True)
class CommuterOptions:
    benefit: str


SelectedOptions = Union[VolLifeOptions, DisabilityOptions, CommuterOptions]


class PricingError(Exception):
    """Base class for pricing failures caused by malformed input."""


class UnknownProductTypeError(PricingError):
    """Raised when a product type has no calculator."""

    def __init__(self, product_type: object):
        self.product_type = product_type
        super().__init__(f"Unknown product type: {product_type}")


class UnknownContributionTypeError(PricingError):
    """Raised when an employer contribution type is not recognized."""

    def __init__(self, contribution_type: object):
        self.contribution_type = contribution_type
        super().__init__(f"Unknown employer contribution type: {contribution_type}")
