"""Rate and coverage resolution against product rate tables."""

from __future__ import annotations

from collections.abc import Iterable

from benefit_pricing.calculators.types import (
    AgeBand,
    CoverageElection,
    PricingError,
    RoleCost,
)


class RateNotFoundError(PricingError):
    """Raised when no rate in a product table applies."""

    def __init__(self, role: str | None = None, age: int | None = None):
        self.role = role
        self.age = age
        if role is not None:
            message = f"No rate found for role {role!r}"
        else:
            message = f"No rate band found for age {age}"
        super().__init__(message)


class CoverageNotFoundError(PricingError):
    """Raised when a covered role has no elected coverage amount."""

    def __init__(self, role: str):
        self.role = role
        super().__init__(f"No coverage level selected for role {role!r}")


def resolve_role_cost(role: str, costs: Iterable[RoleCost]) -> RoleCost:
    """Return the cost entry for a role.

    Raises:
        RateNotFoundError: If the table has no entry for the role
    """
    for cost in costs:
        if cost.role == role:
            return cost
    raise RateNotFoundError(role=role)


def resolve_age_band_rate(age: int, bands: Iterable[AgeBand]) -> float:
    """Return the rate of the band containing `age`.

    Bands are checked lowest first; the first containing band wins.

    Raises:
        RateNotFoundError: If no band contains the age
    """
    for band in sorted(bands, key=lambda b: b.min_age):
        if band.contains(age):
            return band.rate
    raise RateNotFoundError(age=age)


def find_coverage(role: str, coverage_level: Iterable[CoverageElection]) -> float:
    """Return the elected coverage amount for a role.

    A missing role is a data defect, never priced as zero.

    Raises:
        CoverageNotFoundError: If no election matches the role
    """
    for election in coverage_level:
        if election.role == role:
            return election.coverage
    raise CoverageNotFoundError(role)
