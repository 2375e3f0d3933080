"""Pytest fixtures for benefit pricing tests."""

from __future__ import annotations

from typing import Any

import pytest

from benefit_pricing.calculators.types import (
    AgeBand,
    CommuterProduct,
    ContributionType,
    DisabilityProduct,
    Employee,
    EmployerContribution,
    RoleCost,
    VolLifeProduct,
)
from benefit_pricing.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings(
        engine_version="1.0.0",
        clamp_employer_contribution=False,
        log_level="WARNING",
    )


@pytest.fixture
def employee() -> Employee:
    """A 35 year old employee earning $80,100."""
    return Employee(salary=80100, age=35, employee_id="emp-001")


@pytest.fixture
def voluntary_life() -> VolLifeProduct:
    """Vol life with a 10% employer contribution."""
    return VolLifeProduct(
        employer_contribution=EmployerContribution(
            type=ContributionType.PERCENTAGE, amount=10
        ),
        costs=(
            RoleCost(role="ee", rate=0.35),
            RoleCost(role="sp", rate=0.12),
            RoleCost(role="ch", rate=0.06),
        ),
    )


@pytest.fixture
def long_term_disability() -> DisabilityProduct:
    """LTD covering 80% of salary with a $10 employer contribution."""
    return DisabilityProduct(
        employer_contribution=EmployerContribution(
            type=ContributionType.DOLLARS, amount=10
        ),
        coverage_percentage=80,
        cost_divisor=1000,
        rate_bands=(
            AgeBand(min_age=18, max_age=29, rate=0.25),
            AgeBand(min_age=30, max_age=39, rate=0.5),
            AgeBand(min_age=40, max_age=49, rate=0.75),
            AgeBand(min_age=50, max_age=None, rate=1.25),
        ),
    )


@pytest.fixture
def commuter() -> CommuterProduct:
    """Commuter with a $75 employer contribution."""
    return CommuterProduct(
        employer_contribution=EmployerContribution(
            type=ContributionType.DOLLARS, amount=75
        ),
        benefits={"parking": 250, "train": 84.75},
    )


@pytest.fixture
def employee_payload() -> dict[str, Any]:
    return {"salary": 80100, "age": 35, "employeeId": "emp-001"}


@pytest.fixture
def product_payloads() -> dict[str, dict[str, Any]]:
    """Catalog payloads equivalent to the domain product fixtures."""
    return {
        "voluntaryLife": {
            "type": "voluntaryLife",
            "name": "Voluntary Life",
            "employerContribution": {"type": "percentage", "amount": 10},
            "costs": [
                {"role": "ee", "rate": 0.35, "costDivisor": 1000},
                {"role": "sp", "rate": 0.12, "costDivisor": 1000},
                {"role": "ch", "rate": 0.06, "costDivisor": 1000},
            ],
        },
        "longTermDisability": {
            "type": "longTermDisability",
            "name": "Long Term Disability",
            "employerContribution": {"type": "dollars", "amount": 10},
            "coveragePercentage": 80,
            "costDivisor": 1000,
            "rateBands": [
                {"minAge": 18, "maxAge": 29, "rate": 0.25},
                {"minAge": 30, "maxAge": 39, "rate": 0.5},
                {"minAge": 40, "maxAge": 49, "rate": 0.75},
                {"minAge": 50, "rate": 1.25},
            ],
        },
        "commuter": {
            "type": "commuter",
            "name": "Commuter",
            "employerContribution": {"type": "dollars", "amount": 75},
            "benefits": {"parking": 250, "train": 84.75},
        },
    }
