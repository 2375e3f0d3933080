"""Pydantic schemas for product, employee and selection payloads.

Payloads arrive as camelCase mappings from the catalog store and the
enrollment flow. Each schema validates shape and converts to the frozen
domain types the calculators work on.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from benefit_pricing.calculators.types import (
    EMPLOYEE_ROLE,
    AgeBand,
    CommuterOptions,
    CommuterProduct,
    ContributionType,
    CoverageElection,
    DisabilityOptions,
    DisabilityProduct,
    Employee,
    EmployerContribution,
    Product,
    ProductType,
    RoleCost,
    SelectedOptions,
    UnknownContributionTypeError,
    UnknownProductTypeError,
    VolLifeOptions,
    VolLifeProduct,
)


class PayloadBase(BaseModel):
    """Base payload schema."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


# ============================================================================
# Product schemas
# ============================================================================


class EmployerContributionSchema(PayloadBase):
    """Schema for an employer contribution."""

    type: str
    amount: float = Field(ge=0)

    def to_domain(self) -> EmployerContribution:
        try:
            contribution_type = ContributionType(self.type)
        except ValueError:
            raise UnknownContributionTypeError(self.type) from None
        return EmployerContribution(type=contribution_type, amount=self.amount)


class RoleCostSchema(PayloadBase):
    """Schema for one role's vol life rate."""

    role: str
    rate: float = Field(ge=0)
    cost_divisor: float = Field(default=1000, gt=0, alias="costDivisor")

    def to_domain(self) -> RoleCost:
        return RoleCost(role=self.role, rate=self.rate, cost_divisor=self.cost_divisor)


class AgeBandSchema(PayloadBase):
    """Schema for a disability age band."""

    min_age: int = Field(ge=0, alias="minAge")
    max_age: int | None = Field(default=None, alias="maxAge")
    rate: float = Field(ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "AgeBandSchema":
        if self.max_age is not None and self.max_age < self.min_age:
            raise ValueError(f"maxAge {self.max_age} is below minAge {self.min_age}")
        return self

    def to_domain(self) -> AgeBand:
        return AgeBand(min_age=self.min_age, max_age=self.max_age, rate=self.rate)


class VolLifeProductSchema(PayloadBase):
    """Schema for a voluntary life product."""

    type: Literal["voluntaryLife"]
    name: str = "Voluntary Life"
    employer_contribution: EmployerContributionSchema = Field(alias="employerContribution")
    costs: list[RoleCostSchema]

    def to_domain(self) -> VolLifeProduct:
        return VolLifeProduct(
            employer_contribution=self.employer_contribution.to_domain(),
            costs=tuple(c.to_domain() for c in self.costs),
            name=self.name,
        )


class DisabilityProductSchema(PayloadBase):
    """Schema for a long-term disability product."""

    type: Literal["longTermDisability"]
    name: str = "Long Term Disability"
    employer_contribution: EmployerContributionSchema = Field(alias="employerContribution")
    coverage_percentage: float = Field(gt=0, le=100, alias="coveragePercentage")
    cost_divisor: float = Field(gt=0, alias="costDivisor")
    rate_bands: list[AgeBandSchema] = Field(min_length=1, alias="rateBands")
    max_covered_salary: float | None = Field(default=None, ge=0, alias="maxCoveredSalary")

    def to_domain(self) -> DisabilityProduct:
        return DisabilityProduct(
            employer_contribution=self.employer_contribution.to_domain(),
            coverage_percentage=self.coverage_percentage,
            cost_divisor=self.cost_divisor,
            rate_bands=tuple(b.to_domain() for b in self.rate_bands),
            max_covered_salary=self.max_covered_salary,
            name=self.name,
        )


class CommuterProductSchema(PayloadBase):
    """Schema for a commuter product."""

    type: Literal["commuter"]
    name: str = "Commuter"
    employer_contribution: EmployerContributionSchema = Field(alias="employerContribution")
    benefits: dict[str, float]

    def to_domain(self) -> CommuterProduct:
        return CommuterProduct(
            employer_contribution=self.employer_contribution.to_domain(),
            benefits=dict(self.benefits),
            name=self.name,
        )


_PRODUCT_SCHEMAS: dict[ProductType, type[PayloadBase]] = {
    ProductType.VOLUNTARY_LIFE: VolLifeProductSchema,
    ProductType.LONG_TERM_DISABILITY: DisabilityProductSchema,
    ProductType.COMMUTER: CommuterProductSchema,
}


# ============================================================================
# Employee and selection schemas
# ============================================================================


class EmployeeSchema(PayloadBase):
    """Schema for the employee attributes used in pricing."""

    salary: float = Field(ge=0)
    age: int = Field(ge=0)
    employee_id: str | None = Field(default=None, alias="employeeId")

    def to_domain(self) -> Employee:
        return Employee(salary=self.salary, age=self.age, employee_id=self.employee_id)


class CoverageElectionSchema(PayloadBase):
    """Schema for one role's elected face amount."""

    role: str
    coverage: float = Field(ge=0)


class VolLifeOptionsSchema(PayloadBase):
    """Schema for vol life selections."""

    family_members_to_cover: list[str] = Field(min_length=1, alias="familyMembersToCover")
    coverage_level: list[CoverageElectionSchema] = Field(alias="coverageLevel")

    @model_validator(mode="after")
    def check_roles_have_coverage(self) -> "VolLifeOptionsSchema":
        elected = {c.role for c in self.coverage_level}
        missing = [r for r in self.family_members_to_cover if r not in elected]
        if missing:
            raise ValueError(f"No coverage level selected for roles: {', '.join(missing)}")
        return self

    def to_domain(self) -> VolLifeOptions:
        return VolLifeOptions(
            family_members_to_cover=tuple(self.family_members_to_cover),
            coverage_level=tuple(
                CoverageElection(role=c.role, coverage=c.coverage)
                for c in self.coverage_level
            ),
        )


class DisabilityOptionsSchema(PayloadBase):
    """Schema for disability selections."""

    family_members_to_cover: list[str] = Field(
        default_factory=lambda: [EMPLOYEE_ROLE], alias="familyMembersToCover"
    )

    def to_domain(self) -> DisabilityOptions:
        return DisabilityOptions(family_members_to_cover=tuple(self.family_members_to_cover))


class CommuterOptionsSchema(PayloadBase):
    """Schema for commuter selections."""

    benefit: str

    def to_domain(self) -> CommuterOptions:
        return CommuterOptions(benefit=self.benefit)


_OPTIONS_SCHEMAS: dict[ProductType, type[PayloadBase]] = {
    ProductType.VOLUNTARY_LIFE: VolLifeOptionsSchema,
    ProductType.LONG_TERM_DISABILITY: DisabilityOptionsSchema,
    ProductType.COMMUTER: CommuterOptionsSchema,
}


# ============================================================================
# Parsing entry points
# ============================================================================


def parse_product_type(value: Any) -> ProductType:
    """Return the ProductType for a raw discriminator.

    Raises:
        UnknownProductTypeError: If the value names no known product type
    """
    if isinstance(value, ProductType):
        return value
    try:
        return ProductType(value)
    except ValueError:
        raise UnknownProductTypeError(value) from None


def parse_product(payload: Mapping[str, Any]) -> Product:
    """Validate a product payload into its domain variant."""
    product_type = parse_product_type(payload.get("type"))
    schema = _PRODUCT_SCHEMAS[product_type]
    return schema.model_validate(dict(payload)).to_domain()


def parse_employee(payload: Mapping[str, Any]) -> Employee:
    """Validate an employee payload."""
    return EmployeeSchema.model_validate(dict(payload)).to_domain()


def parse_selected_options(
    product_type: ProductType, payload: Mapping[str, Any]
) -> SelectedOptions:
    """Validate a selection payload against the variant for `product_type`."""
    schema = _OPTIONS_SCHEMAS[parse_product_type(product_type)]
    return schema.model_validate(dict(payload)).to_domain()
