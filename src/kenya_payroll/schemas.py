"""Pydantic schemas for callers exchanging plain mappings."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from kenya_payroll.calculators.types import PayrollInput


# ============================================================================
# Request
# ============================================================================


class PayrollRequest(BaseModel):
    """Schema for a payroll calculation request.

    A non-positive gross salary is accepted and yields an all-zero result.
    """

    model_config = ConfigDict(extra="forbid")

    gross_salary: Decimal
    pension_contribution: Decimal = Field(default=Decimal("0"), ge=0)
    insurance_premium: Decimal = Field(default=Decimal("0"), ge=0)
    mortgage_interest: Decimal = Field(default=Decimal("0"), ge=0)
    calculation_date: date | None = None

    def to_input(self) -> PayrollInput:
        return PayrollInput(
            gross_salary=self.gross_salary,
            pension_contribution=self.pension_contribution,
            insurance_premium=self.insurance_premium,
            mortgage_interest=self.mortgage_interest,
            calculation_date=self.calculation_date,
        )


# ============================================================================
# Response
# ============================================================================


class DeductionsResponse(BaseModel):
    """Schema for withheld deductions."""

    model_config = ConfigDict(from_attributes=True)

    shif: Decimal
    nssf: Decimal
    housing_levy: Decimal
    paye: Decimal
    total_deductions: Decimal


class ReliefsResponse(BaseModel):
    """Schema for applied reliefs."""

    model_config = ConfigDict(from_attributes=True)

    personal_relief: Decimal
    insurance_relief: Decimal
    total_reliefs: Decimal


class EmployerContributionsResponse(BaseModel):
    """Schema for employer-side contributions."""

    model_config = ConfigDict(from_attributes=True)

    nssf: Decimal
    housing_levy: Decimal
    total: Decimal


class PayrollResponse(BaseModel):
    """Schema for a payroll calculation result."""

    model_config = ConfigDict(from_attributes=True)

    gross_salary: Decimal
    taxable_income: Decimal
    gross_paye: Decimal
    deductions: DeductionsResponse
    reliefs: ReliefsResponse
    net_salary: Decimal
    employer_contributions: EmployerContributionsResponse
    calculation_date: date
    inputs_fingerprint: str
