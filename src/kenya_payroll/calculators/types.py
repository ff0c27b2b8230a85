"""Type definitions for the calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from kenya_payroll.calculators.money import ZERO


# ============================================================================
# Calculation input
# ============================================================================


@dataclass(frozen=True)
class PayrollInput:
    """Inputs for one monthly payroll calculation.

    Attributes:
        gross_salary: Gross monthly salary in KES.
        pension_contribution: Voluntary pension contribution beyond NSSF.
            Deductible up to the configured cap.
        insurance_premium: Life/health insurance premium qualifying for
            insurance relief.
        mortgage_interest: Mortgage interest paid. Deductible up to the
            configured cap.
        calculation_date: Selects the NSSF limits. None means the engine's
            default date (the configured as-of date, else today).
    """

    gross_salary: Decimal
    pension_contribution: Decimal = ZERO
    insurance_premium: Decimal = ZERO
    mortgage_interest: Decimal = ZERO
    calculation_date: date | None = None


# ============================================================================
# Calculation results
# ============================================================================


@dataclass(frozen=True)
class IncomeTaxResult:
    """PAYE before and after reliefs."""

    gross_tax: Decimal
    personal_relief: Decimal
    insurance_relief: Decimal
    net_tax: Decimal


@dataclass(frozen=True)
class SocialSecurityResult:
    """NSSF contribution split by tier."""

    tier_one: Decimal
    tier_two: Decimal
    employee_total: Decimal
    employer_total: Decimal

    @classmethod
    def zero(cls) -> SocialSecurityResult:
        return cls(tier_one=ZERO, tier_two=ZERO, employee_total=ZERO, employer_total=ZERO)


@dataclass(frozen=True)
class HousingLevyResult:
    """Housing levy for both sides of the payslip."""

    employee: Decimal
    employer: Decimal
    total: Decimal


@dataclass(frozen=True)
class DeductionsBreakdown:
    """Amounts withheld from the employee's gross salary."""

    shif: Decimal
    nssf: Decimal
    housing_levy: Decimal
    paye: Decimal
    total_deductions: Decimal


@dataclass(frozen=True)
class ReliefsBreakdown:
    """Reliefs applied against gross PAYE."""

    personal_relief: Decimal
    insurance_relief: Decimal
    total_reliefs: Decimal


@dataclass(frozen=True)
class EmployerContributions:
    """Employer-side statutory contributions (not withheld from pay)."""

    nssf: Decimal
    housing_levy: Decimal

    @property
    def total(self) -> Decimal:
        return self.nssf + self.housing_levy


@dataclass(frozen=True)
class PayrollResult:
    """Full monthly payroll breakdown for one gross salary."""

    gross_salary: Decimal
    taxable_income: Decimal
    gross_paye: Decimal
    deductions: DeductionsBreakdown
    reliefs: ReliefsBreakdown
    net_salary: Decimal
    employer_contributions: EmployerContributions
    calculation_date: date
    inputs_fingerprint: str

    @property
    def total_cost_to_employer(self) -> Decimal:
        return self.gross_salary + self.employer_contributions.total
