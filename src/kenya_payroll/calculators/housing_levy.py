"""Affordable Housing Levy."""

from __future__ import annotations

from decimal import Decimal

from kenya_payroll.calculators.money import ZERO, Amount, round_to_cents, to_decimal
from kenya_payroll.calculators.types import HousingLevyResult
from kenya_payroll.rates import HOUSING_LEVY_CONFIG, HousingLevyConfig


def _levy(gross_salary: Amount, rate: Decimal) -> Decimal:
    gross = to_decimal(gross_salary)
    if gross <= 0:
        return ZERO
    return round_to_cents(gross * rate)


def compute_housing_levy(
    gross_salary: Amount,
    config: HousingLevyConfig = HOUSING_LEVY_CONFIG,
) -> Decimal:
    """Employee housing levy, withheld from pay."""
    return _levy(gross_salary, config.employee_rate)


def compute_employer_housing_levy(
    gross_salary: Amount,
    config: HousingLevyConfig = HOUSING_LEVY_CONFIG,
) -> Decimal:
    """Employer's matching housing levy."""
    return _levy(gross_salary, config.employer_rate)


def compute_total_housing_levy(
    gross_salary: Amount,
    config: HousingLevyConfig = HOUSING_LEVY_CONFIG,
) -> HousingLevyResult:
    employee = compute_housing_levy(gross_salary, config)
    employer = compute_employer_housing_levy(gross_salary, config)
    return HousingLevyResult(employee=employee, employer=employer, total=employee + employer)
