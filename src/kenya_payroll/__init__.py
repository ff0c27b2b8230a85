"""Kenyan monthly payroll: PAYE, SHIF, NSSF and the Affordable Housing Levy."""

from kenya_payroll.calculators import (
    DeductionsBreakdown,
    EmployerContributions,
    HousingLevyResult,
    IncomeTaxResult,
    PayrollEngine,
    PayrollInput,
    PayrollResult,
    ReliefsBreakdown,
    SocialSecurityResult,
    TierLimitsNotFoundError,
    compute_employer_housing_levy,
    compute_health_contribution,
    compute_health_penalty,
    compute_housing_levy,
    compute_income_tax,
    compute_insurance_relief,
    compute_payroll,
    compute_personal_relief,
    compute_progressive_tax,
    compute_social_security,
    compute_total_housing_levy,
    get_max_social_security_contribution,
    get_net_salary,
    select_tier_limits,
)
from kenya_payroll.rates import DEFAULT_RATE_TABLES, RateTableError, validate_rate_tables

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_RATE_TABLES",
    "DeductionsBreakdown",
    "EmployerContributions",
    "HousingLevyResult",
    "IncomeTaxResult",
    "PayrollEngine",
    "PayrollInput",
    "PayrollResult",
    "RateTableError",
    "ReliefsBreakdown",
    "SocialSecurityResult",
    "TierLimitsNotFoundError",
    "compute_employer_housing_levy",
    "compute_health_contribution",
    "compute_health_penalty",
    "compute_housing_levy",
    "compute_income_tax",
    "compute_insurance_relief",
    "compute_payroll",
    "compute_personal_relief",
    "compute_progressive_tax",
    "compute_social_security",
    "compute_total_housing_levy",
    "get_max_social_security_contribution",
    "get_net_salary",
    "select_tier_limits",
    "validate_rate_tables",
]
