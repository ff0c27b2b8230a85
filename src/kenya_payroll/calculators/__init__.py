"""Payroll calculation engine."""

from kenya_payroll.calculators.engine import (
    PayrollEngine,
    compute_payroll,
    get_default_engine,
    get_net_salary,
)
from kenya_payroll.calculators.housing_levy import (
    compute_employer_housing_levy,
    compute_housing_levy,
    compute_total_housing_levy,
)
from kenya_payroll.calculators.nssf import (
    TierLimitsNotFoundError,
    compute_social_security,
    get_max_social_security_contribution,
    select_tier_limits,
)
from kenya_payroll.calculators.paye import (
    compute_income_tax,
    compute_insurance_relief,
    compute_personal_relief,
    compute_progressive_tax,
)
from kenya_payroll.calculators.shif import compute_health_contribution, compute_health_penalty
from kenya_payroll.calculators.types import (
    DeductionsBreakdown,
    EmployerContributions,
    HousingLevyResult,
    IncomeTaxResult,
    PayrollInput,
    PayrollResult,
    ReliefsBreakdown,
    SocialSecurityResult,
)

__all__ = [
    "DeductionsBreakdown",
    "EmployerContributions",
    "HousingLevyResult",
    "IncomeTaxResult",
    "PayrollEngine",
    "PayrollInput",
    "PayrollResult",
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
    "get_default_engine",
    "get_max_social_security_contribution",
    "get_net_salary",
    "select_tier_limits",
]
