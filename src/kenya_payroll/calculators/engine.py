"""Payroll calculation engine - main orchestrator."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from functools import lru_cache
from typing import Any

from kenya_payroll.calculators.housing_levy import (
    compute_employer_housing_levy,
    compute_housing_levy,
)
from kenya_payroll.calculators.money import (
    ZERO,
    Amount,
    as_date,
    non_negative,
    round_to_cents,
    to_decimal,
)
from kenya_payroll.calculators.nssf import compute_social_security
from kenya_payroll.calculators.paye import compute_income_tax
from kenya_payroll.calculators.shif import compute_health_contribution
from kenya_payroll.calculators.types import (
    DeductionsBreakdown,
    EmployerContributions,
    PayrollInput,
    PayrollResult,
    ReliefsBreakdown,
)
from kenya_payroll.config import Settings, get_settings
from kenya_payroll.rates import (
    DEFAULT_RATE_TABLES,
    RateTableError,
    RateTables,
    validate_rate_tables,
)
from kenya_payroll.schemas import PayrollRequest, PayrollResponse

logger = logging.getLogger(__name__)


class PayrollEngine:
    """Main payroll calculation engine.

    Calculation pipeline (stable order, single pass):
    1) Guard: non-positive gross short-circuits to an all-zero result
    2) Statutory deductions on gross: SHIF, NSSF (employee), housing levy
    3) Cap voluntary pension and mortgage interest deductions
    4) Taxable income = gross less everything from 2) and 3)
    5) PAYE on taxable income; SHIF also qualifies for insurance relief
    6) Net = gross less statutory deductions and net PAYE
    7) Employer NSSF and housing levy (liability only)

    Pension and mortgage amounts only reduce taxable income. They are not
    withheld from net salary, the employee remits them separately.
    """

    def __init__(
        self,
        rates: RateTables = DEFAULT_RATE_TABLES,
        settings: Settings | None = None,
    ):
        self.rates = rates
        self.settings = settings if settings is not None else get_settings()

        if self.settings.validate_rates:
            try:
                validate_rate_tables(rates)
            except RateTableError:
                logger.exception("Rejected rate tables at engine start-up")
                raise

    def calculate(self, payroll_input: PayrollInput) -> PayrollResult:
        """Calculate the full payroll breakdown for one gross salary."""
        gross = to_decimal(payroll_input.gross_salary)
        calculation_date = as_date(
            payroll_input.calculation_date or self.settings.default_calculation_date()
        )
        fingerprint = self._compute_inputs_fingerprint(payroll_input, calculation_date)

        # 1) Guard
        if gross <= 0:
            logger.debug("Gross salary %s is not positive; returning zero result", gross)
            return self._build_empty_result(gross, calculation_date, fingerprint)

        rates = self.rates

        # 2) Statutory deductions, all on gross
        shif = compute_health_contribution(gross, rates.shif)
        nssf = compute_social_security(gross, calculation_date, rates.nssf_history)
        housing_levy = compute_housing_levy(gross, rates.housing_levy)

        # 3) Voluntary deductions are capped, not rejected
        capped_pension = min(
            non_negative(to_decimal(payroll_input.pension_contribution)),
            rates.reliefs.max_pension_deduction,
        )
        capped_mortgage = min(
            non_negative(to_decimal(payroll_input.mortgage_interest)),
            rates.reliefs.max_mortgage_interest,
        )

        # 4) Taxable income
        deductible = shif + nssf.employee_total + housing_levy + capped_pension + capped_mortgage
        taxable_income = non_negative(gross - deductible)

        # 5) PAYE with reliefs
        paye = compute_income_tax(
            taxable_income,
            insurance_premium=payroll_input.insurance_premium,
            other_contribution=shif,
            bands=rates.paye_bands,
            reliefs=rates.reliefs,
        )

        # 6) Net salary
        total_deductions = shif + nssf.employee_total + housing_levy + paye.net_tax
        net_salary = gross - total_deductions

        # 7) Employer side
        employer = EmployerContributions(
            nssf=nssf.employer_total,
            housing_levy=compute_employer_housing_levy(gross, rates.housing_levy),
        )

        logger.debug(
            "Calculated payroll gross=%s taxable=%s paye=%s net=%s date=%s",
            gross,
            taxable_income,
            paye.net_tax,
            net_salary,
            calculation_date,
        )

        return PayrollResult(
            gross_salary=round_to_cents(gross),
            taxable_income=round_to_cents(taxable_income),
            gross_paye=paye.gross_tax,
            deductions=DeductionsBreakdown(
                shif=shif,
                nssf=nssf.employee_total,
                housing_levy=housing_levy,
                paye=paye.net_tax,
                total_deductions=round_to_cents(total_deductions),
            ),
            reliefs=ReliefsBreakdown(
                personal_relief=paye.personal_relief,
                insurance_relief=paye.insurance_relief,
                total_reliefs=round_to_cents(paye.personal_relief + paye.insurance_relief),
            ),
            net_salary=round_to_cents(net_salary),
            employer_contributions=employer,
            calculation_date=calculation_date,
            inputs_fingerprint=fingerprint,
        )

    def net_salary(
        self,
        gross_salary: Amount,
        calculation_date: date | datetime | None = None,
    ) -> Decimal:
        """Net salary for a gross salary with no voluntary deductions."""
        payroll_input = PayrollInput(
            gross_salary=to_decimal(gross_salary),
            calculation_date=calculation_date,
        )
        return self.calculate(payroll_input).net_salary

    def calculate_mapping(self, data: Mapping[str, Any]) -> PayrollResponse:
        """Validate a plain mapping, calculate, and return a serialisable response.

        Raises:
            pydantic.ValidationError: If the mapping is not a valid request
        """
        request = PayrollRequest.model_validate(data)
        result = self.calculate(request.to_input())
        return PayrollResponse.model_validate(result)

    def _build_empty_result(
        self,
        gross: Decimal,
        calculation_date: date,
        fingerprint: str,
    ) -> PayrollResult:
        """Build the all-zero result for a non-positive gross salary."""
        return PayrollResult(
            gross_salary=round_to_cents(gross),
            taxable_income=ZERO,
            gross_paye=ZERO,
            deductions=DeductionsBreakdown(
                shif=ZERO,
                nssf=ZERO,
                housing_levy=ZERO,
                paye=ZERO,
                total_deductions=ZERO,
            ),
            reliefs=ReliefsBreakdown(
                personal_relief=ZERO,
                insurance_relief=ZERO,
                total_reliefs=ZERO,
            ),
            net_salary=ZERO,
            employer_contributions=EmployerContributions(nssf=ZERO, housing_levy=ZERO),
            calculation_date=calculation_date,
            inputs_fingerprint=fingerprint,
        )

    def _compute_inputs_fingerprint(
        self,
        payroll_input: PayrollInput,
        calculation_date: date,
    ) -> str:
        """Compute a deterministic fingerprint of the inputs and engine version."""
        data = {
            "gross_salary": str(round_to_cents(to_decimal(payroll_input.gross_salary))),
            "pension_contribution": str(
                round_to_cents(to_decimal(payroll_input.pension_contribution))
            ),
            "insurance_premium": str(round_to_cents(to_decimal(payroll_input.insurance_premium))),
            "mortgage_interest": str(round_to_cents(to_decimal(payroll_input.mortgage_interest))),
            "calculation_date": calculation_date.isoformat(),
            "engine_version": self.settings.engine_version,
        }
        json_str = json.dumps(data, sort_keys=True)
        return hashlib.sha256(json_str.encode()).hexdigest()[:32]


@lru_cache(maxsize=1)
def get_default_engine() -> PayrollEngine:
    """Get cached engine bound to the default rate tables."""
    return PayrollEngine()


def compute_payroll(payroll_input: PayrollInput) -> PayrollResult:
    """Calculate payroll against the default rate tables."""
    return get_default_engine().calculate(payroll_input)


def get_net_salary(
    gross_salary: Amount,
    calculation_date: date | datetime | None = None,
) -> Decimal:
    """Quick calculation: net salary from gross."""
    return get_default_engine().net_salary(gross_salary, calculation_date)
