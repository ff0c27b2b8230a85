"""Property-based tests for payroll invariants.

These tests use hypothesis to generate salaries, voluntary deductions and
calculation dates, and verify that the invariants hold for all of them.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from hypothesis import given, settings, strategies as st

from kenya_payroll.calculators.engine import PayrollEngine
from kenya_payroll.calculators.nssf import compute_social_security
from kenya_payroll.calculators.paye import compute_income_tax, compute_progressive_tax
from kenya_payroll.calculators.types import PayrollInput
from kenya_payroll.config import Settings
from kenya_payroll.rates import PAYE_TAX_BANDS, TierLimits

ENGINE = PayrollEngine(
    settings=Settings(engine_version="test", validate_rates=True, as_of_date=date(2025, 3, 15))
)

money = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("2000000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
voluntary = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("100000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
non_positive = st.decimals(
    min_value=Decimal("-1000000"),
    max_value=Decimal("0"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
calculation_dates = st.dates(min_value=date(2020, 1, 1), max_value=date(2030, 12, 31))


@st.composite
def payroll_inputs(draw) -> PayrollInput:
    return PayrollInput(
        gross_salary=draw(money),
        pension_contribution=draw(voluntary),
        insurance_premium=draw(voluntary),
        mortgage_interest=draw(voluntary),
        calculation_date=draw(calculation_dates),
    )


class TestPayrollInvariants:
    """Invariants of the full payroll calculation."""

    @given(gross=non_positive, pension=voluntary, premium=voluntary)
    def test_non_positive_gross_is_all_zero(self, gross, pension, premium):
        result = ENGINE.calculate(
            PayrollInput(
                gross_salary=gross,
                pension_contribution=pension,
                insurance_premium=premium,
            )
        )

        assert result.net_salary == 0
        assert result.deductions.total_deductions == 0
        assert result.reliefs.total_reliefs == 0
        assert result.employer_contributions.total == 0

    @given(payroll_inputs())
    def test_net_never_exceeds_gross(self, payroll_input):
        result = ENGINE.calculate(payroll_input)
        assert result.net_salary <= result.gross_salary

    @given(payroll_inputs())
    def test_net_is_gross_less_withheld_amounts(self, payroll_input):
        """Voluntary pension and mortgage are never withheld."""
        result = ENGINE.calculate(payroll_input)
        if result.gross_salary <= 0:
            return

        d = result.deductions
        withheld = d.shif + d.nssf + d.housing_levy + d.paye
        assert result.net_salary == result.gross_salary - withheld

    @given(payroll_inputs())
    def test_deductions_never_negative(self, payroll_input):
        result = ENGINE.calculate(payroll_input)
        d = result.deductions

        for amount in (d.shif, d.nssf, d.housing_levy, d.paye, result.taxable_income):
            assert amount >= 0

    @given(payroll_inputs())
    @settings(max_examples=50)
    def test_idempotent(self, payroll_input):
        assert ENGINE.calculate(payroll_input) == ENGINE.calculate(payroll_input)

    @given(gross=money, date_=calculation_dates)
    def test_employer_nssf_matches_employee(self, gross, date_):
        result = ENGINE.calculate(PayrollInput(gross_salary=gross, calculation_date=date_))
        assert result.employer_contributions.nssf == result.deductions.nssf


class TestTaxInvariants:
    """Invariants of PAYE."""

    @given(taxable=money, premium=voluntary, other=voluntary)
    def test_net_tax_never_negative(self, taxable, premium, other):
        assert compute_income_tax(taxable, premium, other).net_tax >= 0

    @given(taxable=money)
    def test_monotonic(self, taxable):
        assert compute_progressive_tax(taxable + 1) >= compute_progressive_tax(taxable)

    @given(st.sampled_from([band.upper_bound for band in PAYE_TAX_BANDS if band.upper_bound]))
    def test_continuous_at_boundaries(self, boundary):
        below = compute_progressive_tax(boundary - Decimal("0.01"))
        at = compute_progressive_tax(boundary)
        assert Decimal("0") <= at - below <= Decimal("0.01")


class TestSocialSecurityInvariants:
    """Invariants of NSSF."""

    @given(
        earnings=money,
        lel=st.integers(min_value=1, max_value=50000),
        span=st.integers(min_value=1, max_value=100000),
        rate=st.sampled_from([Decimal("0.05"), Decimal("0.06"), Decimal("0.10")]),
    )
    def test_tiers_sum_to_total(self, earnings, lel, span, rate):
        history = (TierLimits(Decimal(lel), Decimal(lel + span), rate, date(2024, 2, 1)),)

        result = compute_social_security(earnings, date(2024, 6, 15), history)

        assert result.tier_one + result.tier_two == result.employee_total
        assert result.employer_total == result.employee_total
        assert result.employee_total <= Decimal(lel + span) * rate
