"""SHIF (Social Health Insurance Fund) contributions."""

from __future__ import annotations

from decimal import Decimal

from kenya_payroll.calculators.money import ZERO, Amount, round_to_cents, to_decimal
from kenya_payroll.rates import SHIF_CONFIG, SHIF_LATE_PENALTY_RATE, ShifConfig


def compute_health_contribution(
    gross_salary: Amount,
    config: ShifConfig = SHIF_CONFIG,
) -> Decimal:
    """2.75% of gross salary, never below the monthly minimum."""
    gross = to_decimal(gross_salary)
    if gross <= 0:
        return ZERO

    contribution = max(gross * config.rate, config.minimum_contribution)
    return round_to_cents(contribution)


def compute_health_penalty(
    unpaid_amount: Amount,
    rate: Decimal = SHIF_LATE_PENALTY_RATE,
) -> Decimal:
    """Late-payment penalty on an unpaid SHIF contribution."""
    unpaid = to_decimal(unpaid_amount)
    if unpaid <= 0:
        return ZERO
    return round_to_cents(unpaid * rate)
