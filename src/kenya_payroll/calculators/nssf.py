"""NSSF (National Social Security Fund) two-tier contributions.

Limits are selected by effective date:
1. The latest record whose effective_from is on or before the date wins
2. A date before every record falls back to the earliest record
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal

from kenya_payroll.calculators.money import (
    Amount,
    as_date,
    non_negative,
    round_to_cents,
    to_decimal,
)
from kenya_payroll.calculators.types import SocialSecurityResult
from kenya_payroll.rates import NSSF_LIMITS_HISTORY, TierLimits

logger = logging.getLogger(__name__)


class TierLimitsNotFoundError(Exception):
    """Raised when no NSSF limits are configured at all."""

    def __init__(self, on_date: date):
        self.on_date = on_date
        super().__init__(f"No NSSF tier limits configured for {on_date}")


def select_tier_limits(
    history: Sequence[TierLimits],
    on_date: date | datetime,
) -> TierLimits:
    """Get the NSSF limits applicable on a date.

    Args:
        history: Limits in chronological order of effective_from
        on_date: The calculation date

    Returns:
        The applicable limits record

    Raises:
        TierLimitsNotFoundError: If the history is empty
    """
    on_date = as_date(on_date)
    if not history:
        raise TierLimitsNotFoundError(on_date)

    for limits in reversed(history):
        if on_date >= limits.effective_from:
            return limits

    logger.warning(
        "Calculation date %s precedes all NSSF limits; using limits effective %s",
        on_date,
        history[0].effective_from,
    )
    return history[0]


def compute_social_security(
    pensionable_earnings: Amount,
    calculation_date: date | datetime | None = None,
    history: Sequence[TierLimits] = NSSF_LIMITS_HISTORY,
) -> SocialSecurityResult:
    """Calculate NSSF contributions for a month's pensionable earnings.

    Tier I covers earnings up to the Lower Earnings Limit; Tier II covers
    earnings between the Lower and Upper Earnings Limits. The employer
    matches the employee contribution.
    """
    earnings = to_decimal(pensionable_earnings)
    if earnings <= 0:
        return SocialSecurityResult.zero()

    limits = select_tier_limits(history, calculation_date or date.today())
    lel = limits.lower_earnings_limit
    uel = limits.upper_earnings_limit

    tier_one = min(earnings, lel) * limits.rate
    tier_two = min(non_negative(earnings - lel), uel - lel) * limits.rate
    employee_total = tier_one + tier_two

    return SocialSecurityResult(
        tier_one=round_to_cents(tier_one),
        tier_two=round_to_cents(tier_two),
        employee_total=round_to_cents(employee_total),
        employer_total=round_to_cents(employee_total),
    )


def get_max_social_security_contribution(
    calculation_date: date | datetime | None = None,
    history: Sequence[TierLimits] = NSSF_LIMITS_HISTORY,
) -> Decimal:
    """Maximum monthly employee contribution under the applicable limits."""
    limits = select_tier_limits(history, calculation_date or date.today())
    return round_to_cents(limits.upper_earnings_limit * limits.rate)
