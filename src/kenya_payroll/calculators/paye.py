"""PAYE (Pay As You Earn) income tax with personal and insurance relief."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from kenya_payroll.calculators.money import (
    ZERO,
    Amount,
    non_negative,
    round_to_cents,
    to_decimal,
)
from kenya_payroll.calculators.types import IncomeTaxResult
from kenya_payroll.rates import PAYE_TAX_BANDS, RELIEF_LIMITS, ReliefLimits, TaxBand


def compute_progressive_tax(
    taxable_amount: Amount,
    bands: Sequence[TaxBand] = PAYE_TAX_BANDS,
) -> Decimal:
    """Calculate tax using progressive bands.

    Bands are swept in the order given; each taxes the part of the remaining
    amount that fits its width. Only the final total is rounded.
    """
    amount = to_decimal(taxable_amount)
    if amount <= 0:
        return ZERO

    total_tax = ZERO
    remaining = amount

    for band in bands:
        if remaining <= 0:
            break

        width = band.width
        taxable_in_band = remaining if width is None else min(remaining, width)
        total_tax += taxable_in_band * band.rate
        remaining -= taxable_in_band

    return round_to_cents(total_tax)


def compute_personal_relief(
    gross_tax: Amount,
    reliefs: ReliefLimits = RELIEF_LIMITS,
) -> Decimal:
    """Personal relief, capped at the gross tax so it never makes tax negative."""
    return round_to_cents(min(reliefs.personal_relief, non_negative(to_decimal(gross_tax))))


def compute_insurance_relief(
    insurance_premium: Amount | None = None,
    other_contribution: Amount | None = None,
    reliefs: ReliefLimits = RELIEF_LIMITS,
) -> Decimal:
    """Insurance relief on qualifying premiums.

    Args:
        insurance_premium: Monthly life/health insurance premium
        other_contribution: Any other relief-qualifying premium; the payroll
            engine passes the SHIF contribution here
        reliefs: Relief rate and cap

    Returns:
        15% of the combined premiums, capped at the monthly maximum
    """
    premiums = non_negative(to_decimal(insurance_premium)) + non_negative(
        to_decimal(other_contribution)
    )
    relief = premiums * reliefs.insurance_relief_rate
    return round_to_cents(min(relief, reliefs.max_insurance_relief))


def compute_income_tax(
    taxable_income: Amount,
    insurance_premium: Amount | None = None,
    other_contribution: Amount | None = None,
    bands: Sequence[TaxBand] = PAYE_TAX_BANDS,
    reliefs: ReliefLimits = RELIEF_LIMITS,
) -> IncomeTaxResult:
    """Calculate PAYE with all reliefs applied.

    Net PAYE cannot be negative: reliefs exceeding the gross tax are lost.
    """
    gross_tax = compute_progressive_tax(taxable_income, bands)
    personal_relief = compute_personal_relief(gross_tax, reliefs)
    insurance_relief = compute_insurance_relief(insurance_premium, other_contribution, reliefs)

    net_tax = non_negative(gross_tax - personal_relief - insurance_relief)

    return IncomeTaxResult(
        gross_tax=gross_tax,
        personal_relief=personal_relief,
        insurance_relief=insurance_relief,
        net_tax=round_to_cents(net_tax),
    )
