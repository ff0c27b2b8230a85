"""Decimal helpers shared by the calculators.

Rounding:
- KES to 2 decimals at the boundary of every public operation
- Internal compute at full Decimal precision
- ROUND_HALF_UP, i.e. halves round away from zero
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Amount = Union[Decimal, int, float, str]

ZERO = Decimal("0")
OUTPUT_PRECISION = Decimal("0.01")


def to_decimal(value: Amount | None) -> Decimal:
    """Coerce a caller-supplied amount to Decimal (None counts as zero)."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their shortest repr, e.g. 0.1 -> 0.1
    return Decimal(str(value))


def round_to_cents(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places (cents)."""
    return amount.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def non_negative(amount: Decimal) -> Decimal:
    return amount if amount > 0 else ZERO


def as_date(value: date | datetime) -> date:
    """Drop the time component; datetimes do not compare with dates."""
    if isinstance(value, datetime):
        return value.date()
    return value
