"""Statutory rate tables for Kenyan payroll.

Sources:
    PAYE bands: Kenya Revenue Authority, effective 1 July 2023
    SHIF: Social Health Authority, replaced NHIF effective 1 October 2024
    NSSF: NSSF Act 2013 phased limits (Year 2 from February 2024,
        Year 3 from February 2025)
    Housing Levy: Affordable Housing Act, 2024

All tables are immutable and loaded once at import time. A new NSSF
schedule is added by appending a TierLimits record to NSSF_LIMITS_HISTORY;
records must stay in chronological order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


class RateTableError(Exception):
    """Raised when a rate table is malformed."""

    def __init__(self, table: str, reason: str):
        self.table = table
        self.reason = reason
        super().__init__(f"Invalid rate table '{table}': {reason}")


# ============================================================================
# Table types
# ============================================================================


@dataclass(frozen=True)
class TaxBand:
    """PAYE band covering the half-open interval [lower_bound, upper_bound)."""

    lower_bound: Decimal
    upper_bound: Decimal | None  # None = no upper limit
    rate: Decimal  # As decimal, e.g., 0.25 for 25%

    @property
    def width(self) -> Decimal | None:
        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound


@dataclass(frozen=True)
class TierLimits:
    """NSSF earnings limits effective from a given date."""

    lower_earnings_limit: Decimal
    upper_earnings_limit: Decimal
    rate: Decimal
    effective_from: date


@dataclass(frozen=True)
class ReliefLimits:
    """Monthly tax relief amounts and deduction caps."""

    personal_relief: Decimal
    insurance_relief_rate: Decimal
    max_insurance_relief: Decimal
    max_pension_deduction: Decimal
    max_mortgage_interest: Decimal


@dataclass(frozen=True)
class ShifConfig:
    """SHIF contribution rate and monthly floor."""

    rate: Decimal
    minimum_contribution: Decimal


@dataclass(frozen=True)
class HousingLevyConfig:
    """Affordable Housing Levy rates for each side of the payslip."""

    employee_rate: Decimal
    employer_rate: Decimal


# ============================================================================
# PAYE
# ============================================================================

PAYE_TAX_BANDS: tuple[TaxBand, ...] = (
    TaxBand(Decimal("0"), Decimal("24000"), Decimal("0.10")),
    TaxBand(Decimal("24000"), Decimal("32333"), Decimal("0.25")),
    TaxBand(Decimal("32333"), Decimal("500000"), Decimal("0.30")),
    TaxBand(Decimal("500000"), Decimal("800000"), Decimal("0.325")),
    TaxBand(Decimal("800000"), None, Decimal("0.35")),
)

# Annual equivalents, for reference only
PAYE_TAX_BANDS_ANNUAL: tuple[TaxBand, ...] = (
    TaxBand(Decimal("0"), Decimal("288000"), Decimal("0.10")),
    TaxBand(Decimal("288000"), Decimal("388000"), Decimal("0.25")),
    TaxBand(Decimal("388000"), Decimal("6000000"), Decimal("0.30")),
    TaxBand(Decimal("6000000"), Decimal("9600000"), Decimal("0.325")),
    TaxBand(Decimal("9600000"), None, Decimal("0.35")),
)

# Non-cash benefits below this monthly value are not taxed
NON_CASH_BENEFIT_THRESHOLD = Decimal("5000")

# ============================================================================
# Reliefs
# ============================================================================

RELIEF_LIMITS = ReliefLimits(
    personal_relief=Decimal("2400"),
    insurance_relief_rate=Decimal("0.15"),
    max_insurance_relief=Decimal("5000"),
    max_pension_deduction=Decimal("30000"),
    max_mortgage_interest=Decimal("30000"),
)

ANNUAL_RELIEF_LIMITS: dict[str, Decimal] = {
    "personal_relief": Decimal("28800"),
    "max_insurance_relief": Decimal("60000"),
    "max_pension_deduction": Decimal("360000"),
    "max_mortgage_interest": Decimal("360000"),
}

# ============================================================================
# SHIF
# ============================================================================

SHIF_CONFIG = ShifConfig(rate=Decimal("0.0275"), minimum_contribution=Decimal("300"))
SHIF_EFFECTIVE_DATE = date(2024, 10, 1)
SHIF_PAYMENT_DUE_DAY = 9
SHIF_LATE_PENALTY_RATE = Decimal("0.02")

# ============================================================================
# NSSF
# ============================================================================

NSSF_CONTRIBUTION_RATE = Decimal("0.06")

NSSF_LIMITS_2024 = TierLimits(
    lower_earnings_limit=Decimal("7000"),
    upper_earnings_limit=Decimal("36000"),
    rate=NSSF_CONTRIBUTION_RATE,
    effective_from=date(2024, 2, 1),
)

NSSF_LIMITS_2025 = TierLimits(
    lower_earnings_limit=Decimal("8000"),
    upper_earnings_limit=Decimal("72000"),
    rate=NSSF_CONTRIBUTION_RATE,
    effective_from=date(2025, 2, 1),
)

NSSF_LIMITS_HISTORY: tuple[TierLimits, ...] = (NSSF_LIMITS_2024, NSSF_LIMITS_2025)

NSSF_PAYMENT_DUE_DAY = 9

# ============================================================================
# Housing Levy
# ============================================================================

HOUSING_LEVY_CONFIG = HousingLevyConfig(
    employee_rate=Decimal("0.015"),
    employer_rate=Decimal("0.015"),
)
HOUSING_LEVY_EFFECTIVE_DATE = date(2024, 3, 19)
HOUSING_LEVY_TAX_DEDUCTIBLE_DATE = date(2024, 12, 27)


@dataclass(frozen=True)
class RateTables:
    """Every table a payroll calculation reads, bundled for injection."""

    paye_bands: tuple[TaxBand, ...] = PAYE_TAX_BANDS
    nssf_history: tuple[TierLimits, ...] = NSSF_LIMITS_HISTORY
    shif: ShifConfig = SHIF_CONFIG
    housing_levy: HousingLevyConfig = HOUSING_LEVY_CONFIG
    reliefs: ReliefLimits = RELIEF_LIMITS
    shif_late_penalty_rate: Decimal = SHIF_LATE_PENALTY_RATE


DEFAULT_RATE_TABLES = RateTables()


# ============================================================================
# Validation
# ============================================================================


def _check_rate(table: str, rate: Decimal) -> None:
    if rate < 0 or rate > 1:
        raise RateTableError(table, f"rate {rate} must be between 0 and 1")


def validate_tax_bands(bands: tuple[TaxBand, ...], table: str = "paye_bands") -> None:
    """Check that bands tile [0, infinity) without gaps or overlaps."""
    if not bands:
        raise RateTableError(table, "no bands defined")

    expected_lower = Decimal("0")
    for index, band in enumerate(bands):
        if band.lower_bound != expected_lower:
            raise RateTableError(
                table,
                f"band {index} starts at {band.lower_bound}, expected {expected_lower}",
            )
        _check_rate(table, band.rate)

        is_last = index == len(bands) - 1
        if band.upper_bound is None:
            if not is_last:
                raise RateTableError(table, f"band {index} is unbounded but not last")
            return
        if band.upper_bound <= band.lower_bound:
            raise RateTableError(table, f"band {index} has non-positive width")
        expected_lower = band.upper_bound

    raise RateTableError(table, "last band must be unbounded")


def validate_tier_history(history: tuple[TierLimits, ...], table: str = "nssf_history") -> None:
    """Check that the NSSF history is non-empty and strictly chronological."""
    if not history:
        raise RateTableError(table, "no tier limits defined")

    previous: date | None = None
    for limits in history:
        if previous is not None and limits.effective_from <= previous:
            raise RateTableError(
                table,
                f"effective_from {limits.effective_from} is not after {previous}",
            )
        if limits.lower_earnings_limit < 0:
            raise RateTableError(table, "lower earnings limit cannot be negative")
        if limits.lower_earnings_limit >= limits.upper_earnings_limit:
            raise RateTableError(
                table,
                f"lower earnings limit {limits.lower_earnings_limit} must be below "
                f"upper earnings limit {limits.upper_earnings_limit}",
            )
        _check_rate(table, limits.rate)
        previous = limits.effective_from


def validate_rate_tables(tables: RateTables = DEFAULT_RATE_TABLES) -> None:
    """Validate a rate bundle; intended to run once at start-up.

    Raises:
        RateTableError: On the first malformed table found
    """
    validate_tax_bands(tables.paye_bands)
    validate_tier_history(tables.nssf_history)

    _check_rate("shif", tables.shif.rate)
    if tables.shif.minimum_contribution < 0:
        raise RateTableError("shif", "minimum contribution cannot be negative")
    _check_rate("shif", tables.shif_late_penalty_rate)

    _check_rate("housing_levy", tables.housing_levy.employee_rate)
    _check_rate("housing_levy", tables.housing_levy.employer_rate)

    reliefs = tables.reliefs
    _check_rate("reliefs", reliefs.insurance_relief_rate)
    for name in (
        "personal_relief",
        "max_insurance_relief",
        "max_pension_deduction",
        "max_mortgage_interest",
    ):
        if getattr(reliefs, name) < 0:
            raise RateTableError("reliefs", f"{name} cannot be negative")
