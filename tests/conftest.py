"""Pytest fixtures for kenya_payroll tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from kenya_payroll.calculators.engine import PayrollEngine
from kenya_payroll.config import Settings
from kenya_payroll.rates import TaxBand, TierLimits


@pytest.fixture
def settings() -> Settings:
    """Settings with validation on and no pinned as-of date."""
    return Settings(engine_version="test", validate_rates=True, as_of_date=None)


@pytest.fixture
def engine(settings: Settings) -> PayrollEngine:
    """Engine bound to the default rate tables."""
    return PayrollEngine(settings=settings)


@pytest.fixture
def simple_bands() -> tuple[TaxBand, ...]:
    """Three-band schedule with round numbers."""
    return (
        TaxBand(Decimal("0"), Decimal("10000"), Decimal("0.10")),
        TaxBand(Decimal("10000"), Decimal("40000"), Decimal("0.20")),
        TaxBand(Decimal("40000"), None, Decimal("0.30")),
    )


@pytest.fixture
def tier_history() -> tuple[TierLimits, ...]:
    """Three NSSF schedules, one per year."""
    return (
        TierLimits(Decimal("6000"), Decimal("18000"), Decimal("0.06"), date(2023, 2, 1)),
        TierLimits(Decimal("7000"), Decimal("36000"), Decimal("0.06"), date(2024, 2, 1)),
        TierLimits(Decimal("8000"), Decimal("72000"), Decimal("0.06"), date(2025, 2, 1)),
    )
