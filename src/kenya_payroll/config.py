"""Configuration management for kenya_payroll."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_ENGINE_VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    """Library settings loaded from environment."""

    engine_version: str
    validate_rates: bool
    as_of_date: date | None  # None = use today's date

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        as_of = os.getenv("KENYA_PAYROLL_AS_OF_DATE", "").strip()

        return cls(
            engine_version=os.getenv("KENYA_PAYROLL_ENGINE_VERSION", DEFAULT_ENGINE_VERSION),
            validate_rates=os.getenv("KENYA_PAYROLL_VALIDATE_RATES", "true").lower() == "true",
            as_of_date=date.fromisoformat(as_of) if as_of else None,
        )

    def default_calculation_date(self) -> date:
        """Date used when a calculation does not name one."""
        return self.as_of_date if self.as_of_date is not None else date.today()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
