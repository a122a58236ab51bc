"""Mini README: Runtime configuration for the expense manager.

Structure:
    * ExpenseManagerSettings - Pydantic settings read from the environment.
    * get_settings - cached accessor shared by the CLI and the web service.

Usage:
    Variables use the ``EXPENSE_MANAGER_`` prefix, for example
    ``EXPENSE_MANAGER_CALENDAR_TIMEZONE=Europe/Berlin``. The calendar timezone
    pins the single time reference used to turn timestamps into calendar days.
"""

from __future__ import annotations

from datetime import timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, validator
from pydantic_settings import BaseSettings


def resolve_time_reference(name: str) -> tzinfo:
    """Map a timezone name onto a tzinfo, keeping UTC free of tz database lookups."""

    if name.strip().upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as error:
        raise ValueError(f"Unknown timezone: {name}") from error


class ExpenseManagerSettings(BaseSettings):
    """Runtime configuration for the expense manager service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    calendar_timezone: str = Field(
        "UTC",
        description="Timezone in which timestamps are reduced to calendar days.",
    )
    currency_symbol: str = Field("$", description="Prefix used when displaying amounts.")
    seed_demo_expenses: bool = Field(
        False,
        description="Populate a fresh session with a handful of demo expenses.",
    )

    class Config:
        env_prefix = "EXPENSE_MANAGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("calendar_timezone")
    def _check_timezone(cls, value: str) -> str:
        """Reject timezone names the tz database does not know."""

        resolve_time_reference(value)
        return value

    @property
    def time_reference(self) -> tzinfo:
        return resolve_time_reference(self.calendar_timezone)


@lru_cache()
def get_settings() -> ExpenseManagerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseManagerSettings()
