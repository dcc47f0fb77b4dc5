"""Runtime settings.

Read from LEDGERLENS_* environment variables when the app is created.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Mapping

DEFAULT_MONTH_RANGE = 6
DEFAULT_AS_OF_DATE = date(2025, 10, 14)
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",  # Vite dev server
    "http://127.0.0.1:5173",
)
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    default_month_range: int = DEFAULT_MONTH_RANGE
    as_of_date: date = DEFAULT_AS_OF_DATE
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Load settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Settings with defaults for unset variables.

        Raises:
            ValueError: If a variable is set to an invalid value.
        """
        if environ is None:
            environ = os.environ

        month_range_raw = environ.get("LEDGERLENS_DEFAULT_MONTH_RANGE")
        month_range = DEFAULT_MONTH_RANGE
        if month_range_raw:
            try:
                month_range = int(month_range_raw)
            except ValueError as e:
                raise ValueError(
                    f"LEDGERLENS_DEFAULT_MONTH_RANGE must be an integer, got {month_range_raw!r}"
                ) from e

        as_of_raw = environ.get("LEDGERLENS_AS_OF_DATE")
        as_of_date = DEFAULT_AS_OF_DATE
        if as_of_raw:
            try:
                as_of_date = date.fromisoformat(as_of_raw)
            except ValueError as e:
                raise ValueError(
                    f"LEDGERLENS_AS_OF_DATE must be an ISO date (YYYY-MM-DD), got {as_of_raw!r}"
                ) from e

        origins_raw = environ.get("LEDGERLENS_CORS_ORIGINS")
        cors_origins = DEFAULT_CORS_ORIGINS
        if origins_raw:
            cors_origins = tuple(o.strip() for o in origins_raw.split(",") if o.strip())

        log_level = environ.get("LEDGERLENS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LEDGERLENS_LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            default_month_range=month_range,
            as_of_date=as_of_date,
            cors_origins=cors_origins,
            log_level=log_level,
        )
