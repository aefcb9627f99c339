"""
Engine defaults and window helpers.

All look-back periods are encapsulated in :class:`ProgressConfig` so that
nothing is hard-coded in the computations and tests can inject their own
values.
"""

from __future__ import annotations

import datetime

from pydantic import BaseModel, Field

from app.core.exceptions import InvalidArgumentError


class ProgressConfig(BaseModel):
    """Default look-back windows (days) and limits for progress analytics."""

    progression_days: int = Field(90, ge=1, description="Strength / metcon progression window")
    frequency_days: int = Field(30, ge=1, description="Workout frequency window")
    volume_days: int = Field(30, ge=1, description="Volume series window")
    frequency_chart_days: int = Field(90, ge=1, description="Frequency chart window")
    dashboard_days: int = Field(30, ge=1, description="Window for dashboard streak and weekly average")
    achievement_days: int = Field(30, ge=1, description="How recent a PR must be to count as an achievement")
    achievement_limit: int = Field(5, ge=1)
    volume_trend_days: int = Field(90, ge=1, description="Volume trends window")


# Singleton default config
DEFAULT_CONFIG = ProgressConfig()


def require_positive(parameter: str, value: int) -> int:
    """Return *value* unchanged, or raise if it is below 1."""
    if value < 1:
        raise InvalidArgumentError(parameter, f"must be a positive integer, got {value}")
    return value


def window(as_of: datetime.date, period_days: int) -> tuple[datetime.date, datetime.date]:
    """Inclusive ``[as_of - period_days, as_of]`` window."""
    require_positive("period_days", period_days)
    return as_of - datetime.timedelta(days=period_days), as_of


def in_window(date: datetime.date, bounds: tuple[datetime.date, datetime.date]) -> bool:
    start, end = bounds
    return start <= date <= end
