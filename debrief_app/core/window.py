"""Lookback window selection (pure functions)."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytz

from .config import DEFAULT_TIMEZONE

MONDAY = 0
WEEKDAY_LOOKBACK_DAYS = 1
# Monday also covers Saturday and Sunday, which had no report
MONDAY_LOOKBACK_DAYS = 3


def current_date(tz_name: str = DEFAULT_TIMEZONE) -> date:
    """Today's date in ``tz_name``."""
    return datetime.now(tz=pytz.timezone(tz_name)).date()


def lookback_days(today: date) -> int:
    if today.weekday() == MONDAY:
        return MONDAY_LOOKBACK_DAYS
    return WEEKDAY_LOOKBACK_DAYS


def since_date(today: date, days: int) -> str:
    """Lower bound of the window as ``YYYY-MM-DD``."""
    return (today - timedelta(days=days)).strftime("%Y-%m-%d")
