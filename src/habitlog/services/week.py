"""Rolling seven-day window shown in the habit table."""

from __future__ import annotations

from datetime import date, timedelta

DAYS_BEFORE_END = 5
DAYS_AFTER_END = 1
WEEK_STEP = 7


def displayed_days(period_end: date) -> list[date]:
    """Return the five days before ``period_end``, the day itself and the next day."""

    start = period_end - timedelta(days=DAYS_BEFORE_END)
    span = DAYS_BEFORE_END + DAYS_AFTER_END + 1
    return [start + timedelta(days=offset) for offset in range(span)]


def previous_period(period_end: date) -> date:
    return period_end - timedelta(days=WEEK_STEP)


def next_period(period_end: date, today: date) -> date:
    """Move one week forward without passing ``today``."""

    candidate = period_end + timedelta(days=WEEK_STEP)
    if today < candidate:
        return today
    return candidate


def can_go_forward(period_end: date, today: date) -> bool:
    return period_end < today


__all__ = ["can_go_forward", "displayed_days", "next_period", "previous_period"]
