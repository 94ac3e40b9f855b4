"""Habit streak calculation and calendar-day string helpers."""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Iterable

DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def format_day(day: date) -> str:
    """Return ``day`` as a ``YYYY-MM-DD`` string."""

    return day.isoformat()


def parse_day(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising ``ValueError`` when malformed."""

    if not isinstance(value, str) or not DAY_PATTERN.match(value):
        raise ValueError(f"Invalid date {value!r}; expected YYYY-MM-DD")
    return date.fromisoformat(value)


def is_day(value: object) -> bool:
    """Return True when ``value`` is a well-formed calendar-day string."""

    try:
        parse_day(value)  # type: ignore[arg-type]
    except ValueError:
        return False
    return True


def calculate_streak(completed_days: Iterable[str], *, today: date | None = None) -> int:
    """Return the current run of consecutive completed days.

    A streak stays alive while the habit was completed yesterday or the day
    before; not having marked today yet does not break it. Malformed entries
    are ignored.
    """

    days = {day for day in completed_days if is_day(day)}
    if not days:
        return 0

    today = today or date.today()
    today_key = format_day(today)
    yesterday_key = format_day(today - timedelta(days=1))
    day_before_key = format_day(today - timedelta(days=2))

    done_today = today_key in days
    done_yesterday = yesterday_key in days
    done_day_before = day_before_key in days

    # Fresh single-day streak: an older gap does not extend it.
    if done_today and not done_yesterday and not done_day_before:
        return 1

    if not done_yesterday and not done_day_before:
        return 0

    streak = 0
    last_day: date | None = None
    for key in sorted(days, reverse=True):
        current = parse_day(key)
        if last_day is None or (last_day - current).days == 1:
            streak += 1
            last_day = current
        else:
            break

    return streak


__all__ = ["DAY_PATTERN", "calculate_streak", "format_day", "is_day", "parse_day"]
