"""Service module exports."""

from . import auth, habits, markup, notes, streaks, week

__all__ = [
    "auth",
    "habits",
    "markup",
    "notes",
    "streaks",
    "week",
]
