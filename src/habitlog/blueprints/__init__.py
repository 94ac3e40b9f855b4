"""Blueprint exports."""

from . import auth, habits, notes

__all__ = [
    "auth",
    "habits",
    "notes",
]
