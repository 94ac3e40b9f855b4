"""SQLModel table exports."""

from .habit import Habit, HabitEntry
from .note import Note
from .user import User

__all__ = [
    "Habit",
    "HabitEntry",
    "Note",
    "User",
]
