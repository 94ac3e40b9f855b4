"""Concrete repository implementations using SQLModel."""

from .habit import SQLModelHabitRepository
from .note import SQLModelNoteRepository

__all__ = [
    "SQLModelHabitRepository",
    "SQLModelNoteRepository",
]
