"""Repository protocol definitions for domain layer."""

from .habit import HabitRepository
from .note import NoteRepository

__all__ = [
    "HabitRepository",
    "NoteRepository",
]
