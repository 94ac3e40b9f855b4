"""Habits tracking data structures."""

from __future__ import annotations

import secrets
import string
import time
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_habit_id() -> str:
    """Return an opaque id of the form ``habit_<epoch-millis>_<9 base36 chars>``."""

    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"habit_{int(time.time() * 1000)}_{suffix}"


class Habit(SQLModel, table=True):
    """A user-defined habit tracked day by day."""

    __tablename__: ClassVar[str] = "habit"

    id: str = Field(default_factory=new_habit_id, primary_key=True, max_length=64)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=120, index=True)
    position: Optional[int] = Field(default=None)


class HabitEntry(SQLModel, table=True):
    """Completion of a habit on one calendar day.

    ``occurred_on`` is stored as a ``YYYY-MM-DD`` string so that lexicographic
    and calendar order agree.
    """

    __tablename__: ClassVar[str] = "habit_entry"

    habit_id: str = Field(foreign_key="habit.id", primary_key=True, max_length=64)
    occurred_on: str = Field(primary_key=True, index=True, max_length=10)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
