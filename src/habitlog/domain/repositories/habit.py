"""Habit repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.habit import Habit, HabitEntry


class HabitRepository(Protocol):
    """Repository for managing habits and their completion days."""

    def get_by_id(self, habit_id: str, *, user_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        ...

    def list_all(self, *, user_id: int) -> list[Habit]:
        """List habits in display order."""
        ...

    def create(self, habit: Habit, *, user_id: int) -> Habit:
        """Create a new habit."""
        ...

    def update(self, habit: Habit, *, user_id: int) -> Habit:
        """Update an existing habit."""
        ...

    def delete(self, habit_id: str, *, user_id: int) -> None:
        """Delete a habit and its completion entries."""
        ...

    def next_position(self, *, user_id: int) -> int:
        """Return the display position for a newly added habit."""
        ...

    # Habit entry operations
    def get_entry(self, habit_id: str, occurred_on: str, *, user_id: int) -> Optional[HabitEntry]:
        """Get the completion entry for one day."""
        ...

    def add_entry(self, habit_id: str, occurred_on: str, *, user_id: int) -> HabitEntry:
        """Mark a habit complete on a day."""
        ...

    def delete_entry(self, habit_id: str, occurred_on: str, *, user_id: int) -> None:
        """Remove the completion entry for one day."""
        ...

    def completed_days(self, habit_id: str, *, user_id: int) -> list[str]:
        """Return completion days for a habit, newest first."""
        ...

    def completion_map(self, *, user_id: int) -> dict[str, set[str]]:
        """Return completion days keyed by habit id for every habit of a user."""
        ...
