"""SQLModel implementation of Habit repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...models.habit import Habit, HabitEntry


class SQLModelHabitRepository:
    """SQLModel-based habit repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, habit_id: str, *, user_id: int) -> Optional[Habit]:
        """Retrieve a habit by ID."""
        with self.session_factory() as session:
            obj = session.exec(
                select(Habit).where(Habit.id == habit_id, Habit.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: int) -> list[Habit]:
        """List habits ordered by position; unpositioned habits come last."""
        with self.session_factory() as session:
            statement = (
                select(Habit)
                .where(Habit.user_id == user_id)
                .order_by(
                    Habit.position.is_(None),  # type: ignore[union-attr]
                    Habit.position,
                    Habit.name,
                )
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, habit: Habit, *, user_id: int) -> Habit:
        """Create a new habit."""
        with self.session_factory() as session:
            habit.user_id = user_id
            session.add(habit)
            session.commit()
            session.refresh(habit)
            session.expunge(habit)
            return habit

    def update(self, habit: Habit, *, user_id: int) -> Habit:
        """Update an existing habit."""
        with self.session_factory() as session:
            habit.user_id = user_id
            merged = session.merge(habit)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
            return merged

    def delete(self, habit_id: str, *, user_id: int) -> None:
        """Delete a habit and its entries."""
        with self.session_factory() as session:
            habit = session.exec(
                select(Habit).where(Habit.id == habit_id, Habit.user_id == user_id)
            ).first()
            if habit is None:
                return
            entries = session.exec(
                select(HabitEntry)
                .where(HabitEntry.user_id == user_id)
                .where(HabitEntry.habit_id == habit_id)
            ).all()
            for entry in entries:
                session.delete(entry)
            session.delete(habit)
            session.commit()

    def next_position(self, *, user_id: int) -> int:
        """Return one past the highest position in use."""
        with self.session_factory() as session:
            highest = session.exec(
                select(func.max(Habit.position)).where(Habit.user_id == user_id)
            ).one()
            return 0 if highest is None else highest + 1

    # Habit entry operations
    def get_entry(self, habit_id: str, occurred_on: str, *, user_id: int) -> Optional[HabitEntry]:
        """Get a specific habit entry."""
        with self.session_factory() as session:
            statement = (
                select(HabitEntry)
                .where(HabitEntry.user_id == user_id)
                .where(HabitEntry.habit_id == habit_id)
                .where(HabitEntry.occurred_on == occurred_on)
            )
            obj = session.exec(statement).first()
            if obj:
                session.expunge(obj)
            return obj

    def add_entry(self, habit_id: str, occurred_on: str, *, user_id: int) -> HabitEntry:
        """Insert an entry; an existing entry for the same day is returned as is."""
        with self.session_factory() as session:
            existing = session.exec(
                select(HabitEntry)
                .where(HabitEntry.user_id == user_id)
                .where(HabitEntry.habit_id == habit_id)
                .where(HabitEntry.occurred_on == occurred_on)
            ).first()
            if existing:
                session.expunge(existing)
                return existing

            entry = HabitEntry(habit_id=habit_id, occurred_on=occurred_on, user_id=user_id)
            session.add(entry)
            session.commit()
            session.refresh(entry)
            session.expunge(entry)
            return entry

    def delete_entry(self, habit_id: str, occurred_on: str, *, user_id: int) -> None:
        """Delete a habit entry."""
        with self.session_factory() as session:
            entry = session.exec(
                select(HabitEntry)
                .where(HabitEntry.user_id == user_id)
                .where(HabitEntry.habit_id == habit_id)
                .where(HabitEntry.occurred_on == occurred_on)
            ).first()

            if entry:
                session.delete(entry)
                session.commit()

    def completed_days(self, habit_id: str, *, user_id: int) -> list[str]:
        """Return completion days for a habit, newest first."""
        with self.session_factory() as session:
            statement = (
                select(HabitEntry.occurred_on)
                .where(HabitEntry.user_id == user_id)
                .where(HabitEntry.habit_id == habit_id)
                .order_by(HabitEntry.occurred_on.desc())  # type: ignore[attr-defined]
            )
            return list(session.exec(statement).all())

    def completion_map(self, *, user_id: int) -> dict[str, set[str]]:
        """Return completion days keyed by habit id."""
        with self.session_factory() as session:
            rows = session.exec(
                select(HabitEntry.habit_id, HabitEntry.occurred_on).where(
                    HabitEntry.user_id == user_id
                )
            ).all()
        by_habit: dict[str, set[str]] = {}
        for habit_id, occurred_on in rows:
            by_habit.setdefault(habit_id, set()).add(occurred_on)
        return by_habit
