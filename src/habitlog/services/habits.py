"""Habit operations shared by the HTTP layer and the CLI."""

from __future__ import annotations

from datetime import date
from typing import Any, Sequence

from ..domain.repositories.habit import HabitRepository
from ..logging_config import get_logger
from ..models.habit import Habit
from .streaks import calculate_streak, format_day, parse_day
from .week import displayed_days

logger = get_logger("services.habits")


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValueError("Please provide a habit name.")
    return cleaned


def _require_habit(repo: HabitRepository, habit_id: str, user_id: int) -> Habit:
    habit = repo.get_by_id(habit_id, user_id=user_id)
    if habit is None:
        raise LookupError(f"Habit {habit_id} not found")
    return habit


def add_habit(repo: HabitRepository, name: str, *, user_id: int) -> Habit:
    """Create a habit with an empty completion set at the end of the list."""

    habit = Habit(name=_clean_name(name), user_id=user_id, position=repo.next_position(user_id=user_id))
    habit = repo.create(habit, user_id=user_id)
    logger.info("Habit created", extra={"habit_id": habit.id, "user_id": user_id})
    return habit


def rename_habit(repo: HabitRepository, habit_id: str, name: str, *, user_id: int) -> Habit:
    cleaned = _clean_name(name)
    habit = _require_habit(repo, habit_id, user_id)
    habit.name = cleaned
    return repo.update(habit, user_id=user_id)


def delete_habit(repo: HabitRepository, habit_id: str, *, user_id: int) -> None:
    _require_habit(repo, habit_id, user_id)
    repo.delete(habit_id, user_id=user_id)
    logger.info("Habit deleted", extra={"habit_id": habit_id, "user_id": user_id})


def toggle_completion(repo: HabitRepository, habit_id: str, day: str, *, user_id: int) -> bool:
    """Flip the completion state of ``habit_id`` on ``day``.

    Returns:
        True when the day is now marked complete, False when it was cleared.
    """

    parse_day(day)
    _require_habit(repo, habit_id, user_id)
    if repo.get_entry(habit_id, day, user_id=user_id) is not None:
        repo.delete_entry(habit_id, day, user_id=user_id)
        completed = False
    else:
        repo.add_entry(habit_id, day, user_id=user_id)
        completed = True
    logger.debug(
        "Habit completion toggled",
        extra={"habit_id": habit_id, "day": day, "completed": completed},
    )
    return completed


def reorder_habits(repo: HabitRepository, ordered_ids: Sequence[str], *, user_id: int) -> list[Habit]:
    """Assign display positions following ``ordered_ids``.

    Habits missing from ``ordered_ids`` keep their relative order after the
    listed ones.
    """

    habits = {habit.id: habit for habit in repo.list_all(user_id=user_id)}
    unknown = [habit_id for habit_id in ordered_ids if habit_id not in habits]
    if unknown:
        raise LookupError(f"Unknown habits: {', '.join(unknown)}")

    listed = list(dict.fromkeys(ordered_ids))
    remaining = [habit_id for habit_id in habits if habit_id not in listed]
    updated: list[Habit] = []
    for position, habit_id in enumerate(listed + remaining):
        habit = habits[habit_id]
        if habit.position != position:
            habit.position = position
            habit = repo.update(habit, user_id=user_id)
        updated.append(habit)
    return updated


def habit_streak(repo: HabitRepository, habit_id: str, *, user_id: int, today: date | None = None) -> int:
    _require_habit(repo, habit_id, user_id)
    return calculate_streak(repo.completed_days(habit_id, user_id=user_id), today=today)


def habit_table(
    repo: HabitRepository,
    *,
    user_id: int,
    period_end: date,
    today: date | None = None,
) -> list[dict[str, Any]]:
    """Build one row per habit covering the displayed week window."""

    today = today or date.today()
    days = [format_day(day) for day in displayed_days(period_end)]
    today_key = format_day(today)
    completions = repo.completion_map(user_id=user_id)

    rows: list[dict[str, Any]] = []
    for habit in repo.list_all(user_id=user_id):
        completed = completions.get(habit.id, set())
        rows.append(
            {
                "id": habit.id,
                "name": habit.name,
                "position": habit.position,
                "days": [
                    {"date": day, "completed": day in completed, "is_today": day == today_key}
                    for day in days
                ],
                "streak": calculate_streak(completed, today=today),
            }
        )
    return rows


__all__ = [
    "add_habit",
    "delete_habit",
    "habit_streak",
    "habit_table",
    "rename_habit",
    "reorder_habits",
    "toggle_completion",
]
