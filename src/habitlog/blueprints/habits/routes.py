"""Habit routes."""

from __future__ import annotations

from datetime import date

from flask import jsonify, request

from ...extensions import habit_repository
from ...models.habit import Habit
from ...services import habits as habit_service
from ...services.streaks import format_day, parse_day
from ...services.week import can_go_forward, displayed_days, next_period, previous_period
from ..helpers import current_user_id, login_required, parse_form
from . import bp
from .forms import HabitForm, ReorderForm, ToggleForm


def _habit_payload(habit: Habit) -> dict:
    return {"id": habit.id, "name": habit.name, "position": habit.position}


def _period_end(today: date) -> date:
    """Read ``?end=`` from the query string; the window never moves past today."""

    raw = request.args.get("end", "").strip()
    if not raw:
        return today
    return min(parse_day(raw), today)


@bp.get("/")
@login_required
def list_habits():
    """Return the week window and one row per habit with its streak."""

    today = date.today()
    period_end = _period_end(today)
    rows = habit_service.habit_table(
        habit_repository(),
        user_id=current_user_id(),
        period_end=period_end,
        today=today,
    )
    forward = can_go_forward(period_end, today)
    return jsonify(
        {
            "period_end": format_day(period_end),
            "days": [format_day(day) for day in displayed_days(period_end)],
            "previous": format_day(previous_period(period_end)),
            "next": format_day(next_period(period_end, today)) if forward else None,
            "habits": rows,
        }
    )


@bp.post("/")
@login_required
def create_habit():
    form = parse_form(HabitForm)
    habit = habit_service.add_habit(habit_repository(), form.name, user_id=current_user_id())
    return jsonify(_habit_payload(habit)), 201


@bp.patch("/<habit_id>")
@login_required
def rename_habit(habit_id: str):
    form = parse_form(HabitForm)
    habit = habit_service.rename_habit(
        habit_repository(), habit_id, form.name, user_id=current_user_id()
    )
    return jsonify(_habit_payload(habit))


@bp.delete("/<habit_id>")
@login_required
def delete_habit(habit_id: str):
    habit_service.delete_habit(habit_repository(), habit_id, user_id=current_user_id())
    return "", 204


@bp.post("/<habit_id>/toggle")
@login_required
def toggle_habit(habit_id: str):
    """Flip completion for the submitted day and report the new streak."""

    form = parse_form(ToggleForm)
    repo = habit_repository()
    user_id = current_user_id()
    completed = habit_service.toggle_completion(repo, habit_id, form.date, user_id=user_id)
    streak = habit_service.habit_streak(repo, habit_id, user_id=user_id)
    return jsonify({"id": habit_id, "date": form.date, "completed": completed, "streak": streak})


@bp.post("/reorder")
@login_required
def reorder_habits():
    form = parse_form(ReorderForm)
    habits = habit_service.reorder_habits(habit_repository(), form.ids, user_id=current_user_id())
    return jsonify([_habit_payload(habit) for habit in habits])
