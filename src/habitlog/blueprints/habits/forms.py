"""Habit form definitions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...services.streaks import parse_day


class HabitForm(BaseModel):
    """Form model for creating or renaming a habit."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(default="", description="Short label for the habit", max_length=120)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        """Ensure the habit name is present."""

        if not value:
            raise ValueError("Please provide a habit name.")
        return value


class ToggleForm(BaseModel):
    """Day whose completion state should flip."""

    date: str = Field(description="Calendar day as YYYY-MM-DD")

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        parse_day(value)
        return value


class ReorderForm(BaseModel):
    """Habit ids in their new display order."""

    ids: list[str] = Field(default_factory=list)


__all__ = ["HabitForm", "ReorderForm", "ToggleForm"]
