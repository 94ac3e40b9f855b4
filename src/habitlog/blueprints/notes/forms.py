"""Note form definitions."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator

from ...services.streaks import format_day, parse_day


class NoteForm(BaseModel):
    """Form model for adding or editing a note."""

    text: str = Field(default="", description="Note body with inline markup")
    date: str = Field(default_factory=lambda: format_day(date.today()))

    @field_validator("text")
    @classmethod
    def validate_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Note text cannot be empty.")
        return value

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        parse_day(value)
        return value


class CheckboxForm(BaseModel):
    """Checkbox click on a rendered todo line."""

    line: int = Field(description="Zero-based line index carried by the checkbox")
    checked: bool


class PreviewForm(BaseModel):
    text: str = ""


__all__ = ["CheckboxForm", "NoteForm", "PreviewForm"]
