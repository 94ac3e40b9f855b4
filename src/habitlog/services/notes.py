"""Journal note operations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable

from ..domain.repositories.note import NoteRepository
from ..logging_config import get_logger
from ..models.note import Note
from .markup import render_note, toggle_checkbox_line
from .streaks import parse_day

logger = get_logger("services.notes")


def _require_note(repo: NoteRepository, note_id: str, user_id: int) -> Note:
    note = repo.get_by_id(note_id, user_id=user_id)
    if note is None:
        raise LookupError(f"Note {note_id} not found")
    return note


def _require_text(text: str | None) -> str:
    if not text or not text.strip():
        raise ValueError("Note text cannot be empty.")
    return text


def add_note(repo: NoteRepository, text: str, day: str, *, user_id: int) -> Note:
    """Store a new, unpinned note; the text is kept exactly as typed."""

    _require_text(text)
    parse_day(day)
    note = repo.create(Note(text=text, date=day, user_id=user_id), user_id=user_id)
    logger.info("Note created", extra={"note_id": note.id, "user_id": user_id})
    return note


def edit_note(repo: NoteRepository, note_id: str, text: str, day: str, *, user_id: int) -> Note:
    cleaned = _require_text(text).strip()
    parse_day(day)
    note = _require_note(repo, note_id, user_id)
    note.text = cleaned
    note.date = day
    return repo.update(note, user_id=user_id)


def delete_note(repo: NoteRepository, note_id: str, *, user_id: int) -> None:
    _require_note(repo, note_id, user_id)
    repo.delete(note_id, user_id=user_id)
    logger.info("Note deleted", extra={"note_id": note_id, "user_id": user_id})


def toggle_sticky(repo: NoteRepository, note_id: str, *, user_id: int) -> bool:
    """Flip the pinned flag and return its new value."""

    note = _require_note(repo, note_id, user_id)
    note.is_sticky = not note.is_sticky
    return repo.update(note, user_id=user_id).is_sticky


def toggle_note_checkbox(
    repo: NoteRepository,
    note_id: str,
    line_index: int,
    checked: bool,
    *,
    user_id: int,
) -> Note:
    """Set the todo checkbox on ``line_index`` and persist the rewritten text."""

    note = _require_note(repo, note_id, user_id)
    updated = toggle_checkbox_line(note.text, line_index, checked)
    if updated == note.text:
        return note
    note.text = updated
    logger.debug(
        "Note checkbox toggled",
        extra={"note_id": note_id, "line": line_index, "checked": checked},
    )
    return repo.update(note, user_id=user_id)


def list_notes(repo: NoteRepository, *, user_id: int) -> list[Note]:
    return repo.list_all(user_id=user_id)


def split_notes(notes: Iterable[Note]) -> tuple[list[Note], list[Note]]:
    """Partition notes into (sticky, regular), keeping their order."""

    sticky: list[Note] = []
    regular: list[Note] = []
    for note in notes:
        (sticky if note.is_sticky else regular).append(note)
    return sticky, regular


def _utc_iso(value: datetime | None) -> str | None:
    if value is None:
        return None
    # SQLite hands back naive datetimes; stored values are always UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def note_view(note: Note) -> dict[str, Any]:
    return {
        "id": note.id,
        "text": note.text,
        "date": note.date,
        "is_sticky": note.is_sticky,
        "created_at": _utc_iso(note.created_at),
        "html": render_note(note.text),
    }


__all__ = [
    "add_note",
    "delete_note",
    "edit_note",
    "list_notes",
    "note_view",
    "split_notes",
    "toggle_note_checkbox",
    "toggle_sticky",
]
