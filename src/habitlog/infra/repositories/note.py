"""SQLModel implementation of Note repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.note import Note


class SQLModelNoteRepository:
    """SQLModel-based note repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, note_id: str, *, user_id: int) -> Optional[Note]:
        with self.session_factory() as session:
            obj = session.exec(
                select(Note).where(Note.id == note_id, Note.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: int) -> list[Note]:
        """List notes newest first."""
        with self.session_factory() as session:
            statement = (
                select(Note)
                .where(Note.user_id == user_id)
                .order_by(Note.created_at.desc())  # type: ignore[attr-defined]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, note: Note, *, user_id: int) -> Note:
        with self.session_factory() as session:
            note.user_id = user_id
            session.add(note)
            session.commit()
            session.refresh(note)
            session.expunge(note)
            return note

    def update(self, note: Note, *, user_id: int) -> Note:
        with self.session_factory() as session:
            note.user_id = user_id
            merged = session.merge(note)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
            return merged

    def delete(self, note_id: str, *, user_id: int) -> None:
        with self.session_factory() as session:
            note = session.exec(
                select(Note).where(Note.id == note_id, Note.user_id == user_id)
            ).first()
            if note:
                session.delete(note)
                session.commit()
