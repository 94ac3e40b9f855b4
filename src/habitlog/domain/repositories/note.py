"""Note repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.note import Note


class NoteRepository(Protocol):
    """Repository for managing journal notes."""

    def get_by_id(self, note_id: str, *, user_id: int) -> Optional[Note]:
        """Retrieve a note by ID."""
        ...

    def list_all(self, *, user_id: int) -> list[Note]:
        """List notes, newest first."""
        ...

    def create(self, note: Note, *, user_id: int) -> Note:
        """Create a new note."""
        ...

    def update(self, note: Note, *, user_id: int) -> Note:
        """Update an existing note."""
        ...

    def delete(self, note_id: str, *, user_id: int) -> None:
        """Delete a note by ID."""
        ...
