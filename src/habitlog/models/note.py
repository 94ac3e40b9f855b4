"""Date-stamped journal notes."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import ClassVar

from sqlmodel import Field, SQLModel


class Note(SQLModel, table=True):
    """Freeform note attached to a calendar day, optionally pinned as sticky."""

    __tablename__: ClassVar[str] = "note"

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, primary_key=True, max_length=32)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    text: str = Field(nullable=False, default="")
    date: str = Field(nullable=False, index=True, max_length=10)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    is_sticky: bool = Field(default=False, nullable=False)
