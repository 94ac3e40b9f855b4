"""Database wiring for the Flask application."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .infra.database import SessionFactory, create_db_engine, create_session_factory, init_database
from .infra.repositories import SQLModelHabitRepository, SQLModelNoteRepository

_EXTENSION_KEY = "habitlog"


def init_db(app: Flask) -> None:
    """Create the engine for ``app`` and make sure the schema exists."""

    config: BaseConfig = app.config["HABITLOG_CONFIG"]
    engine = create_db_engine(config)
    init_database(engine)
    # TODO(@habitlog): replace create_all with Alembic migrations before the next schema change.
    app.extensions[_EXTENSION_KEY] = {"session_factory": create_session_factory(engine)}


def _state() -> dict:
    try:
        return current_app.extensions[_EXTENSION_KEY]
    except KeyError:  # pragma: no cover - only hit when init_db was skipped
        raise RuntimeError("Database engine not initialized") from None


def get_session_factory() -> SessionFactory:
    return _state()["session_factory"]


def habit_repository() -> SQLModelHabitRepository:
    return SQLModelHabitRepository(get_session_factory())


def note_repository() -> SQLModelNoteRepository:
    return SQLModelNoteRepository(get_session_factory())
