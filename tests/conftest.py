"""Pytest configuration and shared fixtures for Habits Log tests.

Provides an isolated SQLite database per test, repositories bound to it,
data factories and a Flask test client with a signed-in user.
"""

from __future__ import annotations

import tempfile
from datetime import date, datetime, timezone
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from habitlog import create_app
from habitlog.infra.database import create_session_factory
from habitlog.infra.repositories import SQLModelHabitRepository, SQLModelNoteRepository
from habitlog.models import Habit, HabitEntry, Note, User

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Session for arranging test data directly."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the application builds."""
    return create_session_factory(db_engine)


@pytest.fixture
def habit_repo(session_factory) -> SQLModelHabitRepository:
    return SQLModelHabitRepository(session_factory)


@pytest.fixture
def note_repo(session_factory) -> SQLModelNoteRepository:
    return SQLModelNoteRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user_factory(db_session):
    """Factory for creating users with a dummy password hash."""

    def _create_user(username: str = "tester") -> User:
        u = User(username=username, password_hash="dummy-hash")
        db_session.add(u)
        db_session.commit()
        db_session.refresh(u)
        return u

    return _create_user


@pytest.fixture
def user(user_factory) -> User:
    """Default user for scoping data."""
    return user_factory("tester")


@pytest.fixture
def habit_factory(db_session, user):
    """Factory for creating habits, optionally with completion days.

    Returns:
        Callable: Function that creates and persists Habit instances
    """

    def _create_habit(
        name: str = "Test Habit",
        completed_days: tuple[str, ...] = (),
        position: int | None = None,
        owner: User | None = None,
    ) -> Habit:
        owner = owner or user
        habit = Habit(name=name, user_id=owner.id, position=position)
        db_session.add(habit)
        db_session.commit()
        db_session.refresh(habit)
        for day in completed_days:
            db_session.add(HabitEntry(habit_id=habit.id, occurred_on=day, user_id=owner.id))
        db_session.commit()
        return habit

    return _create_habit


@pytest.fixture
def note_factory(db_session, user):
    """Factory for creating notes with a controllable creation time."""

    def _create_note(
        text: str = "Test note",
        day: str = "2024-03-01",
        is_sticky: bool = False,
        created_at: datetime | None = None,
        owner: User | None = None,
    ) -> Note:
        owner = owner or user
        note = Note(
            text=text,
            date=day,
            is_sticky=is_sticky,
            user_id=owner.id,
            created_at=created_at or datetime.now(timezone.utc),
        )
        db_session.add(note)
        db_session.commit()
        db_session.refresh(note)
        return note

    return _create_note


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("HABITLOG_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITLOG_DATABASE_URL", f"sqlite:///{tmp_path / 'habitlog.db'}")
    monkeypatch.setenv("HABITLOG_SECRET_KEY", "test-secret")
    return create_app("testing")


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def auth_client(client):
    """Test client with a freshly registered, signed-in user."""
    response = client.post("/auth/register", json={"username": "alice", "password": "s3cret!"})
    assert response.status_code == 201
    return client


@pytest.fixture
def today() -> date:
    return date(2024, 3, 15)
