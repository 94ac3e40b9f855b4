"""Authentication and user management services."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, ContextManager, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError
from sqlmodel import Session, select

from ..logging_config import get_logger
from ..models.user import User

SessionFactory = Callable[[], ContextManager[Session]]

_hasher = PasswordHasher()
logger = get_logger("services.auth")


def get_user(user_id: int, session_factory: SessionFactory) -> Optional[User]:
    """Fetch a user by primary key."""
    with session_factory() as session:
        user = session.get(User, user_id)
        if user:
            session.expunge(user)
        return user


def get_user_by_username(username: str, session_factory: SessionFactory) -> Optional[User]:
    """Fetch a user by username."""
    username = username.strip()
    with session_factory() as session:
        user = session.exec(select(User).where(User.username == username)).first()
        if user:
            session.expunge(user)
        return user


def create_user(*, username: str, password: str, session_factory: SessionFactory) -> User:
    """Create a new user with hashed password."""

    username = (username or "").strip()
    if not username:
        raise ValueError("Username cannot be empty")
    if not password:
        raise ValueError("Password cannot be empty")
    password_hash = _hasher.hash(password)
    with session_factory() as session:
        existing = session.exec(select(User).where(User.username == username)).first()
        if existing:
            raise ValueError("Username already exists")
        user = User(username=username, password_hash=password_hash)
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
    logger.info("User created", extra={"user_id": user.id})
    return user


def authenticate(
    *,
    username: str,
    password: str,
    session_factory: SessionFactory,
) -> Optional[User]:
    """Validate credentials and return the user when correct."""

    username = (username or "").strip()
    if not username:
        return None
    with session_factory() as session:
        user = session.exec(select(User).where(User.username == username)).first()
        if user is None:
            return None
        try:
            _hasher.verify(user.password_hash, password)
        except (VerifyMismatchError, InvalidHash, VerificationError):
            logger.warning("Failed sign-in", extra={"username": username})
            return None

        user.last_login = datetime.now(timezone.utc)
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
        return user


__all__ = ["authenticate", "create_user", "get_user", "get_user_by_username"]
