"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Habits Log"
    DB_FILENAME = "habitlog.db"
    LOG_FILENAME = "habitlog.log"
    TESTING = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("HABITLOG_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("HABITLOG_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("HABITLOG_DATABASE_URL", self._build_sqlite_url())
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("HABITLOG_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("HABITLOG_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {}
        if self.DATABASE_URL.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        return {"connect_args": connect_args}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration for the pytest suite.

    Callers are expected to point ``HABITLOG_DATA_DIR`` and
    ``HABITLOG_DATABASE_URL`` at a temporary location.
    """

    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True
