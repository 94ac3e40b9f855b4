"""Tests for environment-driven configuration and the app factory."""

from __future__ import annotations

import pytest

from habitlog import create_app
from habitlog import config


def test_defaults_use_sqlite_in_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITLOG_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("HABITLOG_DATABASE_URL", raising=False)

    cfg = config.BaseConfig()

    assert cfg.DATA_DIR == tmp_path.resolve()
    assert cfg.DATABASE_URL == f"sqlite:///{tmp_path.resolve() / 'habitlog.db'}"
    assert cfg.sqlalchemy_engine_options()["connect_args"] == {"check_same_thread": False}


def test_database_url_override(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITLOG_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITLOG_DATABASE_URL", "postgresql://db/habits")
    cfg = config.BaseConfig()
    assert cfg.DATABASE_URL == "postgresql://db/habits"
    assert cfg.sqlalchemy_engine_options()["connect_args"] == {}


def test_production_requires_secret(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITLOG_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITLOG_DEV_MODE", "false")
    monkeypatch.delenv("HABITLOG_SECRET_KEY", raising=False)
    with pytest.raises(ValueError):
        config.BaseConfig()

    monkeypatch.setenv("HABITLOG_SECRET_KEY", "s3cret")
    assert config.BaseConfig().DEV_MODE is False


def test_create_app_selects_config(app):
    assert app.config["TESTING"] is True
    assert isinstance(app.config["HABITLOG_CONFIG"], config.TestConfig)
    assert {"auth", "habits", "notes"} <= set(app.blueprints)


def test_development_config(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITLOG_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HABITLOG_DATABASE_URL", f"sqlite:///{tmp_path / 'dev.db'}")
    app = create_app("development")
    assert isinstance(app.config["HABITLOG_CONFIG"], config.DevConfig)
    assert app.config["DEBUG"] is True
