"""
Notes API Backend: Configuration Tests
======================================

What:  Settings defaults and environment overrides.
"""

import pytest
from pydantic import ValidationError

from app.config import Settings
from app.main import create_app


def test_defaults(monkeypatch):
    for var in ("PORT", "HOST", "CORS_ORIGINS", "SEED_EXAMPLE_NOTES"):
        monkeypatch.delenv(var, raising=False)

    cfg = Settings(_env_file=None)

    assert cfg.port == 3001
    assert cfg.host == "0.0.0.0"
    assert cfg.cors_origins_list == ["*"]
    assert cfg.seed_example_notes is True


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "4000")

    assert Settings(_env_file=None).port == 4000


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_cors_origins_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, http://127.0.0.1:3000,")

    assert Settings(_env_file=None).cors_origins_list == [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


def test_seeding_can_be_disabled(monkeypatch):
    monkeypatch.setenv("SEED_EXAMPLE_NOTES", "false")

    app = create_app(app_settings=Settings(_env_file=None))

    assert len(app.state.note_store) == 0
