import dataclasses
from datetime import timedelta
from pathlib import Path

import pytest

from playerapi.config import Settings, load_settings, resolve_db_path


def test_defaults(monkeypatch):
    for name in (
        "PLAYERAPI_DB_PATH",
        "PLAYERAPI_CACHE_SLIDING_SECONDS",
        "PLAYERAPI_CACHE_ABSOLUTE_SECONDS",
        "PLAYERAPI_CACHE_ENABLED",
        "PLAYERAPI_SEED",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.cache_enabled is True
    assert settings.seed is True
    assert settings.cache_expiration.sliding == timedelta(minutes=10)
    assert settings.cache_expiration.absolute == timedelta(hours=1)
    assert Path(settings.db_path).name == "players.sqlite3"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PLAYERAPI_DB_PATH", str(tmp_path / "custom.sqlite3"))
    monkeypatch.setenv("PLAYERAPI_CACHE_SLIDING_SECONDS", "0")
    monkeypatch.setenv("PLAYERAPI_CACHE_ABSOLUTE_SECONDS", "30")
    monkeypatch.setenv("PLAYERAPI_CACHE_ENABLED", "off")
    monkeypatch.setenv("PLAYERAPI_SEED", "no")

    settings = load_settings()

    assert settings.db_path == tmp_path / "custom.sqlite3"
    assert settings.cache_enabled is False
    assert settings.seed is False
    assert settings.cache_expiration.sliding is None
    assert settings.cache_expiration.absolute == timedelta(seconds=30)


def test_invalid_values_fall_back_to_defaults(monkeypatch, caplog):
    monkeypatch.setenv("PLAYERAPI_CACHE_SLIDING_SECONDS", "soon")
    monkeypatch.setenv("PLAYERAPI_CACHE_ENABLED", "maybe")
    monkeypatch.setenv("PLAYERAPI_DB_PATH", "file:players?mode=memory&cache=shared")

    settings = load_settings()

    assert settings.cache_sliding_seconds == 600
    assert settings.cache_enabled is True
    assert settings.db_path == "file:players?mode=memory&cache=shared"
    assert "Invalid int for PLAYERAPI_CACHE_SLIDING_SECONDS" in caplog.text
    assert "Invalid boolean for PLAYERAPI_CACHE_ENABLED" in caplog.text


def test_settings_are_immutable():
    settings = Settings()

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.seed = False  # type: ignore[misc]


def test_resolve_db_path():
    assert resolve_db_path("file:players?mode=memory") == "file:players?mode=memory"
    assert resolve_db_path("data/players.sqlite3") == Path("data/players.sqlite3")
