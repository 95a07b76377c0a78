from __future__ import annotations

import pytest

from taskhub.config import load_settings


def test_defaults(monkeypatch) -> None:
    for name in ("STORE_BACKEND", "DATABASE_URL", "API_PORT", "CORS_ORIGINS", "STRICT_TASK_TYPES"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.store_backend == "memory"
    assert settings.database_url == "sqlite://"
    assert settings.api_port == 4000
    assert settings.cors_origins == ("*",)
    assert settings.strict_task_types is False


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("STORE_BACKEND", "Database")
    monkeypatch.setenv("API_PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("STRICT_TASK_TYPES", "yes")

    settings = load_settings()

    assert settings.store_backend == "database"
    assert settings.api_port == 8080
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.strict_task_types is True


def test_unknown_backend_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("STORE_BACKEND", "redis")

    with pytest.raises(RuntimeError, match="STORE_BACKEND"):
        load_settings()
