"""Tests for environment-driven settings and the seed script."""

import logging

from happy_thoughts.config import Settings
from happy_thoughts.db.engine import DEFAULT_DB_URL
from scripts.seed import SAMPLE_THOUGHTS, seed


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "DATABASE_URL", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        s = Settings()
        assert s.port == 8080
        assert s.database_url == DEFAULT_DB_URL
        assert s.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("DATABASE_URL", "sqlite:///other.sqlite")
        s = Settings()
        assert s.port == 9090
        assert s.database_url == "sqlite:///other.sqlite"


class TestSeed:
    def test_skips_invalid(self, store):
        created = seed(store)
        assert created == len(SAMPLE_THOUGHTS) - 1
        assert len(store.list_recent()) == created


class TestEntrypoint:
    def test_logs_port(self, monkeypatch, caplog):
        import app as entrypoint

        calls = []
        monkeypatch.setenv("PORT", "9191")
        monkeypatch.setattr(entrypoint.uvicorn, "run", lambda *a, **kw: calls.append(kw))

        with caplog.at_level(logging.INFO, logger="app"):
            entrypoint.main()

        assert calls == [{"host": entrypoint.get_settings().host, "port": 9191}]
        assert "Server running on http://localhost:9191" in caplog.text
