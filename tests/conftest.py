"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from happy_thoughts.config import Settings
from happy_thoughts.db.store import ThoughtStore
from happy_thoughts.main import create_app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'thoughts_test.sqlite'}"


@pytest.fixture
def store(database_url):
    store = ThoughtStore.from_url(database_url)
    store.create_schema()
    yield store
    store.dispose()


@pytest.fixture
def settings(database_url):
    return Settings(database_url=database_url, log_level="WARNING")


@pytest.fixture
def client(store, settings):
    app = create_app(store=store, settings=settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_thought(client):
    def _make(message="A happy little thought"):
        resp = client.post("/thoughts", json={"message": message})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
