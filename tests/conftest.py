"""Shared fixtures for the portfolio tests."""

import pytest
from fastapi.testclient import TestClient

from portfolio import main
from portfolio.config import Settings
from portfolio.storage import LocalStore


@pytest.fixture
def settings(tmp_path):
    return Settings(
        store_path=tmp_path / "local_storage.json",
        submit_delay=0,
        reset_delay=3.0,
        posts_delay=0,
    )


@pytest.fixture
def store(settings):
    return LocalStore(settings.store_path)


@pytest.fixture
def client(settings, store, monkeypatch):
    monkeypatch.setattr(main, "settings", settings)
    monkeypatch.setattr(main, "store", store)
    return TestClient(main.app)


@pytest.fixture
def anyio_backend():
    return "asyncio"
