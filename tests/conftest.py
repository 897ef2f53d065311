import pytest
from fastapi.testclient import TestClient

from version_app.config import Settings, get_settings
from version_app.main import create_app

CONFIG_KEYS = (
    "VERSION",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DB_CONNECT_TIMEOUT",
    "PORT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test from the documented defaults"""
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def make_client(make_settings):
    def _make(**overrides) -> TestClient:
        return TestClient(create_app(make_settings(**overrides)))

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
