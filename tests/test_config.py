"""
Tests for environment-driven configuration.
"""

import pytest

from config import AppConfig, StoreConfig

_VARS = ["DB_HOST", "DB_NAME", "DB_USER", "DB_PASSWORD", "DB_PORT", "DB_CONNECT_TIMEOUT",
         "API_URL", "SERVICE_NAME", "API_FETCH_TIMEOUT", "API_PORT", "FRONTEND_PORT", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_store_defaults():
    config = StoreConfig.from_env()
    assert (config.host, config.dbname, config.user, config.password) == (
        "mysql", "microservices_db", "app_user", "userpass"
    )
    assert config.port == 3306


def test_store_overrides(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "3307")
    config = StoreConfig.from_env()
    assert config.host == "db.internal"
    assert config.port == 3307
    assert config.user == "app_user"


def test_empty_value_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("DB_NAME", "")
    assert StoreConfig.from_env().dbname == "microservices_db"


def test_app_defaults():
    config = AppConfig.from_env()
    assert config.api_url == "http://api"
    assert config.fetch_timeout == 5.0
    assert config.log_level == "INFO"


def test_api_url_trailing_slash_stripped(monkeypatch):
    monkeypatch.setenv("API_URL", "http://api.local:8000/")
    assert AppConfig.from_env().api_url == "http://api.local:8000"
