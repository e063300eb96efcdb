from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from core.settings import Settings
from main import create_app

_ENV_NAMES = (
    "HOST",
    "PORT",
    "API_PREFIX",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_NAME",
    "DB_SSL_CA",
    "DB_CONNECT_TIMEOUT",
    "DB_COMMAND_TIMEOUT",
    "USERS_FILE",
    "LOG_LEVEL",
)


def test_defaults(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.api_prefix == "/api"
    assert settings.db_ssl_ca == "./ca.pem"
    assert settings.users_file == "users.json"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "26081")
    monkeypatch.setenv("API_PREFIX", "v1/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.port == 9000
    assert settings.db_host == "db.internal"
    assert settings.db_port == 26081
    assert settings.api_prefix == "/v1"
    assert settings.log_level == "DEBUG"


def test_unparsable_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "eighty")
    assert Settings.from_env().port == 8080


def test_empty_prefix_mounts_bare_paths(database, users_file):
    settings = Settings(api_prefix="", users_file=str(users_file))
    with TestClient(create_app(settings, database=database)) as client:
        assert client.get("/events").status_code == 200
        assert client.post("/login", json={"username": "admin", "password": "s3cret"}).status_code == 200


def test_health_does_not_touch_storage(client, database):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert database.calls == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("VERBOSE", "INFO"), ("", "INFO"), ("debug", "DEBUG"), (" warning ", "WARNING"), ("warn", "WARNING")],
)
def test_log_level_falls_back_on_unknown_names(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert Settings.from_env().log_level == expected
