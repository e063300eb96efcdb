"""
Process settings read from the environment.

The values are read once at startup into a frozen `Settings` and passed to
`create_app()`. Tests build their own instance instead of patching globals.
The database password is the exception: `core.db` reads it from the
environment on every connection attempt.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PORT = 8080
DEFAULT_DB_PORT = 5432


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_log_level(name: str, default: str) -> str:
    raw = os.environ.get(name, "").strip().upper()
    if raw == "WARN":
        return "WARNING"
    return raw if raw in LOG_LEVELS else default


def _normalize_prefix(prefix: str) -> str:
    prefix = (prefix or "").strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix
    return prefix


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    api_prefix: str = "/api"

    db_host: str = "localhost"
    db_port: int = DEFAULT_DB_PORT
    db_user: str = "avnadmin"
    db_name: str = "defaultdb"
    # Env var holding the password; looked up at connection time.
    db_password_env: str = "DB_PASSWORD"
    db_ssl_ca: str = "./ca.pem"
    db_connect_timeout: int = 10
    db_command_timeout: int = 30

    users_file: str = "users.json"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=_env_str("HOST", cls.host) or cls.host,
            port=_env_int("PORT", cls.port),
            api_prefix=_normalize_prefix(_env_str("API_PREFIX", cls.api_prefix)),
            db_host=_env_str("DB_HOST", cls.db_host) or cls.db_host,
            db_port=_env_int("DB_PORT", cls.db_port),
            db_user=_env_str("DB_USER", cls.db_user) or cls.db_user,
            db_name=_env_str("DB_NAME", cls.db_name) or cls.db_name,
            db_ssl_ca=_env_str("DB_SSL_CA", cls.db_ssl_ca),
            db_connect_timeout=_env_int("DB_CONNECT_TIMEOUT", cls.db_connect_timeout),
            db_command_timeout=_env_int("DB_COMMAND_TIMEOUT", cls.db_command_timeout),
            users_file=_env_str("USERS_FILE", cls.users_file) or cls.users_file,
            log_level=_env_log_level("LOG_LEVEL", cls.log_level),
        )
