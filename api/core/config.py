"""
Runtime settings read from the environment.

Values are read on every call so tests (and reloads) can change them with
plain environment updates.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 3000
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def api_token() -> str | None:
    # Unset or blank disables the bearer gate.
    token = os.environ.get("API_TOKEN", "").strip()
    return token or None


def api_prefix() -> str:
    prefix = os.environ.get("API_PREFIX", "").strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix
    return prefix


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX", 5))


def db_command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def init_schema_on_startup() -> bool:
    return _env_bool("DB_INIT_SCHEMA", True)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "info").strip().lower() or "info"
