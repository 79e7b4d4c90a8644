"""
config.py
---------
Central configuration module. Loads environment variables from the
.env file and exposes them as an immutable, typed configuration object.

The object is built once at process start (``AppConfig.from_env()``)
and passed explicitly into every component that needs it.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str) -> str:
    """Read an environment variable; unset or empty values fall back to the default."""
    return os.getenv(name) or default


# ── MySQL ─────────────────────────────────────────────────
@dataclass(frozen=True)
class StoreConfig:
    """Connection parameters for the relational store."""
    host: str = "mysql"
    dbname: str = "microservices_db"
    user: str = "app_user"
    password: str = "userpass"
    port: int = 3306
    connect_timeout: int = 5

    @classmethod
    def from_env(cls) -> "StoreConfig":
        return cls(
            host=_env("DB_HOST", cls.host),
            dbname=_env("DB_NAME", cls.dbname),
            user=_env("DB_USER", cls.user),
            password=_env("DB_PASSWORD", cls.password),
            port=int(_env("DB_PORT", str(cls.port))),
            connect_timeout=int(_env("DB_CONNECT_TIMEOUT", str(cls.connect_timeout))),
        )


# ── Services ──────────────────────────────────────────────
@dataclass(frozen=True)
class AppConfig:
    """
    Process-wide settings shared by the API and the frontend.

    Attributes:
        store: Store connection parameters (API side only).
        service_name: Identity reported in status envelopes.
        api_url: Base URL of the API service (frontend side).
        fetch_timeout: Seconds before a frontend GET to the API gives up.
        api_port: Listening port of the API process.
        frontend_port: Listening port of the frontend process.
        log_level: Root logging level name.
    """
    store: StoreConfig = field(default_factory=StoreConfig)
    service_name: str = "Python Microservice API"
    api_url: str = "http://api"
    fetch_timeout: float = 5.0
    api_port: int = 8000
    frontend_port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            store=StoreConfig.from_env(),
            service_name=_env("SERVICE_NAME", cls.service_name),
            api_url=_env("API_URL", cls.api_url).rstrip("/"),
            fetch_timeout=float(_env("API_FETCH_TIMEOUT", str(cls.fetch_timeout))),
            api_port=int(_env("API_PORT", str(cls.api_port))),
            frontend_port=int(_env("FRONTEND_PORT", str(cls.frontend_port))),
            log_level=_env("LOG_LEVEL", cls.log_level).upper(),
        )
