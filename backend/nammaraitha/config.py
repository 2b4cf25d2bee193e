"""Application configuration objects.

Defaults are read from the environment when a config object is created, not
when this module is imported, so entry points can call ``load_dotenv`` first.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(name: str, default: str | None = None):
    return field(default_factory=lambda: os.getenv(name, default) or default)


def _flag(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default).lower() in {"1", "true", "yes"})


def _int(name: str, default: int):
    return field(default_factory=lambda: int(os.getenv(name, default)))


def _origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


@dataclass
class BaseConfig:
    # Database
    DATABASE_URL: str = _env("DATABASE_URL", "sqlite:///nammaraitha.db")
    SQL_ECHO: bool = _flag("SQL_ECHO", "false")
    POOL_SIZE: int = _int("POOL_SIZE", 10)
    MAX_OVERFLOW: int = _int("MAX_OVERFLOW", 20)
    CREATE_TABLES: bool = _flag("CREATE_TABLES", "true")

    # User store backend: sqlalchemy | supabase | memory
    USER_REPO_BACKEND: str = _env("USER_REPO_BACKEND", "sqlalchemy")

    # Supabase
    SUPABASE_URL: str | None = _env("SUPABASE_URL")
    SUPABASE_ANON_KEY: str | None = _env("SUPABASE_ANON_KEY")
    SUPABASE_SERVICE_ROLE_KEY: str | None = _env("SUPABASE_SERVICE_ROLE_KEY")
    SUPABASE_USERS_TABLE: str = _env("SUPABASE_USERS_TABLE", "profiles")

    # HTTP
    CORS_ORIGINS: list[str] = field(default_factory=_origins)

    # Logging
    LOG_LEVEL: str = _env("LOG_LEVEL", "INFO")
    LOG_FILE: str | None = _env("LOG_FILE")


@dataclass
class TestConfig(BaseConfig):
    __test__ = False  # not a pytest test class

    TESTING: bool = True
    DATABASE_URL: str = "sqlite://"
    USER_REPO_BACKEND: str = "sqlalchemy"
    CREATE_TABLES: bool = True
    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: str | None = None
