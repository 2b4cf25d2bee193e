"""SQLAlchemy engine/session initialization and lifecycle management."""
from __future__ import annotations

from typing import Any

from flask import Flask
from sqlalchemy import create_engine
from sqlalchemy.orm import scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

_MEMORY_SQLITE = {"sqlite://", "sqlite:///:memory:"}


def _engine_options(app: Flask, url: str) -> dict[str, Any]:
    options: dict[str, Any] = {
        "echo": app.config.get("SQL_ECHO", False),
        "pool_pre_ping": True,
        "future": True,
    }
    if url.startswith("sqlite"):
        # SQLite has no server pool; an in-memory database must live on one connection.
        options["connect_args"] = {"check_same_thread": False}
        if url in _MEMORY_SQLITE:
            options["poolclass"] = StaticPool
    else:
        options["pool_size"] = app.config.get("POOL_SIZE", 10)
        options["max_overflow"] = app.config.get("MAX_OVERFLOW", 20)
    return options


class Database:
    def __init__(self) -> None:
        self.engine = None
        self.Session = None  # type: ignore[assignment]

    def init_app(self, app: Flask) -> None:
        url: str = app.config["DATABASE_URL"]
        self.engine = create_engine(url, **_engine_options(app, url))
        self.Session = scoped_session(
            sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False, future=True)
        )

        @app.teardown_appcontext
        def remove_session(_: object | None) -> None:
            if self.Session is not None:
                self.Session.remove()

    def create_all(self) -> None:
        from .base import Base
        from .models import user  # noqa: F401

        assert self.engine is not None, "DB engine is not initialized"
        Base.metadata.create_all(self.engine)


db = Database()
