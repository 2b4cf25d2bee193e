"""Health check endpoints."""
from __future__ import annotations

from flask import Blueprint, current_app

from ...db.repositories.factory import user_repo
from ...db.session import db
from ...errors import PersistenceError, ok


bp = Blueprint("health", __name__)


@bp.get("/")
def alive():
    return ok({"status": "ok"})


@bp.get("/db")
def store_status():
    backend = current_app.config.get("USER_REPO_BACKEND", "sqlalchemy")
    session = db.Session() if db.Session is not None else None
    try:
        user_repo(session).exists_by_email("healthcheck@nammaraitha.invalid")
    except (PersistenceError, RuntimeError) as e:
        return ok({"status": "error", "backend": backend, "detail": str(e)}, 503)
    return ok({"status": "ok", "backend": backend})
