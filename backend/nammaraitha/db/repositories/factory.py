"""Repository factory for User (sqlalchemy|supabase|memory)."""
from __future__ import annotations

from typing import Optional

from flask import current_app
from sqlalchemy.orm import Session

from .user_repo import UserRepository
from .user_repo_memory import InMemoryUserRepository
from .user_repo_supabase import UserRepositorySupabase
from ...domain.user import UserStore
from ...integrations.supabase_client import supabase_ext

MEMORY_STORE_KEY = "nammaraitha.memory_users"


def user_repo(session: Optional[Session] = None) -> UserStore:
    backend = (current_app.config.get("USER_REPO_BACKEND") or "sqlalchemy").lower()
    if backend == "memory":
        # one store per app so state survives across requests
        return current_app.extensions.setdefault(MEMORY_STORE_KEY, InMemoryUserRepository())
    if backend == "supabase":
        client = supabase_ext.client
        if client is None:
            raise RuntimeError("Supabase client is not initialized; set SUPABASE_URL and a key.")
        return UserRepositorySupabase(client, current_app.config.get("SUPABASE_USERS_TABLE", "profiles"))
    if backend != "sqlalchemy":
        raise RuntimeError(f"Unknown USER_REPO_BACKEND: {backend!r}")
    if session is None:
        raise RuntimeError("SQLAlchemy repo requires a session")
    return UserRepository(session)
