"""Supabase-backed User repository using supabase-py v2.

Writes to the same ``profiles`` table the mobile client uses, so the email
column there must carry a unique constraint for duplicate detection on write.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

import httpx
from loguru import logger
from postgrest.exceptions import APIError
from supabase import Client

from ...domain.user import User
from ...errors import DuplicateEmailError, PersistenceError

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def _parse_ts(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def _row_to_dc(row: Dict[str, Any]) -> User:
    return User(
        id=str(row.get("id")) if row.get("id") is not None else None,
        name=row.get("name") or "",
        email=row.get("email", ""),
        role=row.get("role"),
        created_at=_parse_ts(row.get("created_at")),
    )


class UserRepositorySupabase:
    def __init__(self, client: Client, table: str = "profiles") -> None:
        self.client = client
        self.table = client.table(table)

    def exists_by_email(self, email: str) -> bool:
        try:
            res = self.table.select("id").eq("email", email).limit(1).execute()
        except (APIError, httpx.HTTPError) as e:
            logger.warning("supabase lookup failed: {}", e)
            raise PersistenceError(str(e)) from e
        return bool(res.data)

    def get_by_email(self, email: str) -> Optional[User]:
        try:
            res = self.table.select("*").eq("email", email).limit(1).execute()
        except (APIError, httpx.HTTPError) as e:
            raise PersistenceError(str(e)) from e
        rows = res.data or []
        return _row_to_dc(rows[0]) if rows else None

    def count(self) -> int:
        try:
            res = self.table.select("id", count="exact").execute()
        except (APIError, httpx.HTTPError) as e:
            raise PersistenceError(str(e)) from e
        return res.count or 0

    def save(self, user: User) -> User:
        payload = {
            "id": user.id or str(uuid.uuid4()),
            "name": user.name,
            "email": user.email,
            "role": user.role,
        }
        try:
            res = self.table.insert(payload).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateEmailError(user.email) from e
            logger.warning("supabase insert rejected: {}", e.message)
            raise PersistenceError(e.message or str(e)) from e
        except httpx.HTTPError as e:
            logger.warning("supabase insert failed: {}", e)
            raise PersistenceError(str(e)) from e
        rows = res.data or [payload]
        return _row_to_dc(rows[0])
