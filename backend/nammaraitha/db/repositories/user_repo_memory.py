"""In-process User repository, keyed by email. Used for local runs and tests."""
from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Optional

from ...domain.user import User
from ...errors import DuplicateEmailError


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._rows: Dict[str, User] = {}
        self._lock = threading.Lock()

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return email in self._rows

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            row = self._rows.get(email)
        return replace(row) if row else None

    def count(self) -> int:
        with self._lock:
            return len(self._rows)

    def save(self, user: User) -> User:
        stored = replace(
            user,
            id=user.id or str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            if user.email in self._rows:
                raise DuplicateEmailError(user.email)
            self._rows[user.email] = stored
        return replace(stored)
