"""Domain dataclass for User entities (DB-agnostic)."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol


@dataclass(slots=True)
class User:
    name: str
    email: str
    role: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None


class UserStore(Protocol):
    """What the registration service needs from a persistence backend.

    ``save`` raises ``PersistenceError`` on failure and ``DuplicateEmailError``
    when the backend itself rejects the email as already taken.
    """

    def exists_by_email(self, email: str) -> bool: ...

    def save(self, user: User) -> User: ...

    def get_by_email(self, email: str) -> Optional[User]: ...

    def count(self) -> int: ...
