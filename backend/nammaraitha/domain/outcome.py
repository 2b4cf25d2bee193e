"""Result of a registration attempt: Accepted, Rejected or Failed."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

DUPLICATE_EMAIL = "duplicate-email"


@dataclass(frozen=True, slots=True)
class Accepted:
    name: str
    user_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: str
    email: str = ""


@dataclass(frozen=True, slots=True)
class Failed:
    detail: str


Outcome = Union[Accepted, Rejected, Failed]


def describe(outcome: Outcome) -> str:
    """Human-readable one-liner for an outcome (used by the CLI helper)."""
    if isinstance(outcome, Accepted):
        return f"User registered successfully: {outcome.name}"
    if isinstance(outcome, Rejected):
        if outcome.reason == DUPLICATE_EMAIL:
            return f"User already exists with email: {outcome.email}"
        return f"User rejected: {outcome.reason}"
    return f"Failed to register user: {outcome.detail}"
