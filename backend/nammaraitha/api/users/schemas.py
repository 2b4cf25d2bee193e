"""Pydantic request/response schemas for Users API."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ...domain.user import User


class SignupIn(BaseModel):
    # clients also send password/confirm fields; they are not stored
    model_config = ConfigDict(extra="ignore")

    name: str
    email: str
    role: str | None = None

    def to_user(self) -> User:
        return User(name=self.name, email=self.email, role=self.role)


class SignupOut(BaseModel):
    success: bool
    message: str
