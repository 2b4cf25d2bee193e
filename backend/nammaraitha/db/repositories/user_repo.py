"""SQLAlchemy-backed User repository returning dataclasses."""
from __future__ import annotations

import uuid
from typing import Optional

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.user import UserModel
from ...domain.user import User
from ...errors import DuplicateEmailError, PersistenceError


def _to_dc(m: UserModel) -> User:
    return User(
        id=m.id,
        name=m.name,
        email=m.email,
        role=m.role,
        created_at=m.created_at,
    )


def _is_email_conflict(err: IntegrityError) -> bool:
    # sqlite: "UNIQUE constraint failed: users.email"
    # postgres: 'duplicate key value violates unique constraint "users_email_key"'
    text = str(err.orig).lower()
    return "email" in text and ("unique" in text or "duplicate" in text)


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email).limit(1)
        try:
            return self.session.scalars(stmt).first() is not None
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning("users lookup failed: {}", e)
            raise PersistenceError(str(e)) from e

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email).limit(1)
        try:
            m = self.session.scalars(stmt).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceError(str(e)) from e
        return _to_dc(m) if m else None

    def count(self) -> int:
        try:
            return self.session.scalar(select(func.count()).select_from(UserModel)) or 0
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceError(str(e)) from e

    def save(self, user: User) -> User:
        m = UserModel(
            id=user.id or str(uuid.uuid4()),
            name=user.name,
            email=user.email,
            role=user.role,
        )
        self.session.add(m)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if _is_email_conflict(e):
                raise DuplicateEmailError(user.email) from e
            logger.warning("users insert rejected: {}", e.orig)
            raise PersistenceError(str(e.orig)) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning("users insert failed: {}", e)
            raise PersistenceError(str(e)) from e
        try:
            self.session.refresh(m)
        except SQLAlchemyError as e:
            logger.warning("users reload after insert failed: {}", e)
            raise PersistenceError(str(e)) from e
        return _to_dc(m)
