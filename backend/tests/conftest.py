from __future__ import annotations

import pytest

from nammaraitha import create_app
from nammaraitha.config import TestConfig
from nammaraitha.db.repositories.user_repo import UserRepository
from nammaraitha.db.session import db
from nammaraitha.domain.user import User
from nammaraitha.errors import PersistenceError


class FailingStore:
    """Store whose lookups succeed but every write fails."""

    def __init__(self, message: str = "connection refused") -> None:
        self.message = message
        self.writes = 0

    def exists_by_email(self, email: str) -> bool:
        return False

    def get_by_email(self, email: str):
        return None

    def count(self) -> int:
        return 0

    def save(self, user: User) -> User:
        self.writes += 1
        raise PersistenceError(self.message)


@pytest.fixture()
def app():
    app = create_app(TestConfig())
    with app.app_context():
        yield app


@pytest.fixture()
def memory_app():
    return create_app(TestConfig(USER_REPO_BACKEND="memory"))


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def sql_repo(app):
    return UserRepository(db.Session())


@pytest.fixture()
def failing_store():
    return FailingStore()
