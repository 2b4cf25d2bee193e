from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from nammaraitha.db.repositories.user_repo_memory import InMemoryUserRepository
from nammaraitha.domain.outcome import Failed
from nammaraitha.domain.user import User
from nammaraitha.errors import PersistenceError
from nammaraitha.services.user_service import RegistrationService


def _dropped(*args, **kwargs):
    raise OperationalError("SELECT users", {}, Exception("server closed the connection unexpectedly"))


def test_reload_failure_after_insert_is_failed(sql_repo, monkeypatch):
    monkeypatch.setattr(sql_repo.session, "refresh", _dropped)

    outcome = RegistrationService(sql_repo).register(User(name="Asha", email="asha@example.com"))

    assert isinstance(outcome, Failed)
    assert "server closed the connection" in outcome.detail


def test_sql_reads_wrap_driver_errors(sql_repo, monkeypatch):
    monkeypatch.setattr(sql_repo.session, "scalars", _dropped)
    monkeypatch.setattr(sql_repo.session, "scalar", _dropped)

    with pytest.raises(PersistenceError, match="server closed"):
        sql_repo.get_by_email("asha@example.com")
    with pytest.raises(PersistenceError, match="server closed"):
        sql_repo.count()


def test_memory_store_hands_out_copies():
    store = InMemoryUserRepository()
    saved = store.save(User(name="Asha", email="asha@example.com"))
    saved.email = "changed@example.com"

    fetched = store.get_by_email("asha@example.com")
    fetched.email = "other@example.com"
    fetched.name = "Other"

    again = store.get_by_email("asha@example.com")
    assert again.email == "asha@example.com"
    assert again.name == "Asha"
    assert store.exists_by_email("asha@example.com")
    assert not store.exists_by_email("changed@example.com")
    assert store.count() == 1
