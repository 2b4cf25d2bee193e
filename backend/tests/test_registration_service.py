from __future__ import annotations

import pytest

from nammaraitha.db.repositories.user_repo_memory import InMemoryUserRepository
from nammaraitha.domain.outcome import DUPLICATE_EMAIL, Accepted, Failed, Rejected
from nammaraitha.domain.user import User
from nammaraitha.errors import PersistenceError
from nammaraitha.services.user_service import RegistrationService


@pytest.fixture(params=["memory", "sqlalchemy"])
def store(request):
    if request.param == "memory":
        return InMemoryUserRepository()
    return request.getfixturevalue("sql_repo")


def test_first_signup_is_accepted_and_stored(store):
    svc = RegistrationService(store)

    outcome = svc.register(User(name="Asha", email="asha@example.com"))

    assert isinstance(outcome, Accepted)
    assert outcome.name == "Asha"
    assert outcome.user_id
    assert store.count() == 1
    saved = store.get_by_email("asha@example.com")
    assert saved is not None and saved.name == "Asha" and saved.id == outcome.user_id


def test_duplicate_email_is_rejected_without_write(store):
    svc = RegistrationService(store)
    svc.register(User(name="Asha", email="asha@example.com"))

    outcome = svc.register(User(name="Other", email="asha@example.com"))

    assert outcome == Rejected(reason=DUPLICATE_EMAIL, email="asha@example.com")
    assert store.count() == 1
    assert store.get_by_email("asha@example.com").name == "Asha"


def test_same_candidate_twice_accepts_once(store):
    svc = RegistrationService(store)
    u = User(name="Ravi", email="ravi@example.com", role="farmer")

    first = svc.register(u)
    second = svc.register(u)

    assert isinstance(first, Accepted)
    assert isinstance(second, Rejected)
    assert store.count() == 1


def test_each_new_email_adds_exactly_one_record(store):
    svc = RegistrationService(store)
    for i in range(5):
        before = store.count()
        assert isinstance(svc.register(User(name=f"u{i}", email=f"u{i}@example.com")), Accepted)
        assert store.count() == before + 1


def test_emails_are_compared_exactly(store):
    svc = RegistrationService(store)
    svc.register(User(name="Asha", email="asha@example.com"))

    assert isinstance(svc.register(User(name="Asha", email="Asha@Example.com")), Accepted)
    assert store.count() == 2


def test_write_failure_returns_failed(failing_store):
    outcome = RegistrationService(failing_store).register(User(name="Asha", email="asha@example.com"))

    assert isinstance(outcome, Failed)
    assert outcome.detail == "connection refused"
    assert failing_store.writes == 1


def test_store_conflict_on_insert_counts_as_duplicate():
    # another request registered the email between lookup and insert
    class RacingStore(InMemoryUserRepository):
        def exists_by_email(self, email: str) -> bool:
            return False

    store = RacingStore()
    store.save(User(name="Winner", email="asha@example.com"))

    outcome = RegistrationService(store).register(User(name="Loser", email="asha@example.com"))

    assert outcome == Rejected(reason=DUPLICATE_EMAIL, email="asha@example.com")
    assert store.count() == 1


def test_sql_unique_index_resolves_race(sql_repo, monkeypatch):
    sql_repo.save(User(name="Winner", email="asha@example.com"))
    monkeypatch.setattr(sql_repo, "exists_by_email", lambda email: False)

    outcome = RegistrationService(sql_repo).register(User(name="Loser", email="asha@example.com"))

    assert isinstance(outcome, Rejected)
    assert sql_repo.count() == 1


def test_sql_constraint_violation_other_than_email_is_failed(sql_repo):
    outcome = RegistrationService(sql_repo).register(User(name=None, email="noname@example.com"))  # type: ignore[arg-type]

    assert isinstance(outcome, Failed)
    assert "not null" in outcome.detail.lower()
    assert sql_repo.count() == 0


def test_lookup_failure_returns_failed():
    class BrokenStore(InMemoryUserRepository):
        def exists_by_email(self, email: str) -> bool:
            raise PersistenceError("database is locked")

    outcome = RegistrationService(BrokenStore()).register(User(name="Asha", email="asha@example.com"))

    assert outcome == Failed(detail="database is locked")
