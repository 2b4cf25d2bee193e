"""Registration: duplicate-email check followed by a single write."""
from __future__ import annotations

from loguru import logger

from ..domain.outcome import DUPLICATE_EMAIL, Accepted, Failed, Outcome, Rejected
from ..domain.user import User, UserStore
from ..errors import DuplicateEmailError, PersistenceError


class RegistrationService:
    def __init__(self, store: UserStore) -> None:
        self.store = store

    def register(self, candidate: User) -> Outcome:
        """Persist ``candidate`` unless its email is already registered.

        The lookup and the insert are separate store calls. If a concurrent
        request wins the race, the store's own uniqueness check reports it on
        insert and the result is still ``Rejected``.
        """
        try:
            if self.store.exists_by_email(candidate.email):
                logger.info("signup rejected, email taken: {}", candidate.email)
                return Rejected(reason=DUPLICATE_EMAIL, email=candidate.email)
            saved = self.store.save(candidate)
        except DuplicateEmailError:
            logger.info("signup rejected on insert, email taken: {}", candidate.email)
            return Rejected(reason=DUPLICATE_EMAIL, email=candidate.email)
        except PersistenceError as e:
            detail = str(e) or e.__class__.__name__
            logger.error("signup failed for {}: {}", candidate.email, detail)
            return Failed(detail=detail)
        logger.info("user registered: {} <{}>", saved.name, saved.email)
        return Accepted(name=candidate.name, user_id=saved.id)
