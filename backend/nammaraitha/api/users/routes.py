"""Users blueprint: signup."""
from __future__ import annotations

from flask import Blueprint, request
from sqlalchemy.orm import Session

from ...db.repositories.factory import user_repo
from ...db.session import db
from ...domain.outcome import Accepted, Rejected
from ...errors import signup_response
from ...services.user_service import RegistrationService
from .schemas import SignupIn


bp = Blueprint("users", __name__)


def _service() -> RegistrationService:
    session: Session | None = db.Session() if db.Session is not None else None
    return RegistrationService(user_repo(session))


@bp.post("/signup")
def signup():
    payload = SignupIn.model_validate_json(request.get_data())
    outcome = _service().register(payload.to_user())
    if isinstance(outcome, Accepted):
        return signup_response(True, "Signup successful", 200)
    if isinstance(outcome, Rejected):
        return signup_response(False, "Email already exists", 400)
    return signup_response(False, "Signup failed", 500)
