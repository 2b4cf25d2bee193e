"""Root status route."""
from __future__ import annotations

from flask import Blueprint, Response

bp = Blueprint("default", __name__)

STATUS_TEXT = "🚀 NammaRaitha API is running!"


@bp.get("/")
def home() -> Response:
    return Response(STATUS_TEXT, mimetype="text/plain")
