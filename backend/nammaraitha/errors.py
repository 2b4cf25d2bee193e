"""Persistence exceptions, global HTTP error handling and JSON response helpers."""
from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from loguru import logger
from pydantic import ValidationError


class PersistenceError(Exception):
    """A user store could not complete a read or write."""


class DuplicateEmailError(PersistenceError):
    """The store refused a write because the email is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(f"email already exists: {email}")
        self.email = email


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def invalid_payload(err: ValidationError):
        return jsonify({"error": "unprocessable_entity", "message": str(err)}), 422

    @app.errorhandler(400)
    def bad_request(err: Exception):  # type: ignore[override]
        return jsonify({"error": "bad_request", "message": str(err)}), 400

    @app.errorhandler(404)
    def not_found(err: Exception):  # type: ignore[override]
        return jsonify({"error": "not_found", "message": str(err)}), 404

    @app.errorhandler(405)
    def method_not_allowed(err: Exception):  # type: ignore[override]
        return jsonify({"error": "method_not_allowed", "message": str(err)}), 405

    @app.errorhandler(422)
    def unprocessable(err: Exception):  # type: ignore[override]
        return jsonify({"error": "unprocessable_entity", "message": str(err)}), 422

    @app.errorhandler(500)
    def internal(err: Exception):  # type: ignore[override]
        logger.opt(exception=err).error("unhandled error")
        return jsonify({"error": "internal_server_error", "message": "unexpected error"}), 500


def ok(data: Any, status: int = 200):
    return jsonify({"data": data}), status


def signup_response(success: bool, message: str, status: int):
    return jsonify({"success": success, "message": message}), status
