"""Builds a minimal OpenAPI spec from existing Pydantic schemas."""
from __future__ import annotations

from typing import Any, Dict

from flask import request

from ..api.users.schemas import SignupIn, SignupOut

_REF = "#/components/schemas/{model}"


def _schemas() -> Dict[str, Any]:
    return {
        "SignupIn": SignupIn.model_json_schema(ref_template=_REF),
        "SignupOut": SignupOut.model_json_schema(ref_template=_REF),
    }


def _signup_response(description: str) -> Dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/SignupOut"}}},
    }


def build_openapi() -> Dict[str, Any]:
    base_url = f"{request.scheme}://{request.host}"
    return {
        "openapi": "3.0.3",
        "info": {"title": "NammaRaitha API", "version": "0.1.0"},
        "servers": [{"url": base_url}],
        "tags": [{"name": "Health"}, {"name": "Users"}],
        "paths": {
            "/": {
                "get": {
                    "tags": ["Health"],
                    "summary": "Service banner",
                    "responses": {"200": {"description": "Plain-text status line"}},
                }
            },
            "/api/health/": {
                "get": {"tags": ["Health"], "summary": "Liveness probe", "responses": {"200": {"description": "OK"}}}
            },
            "/api/health/db": {
                "get": {
                    "tags": ["Health"],
                    "summary": "User store readiness",
                    "responses": {"200": {"description": "Store reachable"}, "503": {"description": "Store failing"}},
                }
            },
            "/api/users/signup": {
                "post": {
                    "tags": ["Users"],
                    "summary": "Register a user (email must be unused)",
                    "requestBody": {
                        "required": True,
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/SignupIn"}}},
                    },
                    "responses": {
                        "200": _signup_response("Signup successful"),
                        "400": _signup_response("Email already exists"),
                        "422": {"description": "Body does not match SignupIn"},
                        "500": _signup_response("Store failure"),
                    },
                }
            },
        },
        "components": {"schemas": _schemas()},
    }
