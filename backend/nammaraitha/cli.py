"""Register a user from the command line against the configured store.

Usage:
    nammaraitha-register --name "Asha" --email asha@example.com [--role farmer]

Settings come from the environment and from a ``.env`` file in the current
directory. Prints the outcome as a single line and exits 0 only when the user
was registered.
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from . import create_app
from .config import BaseConfig
from .db.repositories.factory import user_repo
from .db.session import db
from .domain.outcome import Accepted, describe
from .domain.user import User
from .services.user_service import RegistrationService


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Register a NammaRaitha user.")
    ap.add_argument("--name", required=True, help="Display name")
    ap.add_argument("--email", required=True, help="Email; must not be registered yet")
    ap.add_argument("--role", help="Optional role, e.g. farmer or retailer")
    args = ap.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    app = create_app(BaseConfig())
    with app.app_context():
        session = db.Session() if db.Session is not None else None
        outcome = RegistrationService(user_repo(session)).register(
            User(name=args.name, email=args.email, role=args.role)
        )

    message = describe(outcome)
    if isinstance(outcome, Accepted):
        print(message)
        return 0
    print(message, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
