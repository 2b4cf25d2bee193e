"""Create all tables for a quick dev setup (NOT for production)."""
from __future__ import annotations

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))

from nammaraitha import create_app  # noqa: E402
from nammaraitha.db.session import db  # noqa: E402


def main() -> None:
    app = create_app()
    with app.app_context():
        db.create_all()
        print(f"Tables created at {app.config['DATABASE_URL']}.")


if __name__ == "__main__":
    main()
