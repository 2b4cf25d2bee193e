"""Application factory and blueprint registration."""
from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from .config import BaseConfig
from .db.session import db
from .api.default.routes import bp as default_bp
from .api.health.routes import bp as health_bp
from .api.users.routes import bp as users_bp
from .docs.routes import bp as docs_bp
from .errors import register_error_handlers
from .integrations.supabase_client import supabase_ext
from .logging_setup import setup_logging


def create_app(config: BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config or BaseConfig())
    setup_logging(app.config["LOG_LEVEL"], app.config.get("LOG_FILE"))

    CORS(app, origins=app.config["CORS_ORIGINS"])

    # Init extensions
    db.init_app(app)
    supabase_ext.init_app(app)
    if app.config.get("CREATE_TABLES") and app.config["USER_REPO_BACKEND"].lower() == "sqlalchemy":
        db.create_all()

    # Register blueprints
    app.register_blueprint(default_bp)
    app.register_blueprint(health_bp, url_prefix="/api/health")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(docs_bp)

    # Global error handlers
    register_error_handlers(app)
    return app
