"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import os

from flask import Flask, jsonify
from flask.logging import default_handler

from .config import BASE_DIR
from .extensions import csrf_protect, db, login_manager, migrate
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure application logging unless handlers were attached already."""

    if app.logger.handlers and default_handler not in app.logger.handlers:
        return

    app.logger.removeHandler(default_handler)
    setup_logging(
        app.logger,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)
    csrf_protect.init_app(app)
    migrate.init_app(app, db, directory=os.path.join(BASE_DIR, "migrations"), render_as_batch=True)


def register_context_processors(app: Flask) -> None:
    """Register the session loader and global template context."""

    from ..modules.auth.guard import current_identity
    from ..modules.auth.services.session_guard import load_session_user

    login_manager.user_loader(load_session_user)

    @app.context_processor
    def inject_identity() -> dict[str, object]:
        # Views pass ``identity`` explicitly; this only backs shared layout pieces.
        return {"identity": current_identity(), "app_name": app.config.get("APP_NAME")}


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def register_health_check(app: Flask) -> None:
    @app.get("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "healthy", "app": app.config.get("APP_NAME")})


def register_cli(app: Flask) -> None:
    from .cli import sessions_cli, users_cli

    app.cli.add_command(users_cli)
    app.cli.add_command(sessions_cli)


def initialize_database(app: Flask) -> None:
    """Create any missing tables for the registered models."""

    from .. import models  # noqa: F401  (registers mappers)

    db.create_all()
    app.logger.debug("Database tables ensured at %s", app.config["SQLALCHEMY_DATABASE_URI"])
