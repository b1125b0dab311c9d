"""Flask application factory."""

import os

from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from bloomwell.config import config

db = SQLAlchemy()


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    # Initialize extensions
    from bloomwell.extensions import init_sentry, limiter

    db.init_app(app)
    limiter.init_app(app)
    init_sentry(app)

    # CORS
    CORS(app, origins=app.config["CORS_ORIGINS"], supports_credentials=True)

    from bloomwell.logging_config import setup_logging

    setup_logging(app)

    # Register blueprints
    from bloomwell.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api/v1")

    from bloomwell.api.errors import register_error_handlers

    register_error_handlers(app)

    from bloomwell import cli

    cli.init_app(app)

    # Health check endpoint
    @app.route("/health")
    @limiter.exempt
    def health():
        return {"status": "ok"}

    # Shell context
    @app.shell_context_processor
    def make_shell_context():
        from bloomwell.models import HabitRecord, MoodRecord, StudyRecord

        return {
            "db": db,
            "MoodRecord": MoodRecord,
            "HabitRecord": HabitRecord,
            "StudyRecord": StudyRecord,
        }

    return app
