"""API blueprints."""

from flask import Blueprint

api_bp = Blueprint("api", __name__)

from bloomwell.api import analytics, habits, mood, study  # noqa: E402, F401
