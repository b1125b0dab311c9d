"""Flask extensions initialization."""

import os

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Rate limiter; limits and storage come from RATELIMIT_* config keys
limiter = Limiter(key_func=get_remote_address)


def init_sentry(app):
    """Initialize Sentry error tracking."""
    sentry_dsn = app.config.get("SENTRY_DSN")
    if sentry_dsn:
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration
        from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FlaskIntegration(),
                SqlalchemyIntegration(),
            ],
            traces_sample_rate=0.1,
            environment=os.environ.get("FLASK_ENV", "production"),
            send_default_pii=False,  # Wellness data stays out of Sentry
        )
        app.logger.info("Sentry initialized successfully")
    elif not app.testing:
        app.logger.warning("SENTRY_DSN not set, error tracking disabled")
