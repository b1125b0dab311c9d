"""Application configuration."""

import os


class Config:
    """Base configuration."""

    # Flask
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///bloomwell.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
    }

    # Analytics window (days)
    DEFAULT_ANALYSIS_DAYS = int(os.environ.get("DEFAULT_ANALYSIS_DAYS", 30))
    MAX_ANALYSIS_DAYS = int(os.environ.get("MAX_ANALYSIS_DAYS", 365))

    # Where report exports land when no explicit path is given
    REPORT_EXPORT_DIR = os.environ.get("REPORT_EXPORT_DIR", "exports")

    # Rate limiting
    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "100 per 15 minutes")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")

    # Error tracking
    SENTRY_DSN = os.environ.get("SENTRY_DSN", "")

    # CORS
    CORS_ORIGINS = os.environ.get(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {}  # SQLite doesn't need pool settings
    RATELIMIT_ENABLED = False
    REPORT_EXPORT_DIR = "/tmp/bloomwell_test_exports"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
