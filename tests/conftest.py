"""Pytest configuration and fixtures."""

import pytest

from bloomwell import create_app, db


@pytest.fixture
def app(tmp_path):
    """Create and configure a test application instance."""
    app = create_app("testing")
    app.config["REPORT_EXPORT_DIR"] = str(tmp_path / "exports")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Create a CLI test runner."""
    return app.test_cli_runner()
