"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta

import pytest

from app import create_app
from models import db
from sessions import InMemorySessionStore


class FakeClock:
    """Settable stand-in for datetime.now."""

    def __init__(self, start=None):
        self.now = start or datetime(2025, 1, 1, 12, 0, 0)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def frontend_dir(tmp_path):
    """Frontend directory with an entry document and one asset."""
    directory = tmp_path / "frontend"
    directory.mkdir()
    (directory / "index.html").write_text("<html><body>job board</body></html>")
    (directory / "app.js").write_text("console.log('job board');")
    return directory


@pytest.fixture
def app(tmp_path, frontend_dir, clock):
    """App on a fresh SQLite file with an in-memory session store."""
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test.db'}",
            "FRONTEND_DIR": str(frontend_dir),
            "SECRET_KEY": "test-secret",
        },
        session_store=InMemorySessionStore(clock=clock),
    )
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def app_ctx(app):
    """Push an app context so services can be called directly."""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def alice():
    return {"name": "Alice", "email": "a@x.com", "password": "pw123"}


@pytest.fixture
def sample_job():
    return {
        "title": "Eng",
        "company": "Acme",
        "location": "NYC",
        "description": "Build things",
    }


@pytest.fixture
def auth_client(client, alice):
    """Test client holding a logged-in session for Alice."""
    response = client.post("/api/register", json=alice)
    assert response.status_code == 201
    response = client.post("/api/login", json={"email": alice["email"], "password": alice["password"]})
    assert response.status_code == 200
    return client
