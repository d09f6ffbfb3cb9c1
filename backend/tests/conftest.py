"""
Shared fixtures: in-memory SQLite shared by the app and the tests, fresh tables per test.
DATABASE_URL is set before qbank is imported so the engine binds to memory, not a dev file.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SEED_CATEGORIES", "true")

import pytest

from qbank.database import Base, SessionLocal, engine, init_db


def _reset_db():
    """Drop and recreate all tables, then seed HTML, CSS, JavaScript (ids 1-3)."""
    import qbank.models  # noqa: F401
    Base.metadata.drop_all(bind=engine)
    init_db()


@pytest.fixture
def db():
    """Session on freshly seeded tables."""
    _reset_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    """TestClient on freshly seeded tables."""
    from fastapi.testclient import TestClient
    from qbank.main import app

    _reset_db()
    with TestClient(app) as c:
        yield c
