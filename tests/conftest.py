"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.test_constants import TEST_SECRET_KEY

# Force an in-memory SQLite DB when pytest runs; don't inherit from .env
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["PROMPT_SEED_ON_STARTUP"] = "false"
os.environ.setdefault("SECRET_KEY", TEST_SECRET_KEY)


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    from prompt_studio.main import app

    return TestClient(app)


@pytest.fixture
def db() -> Session:
    """Database session on a freshly created schema. Tables are dropped after each test."""
    import prompt_studio.models  # noqa: F401
    from prompt_studio.db import Base, engine

    Base.metadata.create_all(engine)
    session = Session(bind=engine)
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)


@pytest.fixture
def client_with_db(db: Session) -> TestClient:
    """TestClient with get_db overridden to use the test db session."""
    from prompt_studio.db.session import get_db
    from prompt_studio.main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    c = TestClient(app)
    yield c
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture(autouse=True)
def _clear_seed_loader_cache() -> None:
    """Clear lru_cache on the seed loader before and after each test.

    Tests point the loader at temporary seed directories; a cached pack from
    one test must not leak into the next.
    """
    from prompt_studio.prompts.loader import load_seed_pack

    load_seed_pack.cache_clear()
    yield
    load_seed_pack.cache_clear()
