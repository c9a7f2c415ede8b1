# File: tests/conftest.py

import os

# Must be set before anything imports app.core.config
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models.base import Base
from app.models.local_auth import LocalAuthOptions
from app.models.user import User


@pytest.fixture
def db():
    """In-memory SQLite session with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    # Lowest bcrypt cost so the suite stays quick
    monkeypatch.setattr(User, "local_auth_options", LocalAuthOptions(rounds=4))


@pytest.fixture
def auth_options(monkeypatch):
    """Swap User's local auth options for the duration of a test."""

    def _set(**kwargs):
        kwargs.setdefault("rounds", 4)
        options = LocalAuthOptions(**kwargs)
        monkeypatch.setattr(User, "local_auth_options", options)
        return options

    return _set


@pytest.fixture
def make_user(db):
    def _make_user(username="alice", email="alice@example.com", password="s3cret"):
        return User.register(db, User(username=username, email=email), password)

    return _make_user
