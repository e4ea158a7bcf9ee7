"""Shared fixtures.

Settings are pointed at an in-memory SQLite database before any application
module is imported, so no PostgreSQL server is needed to run the suite.
"""

import logging
import os
from unittest.mock import MagicMock

os.environ["DB_CONNECTION"] = "sqlite"
os.environ["DB_DATABASE"] = ":memory:"

import pytest  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

import app.models  # noqa: F401,E402
from app.core.database import Base, build_engine  # noqa: E402


@pytest.fixture
def engine():
    """In-memory SQLite engine with the schema created and dropped per test."""
    test_engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(test_engine)
    yield test_engine
    Base.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def mock_db():
    """Session double for verifying staging and commit calls."""
    return MagicMock(spec=Session)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=logging.Logger)
