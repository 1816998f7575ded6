"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from matching.scorer.service import ScoringService
from tests import TODAY, make_job, strong_candidate, weak_candidate


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def job():
    return make_job()


@pytest.fixture
def candidate_a():
    return strong_candidate()


@pytest.fixture
def candidate_b():
    return weak_candidate()


@pytest.fixture
def scoring_service():
    """Scoring service without a semantic scorer, pinned to TODAY."""
    return ScoringService(today=TODAY)


@pytest.fixture
def session_factory():
    """Session factory over a fresh in-memory SQLite database."""
    from database.models import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
