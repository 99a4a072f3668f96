"""Shared pytest fixtures for latexfree tests."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from latexfree.db.schema import Base
from latexfree.models.domain import GloveType, SubmissionEntity
from latexfree.store import JsonFileSubmissionStore, SqlSubmissionStore

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_submission(
    place_id: str,
    glove_type: GloveType | str,
    t: int = 0,
    *,
    submission_id: str | None = None,
    notes: str = "",
    restaurant_name: str | None = None,
    address: str | None = None,
) -> SubmissionEntity:
    """Build a submission created t minutes after BASE_TIME."""
    created_at = BASE_TIME + timedelta(minutes=t)
    return SubmissionEntity(
        id=submission_id or f"{place_id}-{t}",
        place_id=place_id,
        restaurant_name=restaurant_name or f"Restaurant {place_id}",
        address=address or f"{place_id} Street",
        glove_type=GloveType(glove_type),
        notes=notes,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def sql_store(engine):
    """Relational store over the in-memory engine."""
    return SqlSubmissionStore(sessionmaker(bind=engine, expire_on_commit=False))


@pytest.fixture
def json_store(tmp_path):
    """Flat-file store in a temporary directory."""
    return JsonFileSubmissionStore(tmp_path / "data" / "submissions.json")


@pytest.fixture(params=["sql", "json"])
def store(request):
    """Each store backend in turn."""
    return request.getfixturevalue(f"{request.param}_store")
