"""Relational submission store backed by SQLAlchemy."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import contextmanager
from typing import Iterator, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from latexfree.db import repo
from latexfree.db.session import session_scope
from latexfree.errors import NotFoundError, PersistenceError
from latexfree.models.domain import SubmissionEntity
from latexfree.store.base import (
    SubmissionChanges,
    SubmissionInput,
    SubmissionStore,
    apply_changes,
    build_submission,
    parse_glove_type,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlSubmissionStore(SubmissionStore):
    """Submission store over a SQLAlchemy session factory.

    Each operation runs in its own session and transaction; write
    conflicts are serialized by the database.
    """

    def __init__(self, session_factory: sessionmaker[Session] | Callable[[], Session]):
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with session_scope(self._session_factory) as session:
                yield session
        except SQLAlchemyError as e:
            logger.exception("Database operation failed")
            raise PersistenceError("Failed to access submission storage.") from e

    def _read(self, fn: Callable[[Session], T]) -> T:
        with self._session() as session:
            return fn(session)

    def create(self, submission_input: SubmissionInput) -> SubmissionEntity:
        entity = build_submission(submission_input)
        with self._session() as session:
            repo.create_submission(session, entity)
        logger.info(
            f"Created submission {entity.id} for place {entity.place_id} ({entity.glove_type.value})"
        )
        return entity

    def list_all(self) -> list[SubmissionEntity]:
        return self._read(repo.list_submissions)

    def list_by_place(self, place_id: str) -> list[SubmissionEntity]:
        return self._read(lambda s: repo.list_submissions_for_place(s, place_id))

    def get_by_id(self, submission_id: str) -> SubmissionEntity:
        entity = self._read(lambda s: repo.get_submission(s, submission_id))
        if entity is None:
            raise NotFoundError(f"Submission not found: {submission_id}")
        return entity

    def update(self, submission_id: str, changes: SubmissionChanges) -> SubmissionEntity:
        parse_glove_type(changes.glove_type)

        with self._session() as session:
            existing = repo.get_submission(session, submission_id)
            if existing is None:
                raise NotFoundError(f"Submission not found: {submission_id}")

            updated = apply_changes(existing, changes)
            repo.update_submission(
                session,
                submission_id,
                glove_type=updated.glove_type,
                notes=updated.notes,
                submitted_by=updated.submitted_by,
                updated_at=updated.updated_at,
            )

        logger.info(f"Updated submission {submission_id} ({updated.glove_type.value})")
        return updated

    def delete(self, submission_id: str) -> str:
        with self._session() as session:
            if not repo.delete_submission(session, submission_id):
                raise NotFoundError(f"Submission not found: {submission_id}")

        logger.info(f"Deleted submission {submission_id}")
        return submission_id
