"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
Callers own the transaction: nothing here commits.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.orm import Session

from latexfree.db.schema import Submission
from latexfree.models.domain import GloveType, SubmissionEntity


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back out
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _submission_to_entity(row: Submission) -> SubmissionEntity:
    """Convert SQLAlchemy Submission to domain entity."""
    return SubmissionEntity(
        id=row.id,
        place_id=row.place_id,
        restaurant_name=row.restaurant_name,
        address=row.address,
        glove_type=GloveType(row.glove_type),
        notes=row.notes,
        submitted_by=row.submitted_by,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


# ============================================================================
# Submission Repository
# ============================================================================


def _newest_first(query):
    return query.order_by(Submission.created_at.desc(), Submission.id.desc())


def list_submissions(session: Session) -> list[SubmissionEntity]:
    """Get all submissions, most recent first."""
    rows = _newest_first(session.query(Submission)).all()
    return [_submission_to_entity(r) for r in rows]


def list_submissions_for_place(session: Session, place_id: str) -> list[SubmissionEntity]:
    """Get submissions for one place, most recent first."""
    rows = _newest_first(session.query(Submission).filter(Submission.place_id == place_id)).all()
    return [_submission_to_entity(r) for r in rows]


def get_submission(session: Session, submission_id: str) -> SubmissionEntity | None:
    """Get submission by ID."""
    row = session.query(Submission).filter(Submission.id == submission_id).first()
    return _submission_to_entity(row) if row else None


def create_submission(session: Session, entity: SubmissionEntity) -> SubmissionEntity:
    """Create a new submission."""
    row = Submission(
        id=entity.id,
        place_id=entity.place_id,
        restaurant_name=entity.restaurant_name,
        address=entity.address,
        glove_type=entity.glove_type.value,
        notes=entity.notes,
        submitted_by=entity.submitted_by,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
    session.add(row)
    return entity


def update_submission(
    session: Session,
    submission_id: str,
    *,
    glove_type: GloveType,
    notes: str,
    submitted_by: str,
    updated_at: datetime,
) -> SubmissionEntity | None:
    """Update the mutable fields of a submission.

    Returns None when no row has the given ID.
    """
    row = session.query(Submission).filter(Submission.id == submission_id).first()
    if row is None:
        return None
    row.glove_type = glove_type.value
    row.notes = notes
    row.submitted_by = submitted_by
    row.updated_at = updated_at
    session.flush()
    return _submission_to_entity(row)


def delete_submission(session: Session, submission_id: str) -> bool:
    """Delete a submission. Returns False when no row has the given ID."""
    deleted = session.query(Submission).filter(Submission.id == submission_id).delete()
    return deleted > 0

