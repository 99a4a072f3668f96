"""Submission store contract and shared validation.

Both backends validate through the helpers here so that an invalid
glove type or a missing field is rejected before anything is persisted.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone

from latexfree.errors import ValidationError
from latexfree.models.domain import ANONYMOUS, GloveType, SubmissionEntity

REQUIRED_FIELDS_MESSAGE = "placeId, restaurantName, and address are required."
GLOVE_TYPE_MESSAGE = f"gloveType must be one of: {', '.join(GloveType.values())}"


@dataclass
class SubmissionInput:
    """Input for creating a submission."""

    place_id: str | None
    restaurant_name: str | None
    address: str | None
    glove_type: GloveType | str | None
    notes: str | None = None
    submitted_by: str | None = None


@dataclass
class SubmissionChanges:
    """Input for updating a submission.

    notes and submitted_by left as None keep their stored values.
    """

    glove_type: GloveType | str | None
    notes: str | None = None
    submitted_by: str | None = None


def parse_glove_type(value: GloveType | str | None) -> GloveType:
    """Coerce a raw value to GloveType.

    Raises:
        ValidationError: If value is not one of the allowed glove types.
    """
    if isinstance(value, GloveType):
        return value
    try:
        return GloveType(value)
    except ValueError as e:
        raise ValidationError(GLOVE_TYPE_MESSAGE) from e


def _is_blank(value: str | None) -> bool:
    return not isinstance(value, str) or not value.strip()


def build_submission(submission_input: SubmissionInput) -> SubmissionEntity:
    """Validate input and create a new entity with generated fields.

    Pure function - no storage access.

    Raises:
        ValidationError: If a required field is missing or glove_type is invalid.
    """
    if any(
        _is_blank(v)
        for v in (
            submission_input.place_id,
            submission_input.restaurant_name,
            submission_input.address,
        )
    ):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    glove_type = parse_glove_type(submission_input.glove_type)
    now = datetime.now(timezone.utc)

    return SubmissionEntity(
        id=str(uuid.uuid4()),
        place_id=submission_input.place_id,
        restaurant_name=submission_input.restaurant_name,
        address=submission_input.address,
        glove_type=glove_type,
        notes=submission_input.notes or "",
        submitted_by=(submission_input.submitted_by or "").strip() or ANONYMOUS,
        created_at=now,
        updated_at=now,
    )


def apply_changes(existing: SubmissionEntity, changes: SubmissionChanges) -> SubmissionEntity:
    """Return a copy of existing with changes applied and updated_at refreshed.

    Identifying fields (place_id, restaurant_name, address, created_at)
    are carried over untouched.

    Raises:
        ValidationError: If glove_type is invalid.
    """
    glove_type = parse_glove_type(changes.glove_type)
    submitted_by = existing.submitted_by
    if changes.submitted_by is not None:
        submitted_by = changes.submitted_by.strip() or ANONYMOUS

    return SubmissionEntity(
        id=existing.id,
        place_id=existing.place_id,
        restaurant_name=existing.restaurant_name,
        address=existing.address,
        glove_type=glove_type,
        notes=existing.notes if changes.notes is None else changes.notes,
        submitted_by=submitted_by,
        created_at=existing.created_at,
        updated_at=max(datetime.now(timezone.utc), existing.created_at),
    )


class SubmissionStore(ABC):
    """Abstract CRUD store for glove submissions.

    Listing methods return submissions ordered by created_at descending.
    """

    @abstractmethod
    def create(self, submission_input: SubmissionInput) -> SubmissionEntity:
        """Validate and persist a new submission.

        Raises:
            ValidationError: If a required field is missing or glove_type is invalid.
        """

    @abstractmethod
    def list_all(self) -> list[SubmissionEntity]:
        """All submissions, most recent first."""

    @abstractmethod
    def list_by_place(self, place_id: str) -> list[SubmissionEntity]:
        """Submissions for one place, most recent first."""

    @abstractmethod
    def get_by_id(self, submission_id: str) -> SubmissionEntity:
        """Fetch one submission.

        Raises:
            NotFoundError: If no submission has this ID.
        """

    @abstractmethod
    def update(self, submission_id: str, changes: SubmissionChanges) -> SubmissionEntity:
        """Change glove_type, notes and submitted_by of a submission.

        Raises:
            ValidationError: If glove_type is invalid.
            NotFoundError: If no submission has this ID.
        """

    @abstractmethod
    def delete(self, submission_id: str) -> str:
        """Remove a submission and return its ID.

        Raises:
            NotFoundError: If no submission has this ID.
        """
