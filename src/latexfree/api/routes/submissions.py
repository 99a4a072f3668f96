"""Submissions API endpoints.

GET    /api/submissions[?placeId=] - List submissions
GET    /api/submissions/{id}       - Get one submission
POST   /api/submissions            - Create a submission
PUT    /api/submissions/{id}       - Update glove type, notes, submitter
DELETE /api/submissions/{id}       - Delete a submission
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from latexfree.api.app import get_store
from latexfree.models.types import (
    SubmissionCreate,
    SubmissionDeletedResponse,
    SubmissionDetail,
    SubmissionResponse,
    SubmissionSavedResponse,
    SubmissionsResponse,
    SubmissionUpdate,
)
from latexfree.store import SubmissionChanges, SubmissionInput, SubmissionStore

router = APIRouter()


@router.get("/submissions", response_model=SubmissionsResponse)
def list_submissions(
    place_id: str | None = Query(default=None, alias="placeId"),
    store: SubmissionStore = Depends(get_store),
) -> SubmissionsResponse:
    """List submissions, most recent first, optionally for one place."""
    entities = store.list_by_place(place_id) if place_id else store.list_all()
    return SubmissionsResponse(submissions=[SubmissionDetail.from_entity(e) for e in entities])


@router.get("/submissions/{submission_id}", response_model=SubmissionResponse)
def get_submission(
    submission_id: str,
    store: SubmissionStore = Depends(get_store),
) -> SubmissionResponse:
    """Get one submission.

    Raises:
        NotFoundError: 404 if submission not found.
    """
    return SubmissionResponse(submission=SubmissionDetail.from_entity(store.get_by_id(submission_id)))


@router.post("/submissions", response_model=SubmissionSavedResponse, status_code=201)
def create_submission(
    body: SubmissionCreate,
    store: SubmissionStore = Depends(get_store),
) -> SubmissionSavedResponse:
    """Save a new glove report.

    Raises:
        ValidationError: 400 if a required field is missing or gloveType is invalid.
    """
    # Build typed input for store layer
    submission_input = SubmissionInput(
        place_id=body.place_id,
        restaurant_name=body.restaurant_name,
        address=body.address,
        glove_type=body.glove_type,
        notes=body.notes,
        submitted_by=body.submitted_by,
    )
    entity = store.create(submission_input)
    return SubmissionSavedResponse(
        message="Submission saved.",
        submission=SubmissionDetail.from_entity(entity),
    )


@router.put("/submissions/{submission_id}", response_model=SubmissionSavedResponse)
def update_submission(
    submission_id: str,
    body: SubmissionUpdate,
    store: SubmissionStore = Depends(get_store),
) -> SubmissionSavedResponse:
    """Change the glove type, notes or submitter of a report.

    Raises:
        ValidationError: 400 if gloveType is invalid.
        NotFoundError: 404 if submission not found.
    """
    changes = SubmissionChanges(
        glove_type=body.glove_type,
        notes=body.notes,
        submitted_by=body.submitted_by,
    )
    entity = store.update(submission_id, changes)
    return SubmissionSavedResponse(
        message="Submission updated.",
        submission=SubmissionDetail.from_entity(entity),
    )


@router.delete("/submissions/{submission_id}", response_model=SubmissionDeletedResponse)
def delete_submission(
    submission_id: str,
    store: SubmissionStore = Depends(get_store),
) -> SubmissionDeletedResponse:
    """Delete a report.

    Raises:
        NotFoundError: 404 if submission not found.
    """
    deleted_id = store.delete(submission_id)
    return SubmissionDeletedResponse(message="Submission deleted.", id=deleted_id)
