"""Pydantic models for the Latex Free Eats API.

Wire names are camelCase for submissions and glove info, and
snake_case for restaurant fields coming from the place lookup.
Request models accept raw values; the submission store decides
whether they are valid.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from latexfree.models.domain import GloveInfo, GloveType, Restaurant, SubmissionEntity


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmissionCreate(_CamelModel):
    """Body of POST /api/submissions."""

    place_id: str | None = None
    restaurant_name: str | None = None
    address: str | None = None
    glove_type: str | None = None
    notes: str | None = None
    submitted_by: str | None = None


class SubmissionUpdate(_CamelModel):
    """Body of PUT /api/submissions/{id}."""

    glove_type: str | None = None
    notes: str | None = None
    submitted_by: str | None = None


class SubmissionDetail(_CamelModel):
    """A stored submission."""

    id: str
    place_id: str
    restaurant_name: str
    address: str
    glove_type: GloveType
    notes: str
    submitted_by: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: SubmissionEntity) -> SubmissionDetail:
        return cls(
            id=entity.id,
            place_id=entity.place_id,
            restaurant_name=entity.restaurant_name,
            address=entity.address,
            glove_type=entity.glove_type,
            notes=entity.notes,
            submitted_by=entity.submitted_by,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class GloveInfoDetail(_CamelModel):
    """Per-place glove summary."""

    latest_glove_type: GloveType
    latest_notes: str
    latest_submitted_at: datetime
    submission_count: int
    glove_type_counts: dict[str, int]

    @classmethod
    def from_domain(cls, info: GloveInfo) -> GloveInfoDetail:
        return cls(
            latest_glove_type=info.latest_glove_type,
            latest_notes=info.latest_notes,
            latest_submitted_at=info.latest_submitted_at,
            submission_count=info.submission_count,
            glove_type_counts={t.value: n for t, n in info.glove_type_counts.items()},
        )


class RestaurantDetail(BaseModel):
    """A restaurant with its glove summary, or null when unreported."""

    model_config = ConfigDict(populate_by_name=True)

    place_id: str
    name: str
    formatted_address: str
    rating: float | None
    glove_info: GloveInfoDetail | None = Field(default=None, alias="gloveInfo")

    @classmethod
    def from_domain(cls, restaurant: Restaurant) -> RestaurantDetail:
        return cls(
            place_id=restaurant.place_id,
            name=restaurant.name,
            formatted_address=restaurant.formatted_address,
            rating=restaurant.rating,
            glove_info=(
                GloveInfoDetail.from_domain(restaurant.glove_info)
                if restaurant.glove_info
                else None
            ),
        )


class RestaurantsResponse(_CamelModel):
    """Response for GET /api/restaurants."""

    source: Literal["google_places_api", "sample_data_no_api_key"]
    google_api_configured: bool
    restaurants: list[RestaurantDetail]


class ReportedRestaurantsResponse(BaseModel):
    """Response for GET /api/reported-restaurants."""

    restaurants: list[RestaurantDetail]


class SubmissionsResponse(BaseModel):
    """Response for GET /api/submissions."""

    submissions: list[SubmissionDetail]


class SubmissionResponse(BaseModel):
    """Response wrapping a single submission."""

    submission: SubmissionDetail


class SubmissionSavedResponse(BaseModel):
    """Response for create and update."""

    message: str
    submission: SubmissionDetail


class SubmissionDeletedResponse(BaseModel):
    """Response for DELETE /api/submissions/{id}."""

    message: str
    id: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
