"""Glove report aggregation.

Computes the latest report and per-type counts for each place.
All functions here are pure: no storage or network access, and inputs
are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from latexfree.models.domain import GloveInfo, GloveType, Restaurant, SubmissionEntity


@dataclass
class _PlaceTally:
    """Running state for one place while scanning submissions."""

    latest: SubmissionEntity
    counts: dict[GloveType, int] = field(default_factory=dict)
    total: int = 0


def _is_newer(candidate: SubmissionEntity, current: SubmissionEntity) -> bool:
    """Whether candidate replaces current as the latest submission.

    Equal created_at instants are resolved by the greater ID.
    """
    if candidate.created_at != current.created_at:
        return candidate.created_at > current.created_at
    return candidate.id > current.id


def _tally(submissions: Iterable[SubmissionEntity]) -> dict[str, _PlaceTally]:
    tallies: dict[str, _PlaceTally] = {}

    for submission in submissions:
        tally = tallies.get(submission.place_id)
        if tally is None:
            tally = _PlaceTally(latest=submission)
            tallies[submission.place_id] = tally
        elif _is_newer(submission, tally.latest):
            tally.latest = submission

        tally.counts[submission.glove_type] = tally.counts.get(submission.glove_type, 0) + 1
        tally.total += 1

    return tallies


def _to_glove_info(tally: _PlaceTally) -> GloveInfo:
    return GloveInfo(
        latest_glove_type=tally.latest.glove_type,
        latest_notes=tally.latest.notes,
        latest_submitted_at=tally.latest.created_at,
        submission_count=tally.total,
        glove_type_counts=dict(tally.counts),
    )


def aggregate_glove_info(submissions: Iterable[SubmissionEntity]) -> dict[str, GloveInfo]:
    """Collapse submissions into one GloveInfo per place.

    Single pass: groups by place_id, keeps a running maximum by
    created_at (ties go to the greater ID) and counts glove types.
    Only glove types that occur appear in glove_type_counts.

    Args:
        submissions: Submissions in any order.

    Returns:
        Mapping of place_id to GloveInfo. Empty for empty input.
    """
    return {place_id: _to_glove_info(tally) for place_id, tally in _tally(submissions).items()}


def merge_glove_info(
    restaurants: Iterable[Restaurant],
    glove_info: dict[str, GloveInfo],
) -> list[Restaurant]:
    """Attach GloveInfo to each restaurant by place_id (left join).

    Restaurants without reports get glove_info=None. Places that have
    reports but no matching restaurant are dropped. Returns new
    Restaurant objects in input order.
    """
    return [replace(r, glove_info=glove_info.get(r.place_id)) for r in restaurants]


def reported_restaurants(submissions: Iterable[SubmissionEntity]) -> list[Restaurant]:
    """Build restaurants purely from submission groups.

    Name and address come from each place's latest submission; rating
    is unknown. Ordered by latest report, most recent first.
    """
    ordered = sorted(
        _tally(submissions).items(),
        key=lambda item: (item[1].latest.created_at, item[1].latest.id),
        reverse=True,
    )
    return [
        Restaurant(
            place_id=place_id,
            name=tally.latest.restaurant_name,
            formatted_address=tally.latest.address,
            rating=None,
            glove_info=_to_glove_info(tally),
        )
        for place_id, tally in ordered
    ]
