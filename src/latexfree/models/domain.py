"""Domain models for Latex Free Eats.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and pydantic and are used
by the stores, the aggregator and the api layer alike.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

ANONYMOUS = "anonymous"


# ============================================================================
# Glove Types
# ============================================================================


class GloveType(str, Enum):
    """Kind of glove reported in use in a kitchen."""

    VINYL = "vinyl"
    NITRILE = "nitrile"
    LATEX = "latex"
    NONE = "none"

    @classmethod
    def values(cls) -> list[str]:
        """Allowed raw values, in declaration order."""
        return [member.value for member in cls]


# ============================================================================
# Submission Domain
# ============================================================================


@dataclass
class SubmissionEntity:
    """Domain model for a single glove report."""

    id: str
    place_id: str
    restaurant_name: str
    address: str
    glove_type: GloveType
    created_at: datetime
    updated_at: datetime
    notes: str = ""
    submitted_by: str = ANONYMOUS


# ============================================================================
# Aggregation Domain
# ============================================================================


@dataclass
class GloveInfo:
    """Per-place summary derived from all of its submissions."""

    latest_glove_type: GloveType
    latest_notes: str
    latest_submitted_at: datetime
    submission_count: int
    glove_type_counts: dict[GloveType, int] = field(default_factory=dict)


@dataclass
class Restaurant:
    """A place as returned by the lookup, optionally with glove info attached."""

    place_id: str
    name: str
    formatted_address: str
    rating: float | None = None
    glove_info: GloveInfo | None = None
