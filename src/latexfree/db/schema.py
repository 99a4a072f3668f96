"""Database schema for Latex Free Eats.

One table keyed by submission ID, with a CHECK constraint that keeps
glove_type inside the closed enumeration.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from latexfree.models.domain import ANONYMOUS, GloveType

_GLOVE_TYPE_SQL = ", ".join(f"'{value}'" for value in GloveType.values())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Submission(Base):
    """A single glove report for a place.

    Invariant: glove_type IN (vinyl, nitrile, latex, none)
    """

    __tablename__ = "submissions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    place_id: Mapped[str] = mapped_column(String(256), nullable=False)
    restaurant_name: Mapped[str] = mapped_column(String(512), nullable=False)
    address: Mapped[str] = mapped_column(String(1024), nullable=False)
    glove_type: Mapped[str] = mapped_column(String(16), nullable=False)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    submitted_by: Mapped[str] = mapped_column(String(256), nullable=False, default=ANONYMOUS)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )

    __table_args__ = (
        CheckConstraint(f"glove_type IN ({_GLOVE_TYPE_SQL})", name="ck_submission_glove_type"),
        Index("ix_submissions_place_id", "place_id"),
    )
