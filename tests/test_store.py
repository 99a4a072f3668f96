"""Tests for the submission store contract.

Every test runs against both backends (relational and flat file).
"""

from datetime import datetime, timedelta, timezone

import pytest
from conftest import make_submission

from latexfree.errors import NotFoundError, ValidationError
from latexfree.models.domain import ANONYMOUS, GloveType
from latexfree.store import SubmissionChanges, SubmissionInput
from latexfree.store.base import apply_changes


def _input(**overrides) -> SubmissionInput:
    fields = {
        "place_id": "place-1",
        "restaurant_name": "Sample Deli",
        "address": "1 Main St, New York, NY",
        "glove_type": "nitrile",
    }
    fields.update(overrides)
    return SubmissionInput(**fields)


class TestCreate:
    """create() validation and generated fields."""

    def test_returns_generated_fields(self, store):
        """ID and timestamps are assigned; defaults are applied."""
        created = store.create(_input())

        assert created.id
        assert created.glove_type == GloveType.NITRILE
        assert created.notes == ""
        assert created.submitted_by == ANONYMOUS
        assert created.created_at == created.updated_at
        assert created.created_at.tzinfo is not None

    def test_ids_are_unique(self, store):
        """Two creates produce two different IDs."""
        assert store.create(_input()).id != store.create(_input()).id

    def test_accepts_enum_value(self, store):
        """GloveType members are accepted as well as raw strings."""
        assert store.create(_input(glove_type=GloveType.LATEX)).glove_type == GloveType.LATEX

    def test_keeps_notes_and_submitter(self, store):
        """Optional fields are stored when given."""
        created = store.create(_input(notes="blue gloves", submitted_by="sam"))
        assert created.notes == "blue gloves"
        assert created.submitted_by == "sam"

    def test_blank_submitter_is_anonymous(self, store):
        """Whitespace-only submitter falls back to anonymous."""
        assert store.create(_input(submitted_by="   ")).submitted_by == ANONYMOUS

    @pytest.mark.parametrize("glove_type", ["rubber", "LATEX", "", None, "latex "])
    def test_invalid_glove_type_rejected(self, store, glove_type):
        """Values outside the enumeration fail and nothing is persisted."""
        with pytest.raises(ValidationError, match="gloveType must be one of"):
            store.create(_input(glove_type=glove_type))
        assert store.list_all() == []

    @pytest.mark.parametrize("field", ["place_id", "restaurant_name", "address"])
    def test_missing_required_field_rejected(self, store, field):
        """Missing or blank required fields fail and nothing is persisted."""
        with pytest.raises(ValidationError, match="are required"):
            store.create(_input(**{field: None}))
        with pytest.raises(ValidationError):
            store.create(_input(**{field: "  "}))
        assert store.list_all() == []


class TestRead:
    """get_by_id(), list_all() and list_by_place()."""

    def test_round_trip(self, store):
        """A created submission is fetched back unchanged."""
        created = store.create(_input(notes="n", submitted_by="kim"))
        assert store.get_by_id(created.id) == created

    def test_get_unknown_id(self, store):
        """Unknown IDs raise NotFoundError."""
        with pytest.raises(NotFoundError):
            store.get_by_id("missing")

    def test_list_all_newest_first(self, store):
        """Listing is ordered by created_at descending."""
        first = store.create(_input())
        second = store.create(_input(place_id="place-2"))
        third = store.create(_input())

        ids = [s.id for s in store.list_all()]

        expected = sorted([first, second, third], key=lambda s: (s.created_at, s.id), reverse=True)
        assert ids == [s.id for s in expected]

    def test_list_by_place_filters(self, store):
        """Only submissions for the requested place are returned."""
        store.create(_input(place_id="a"))
        store.create(_input(place_id="b"))
        store.create(_input(place_id="a", glove_type="latex"))

        result = store.list_by_place("a")

        assert len(result) == 2
        assert {s.place_id for s in result} == {"a"}
        assert store.list_by_place("zzz") == []

    def test_empty_store(self, store):
        """A fresh store lists nothing."""
        assert store.list_all() == []


class TestUpdate:
    """update() changes only the mutable fields."""

    def test_updates_mutable_fields(self, store):
        """glove_type, notes and submitted_by change; identity does not."""
        created = store.create(_input(notes="old", submitted_by="kim"))

        updated = store.update(
            created.id, SubmissionChanges(glove_type="latex", notes="new", submitted_by="lee")
        )

        assert updated.glove_type == GloveType.LATEX
        assert updated.notes == "new"
        assert updated.submitted_by == "lee"
        assert updated.place_id == created.place_id
        assert updated.restaurant_name == created.restaurant_name
        assert updated.address == created.address
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at
        assert store.get_by_id(created.id) == updated

    def test_omitted_fields_keep_values(self, store):
        """notes and submitted_by left as None are preserved."""
        created = store.create(_input(notes="keep me", submitted_by="kim"))

        updated = store.update(created.id, SubmissionChanges(glove_type="vinyl"))

        assert updated.notes == "keep me"
        assert updated.submitted_by == "kim"

    def test_unknown_id(self, store):
        """Updating an unknown ID raises NotFoundError."""
        with pytest.raises(NotFoundError):
            store.update("missing", SubmissionChanges(glove_type="latex"))

    def test_invalid_glove_type(self, store):
        """Invalid glove type raises ValidationError and nothing changes."""
        created = store.create(_input())

        with pytest.raises(ValidationError):
            store.update(created.id, SubmissionChanges(glove_type="rubber"))

        assert store.get_by_id(created.id) == created

    def test_invalid_glove_type_checked_before_lookup(self, store):
        """An invalid value is reported even when the ID is unknown."""
        with pytest.raises(ValidationError):
            store.update("missing", SubmissionChanges(glove_type="rubber"))


class TestDelete:
    """delete() removes exactly one record."""

    def test_returns_deleted_id(self, store):
        """The deleted ID is returned and the record is gone."""
        keep = store.create(_input())
        gone = store.create(_input())

        assert store.delete(gone.id) == gone.id
        assert [s.id for s in store.list_all()] == [keep.id]
        with pytest.raises(NotFoundError):
            store.get_by_id(gone.id)

    def test_unknown_id(self, store):
        """Deleting an unknown ID raises NotFoundError."""
        with pytest.raises(NotFoundError):
            store.delete("missing")

    def test_double_delete(self, store):
        """The second delete of the same ID fails."""
        created = store.create(_input())
        store.delete(created.id)
        with pytest.raises(NotFoundError):
            store.delete(created.id)


class TestApplyChanges:
    """updated_at never precedes created_at."""

    def test_updated_at_not_before_created_at(self):
        """A created_at in the future still yields a consistent updated_at."""
        existing = make_submission("A", "latex")
        existing.created_at = datetime.now(timezone.utc) + timedelta(hours=1)

        updated = apply_changes(existing, SubmissionChanges(glove_type="none"))

        assert updated.updated_at >= updated.created_at
        assert existing.glove_type == GloveType.LATEX
