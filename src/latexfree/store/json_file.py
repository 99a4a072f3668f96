"""Flat-file submission store.

Keeps every submission in one JSON document of the form
{"submissions": [...]}, with camelCase keys and ISO-8601 timestamps.
Writes go to a temporary file that replaces the original, so readers
see either the old document or the new one, never a partial record.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path

from latexfree.errors import NotFoundError, PersistenceError
from latexfree.models.domain import ANONYMOUS, GloveType, SubmissionEntity
from latexfree.store.base import (
    SubmissionChanges,
    SubmissionInput,
    SubmissionStore,
    apply_changes,
    build_submission,
    parse_glove_type,
)

logger = logging.getLogger(__name__)


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _record_to_entity(record: dict) -> SubmissionEntity:
    """Convert a stored JSON record to a domain entity.

    Records written before updatedAt existed fall back to createdAt.
    """
    created_at = _parse_timestamp(record["createdAt"])
    updated_raw = record.get("updatedAt")
    return SubmissionEntity(
        id=record["id"],
        place_id=record["placeId"],
        restaurant_name=record["restaurantName"],
        address=record["address"],
        glove_type=GloveType(record["gloveType"]),
        notes=record.get("notes") or "",
        submitted_by=record.get("submittedBy") or ANONYMOUS,
        created_at=created_at,
        updated_at=_parse_timestamp(updated_raw) if updated_raw else created_at,
    )


def _entity_to_record(entity: SubmissionEntity) -> dict:
    return {
        "id": entity.id,
        "placeId": entity.place_id,
        "restaurantName": entity.restaurant_name,
        "address": entity.address,
        "gloveType": entity.glove_type.value,
        "notes": entity.notes,
        "submittedBy": entity.submitted_by,
        "createdAt": _format_timestamp(entity.created_at),
        "updatedAt": _format_timestamp(entity.updated_at),
    }


def _newest_first(entities: list[SubmissionEntity]) -> list[SubmissionEntity]:
    return sorted(entities, key=lambda e: (e.created_at, e.id), reverse=True)


class JsonFileSubmissionStore(SubmissionStore):
    """Submission store persisted to a single JSON file.

    A process-local lock serializes read-modify-write cycles. Running
    several processes against the same file is not supported.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _ensure_file(self) -> None:
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._write([])

    def _load(self) -> list[SubmissionEntity]:
        try:
            self._ensure_file()
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            records = raw.get("submissions") if isinstance(raw, dict) else None
            if not isinstance(records, list):
                raise TypeError(f"no submissions list in {type(raw).__name__} document")
            return [_record_to_entity(r) for r in records]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.exception(f"Failed to read submissions from {self.path}")
            raise PersistenceError("Failed to load submissions.") from e

    def _write(self, entities: list[SubmissionEntity]) -> None:
        payload = {"submissions": [_entity_to_record(e) for e in entities]}
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".submissions-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _save(self, entities: list[SubmissionEntity]) -> None:
        try:
            self._write(entities)
        except OSError as e:
            logger.exception(f"Failed to write submissions to {self.path}")
            raise PersistenceError("Failed to save submission.") from e

    def create(self, submission_input: SubmissionInput) -> SubmissionEntity:
        entity = build_submission(submission_input)
        with self._lock:
            entities = self._load()
            entities.append(entity)
            self._save(entities)
        logger.info(
            f"Created submission {entity.id} for place {entity.place_id} ({entity.glove_type.value})"
        )
        return entity

    def list_all(self) -> list[SubmissionEntity]:
        with self._lock:
            return _newest_first(self._load())

    def list_by_place(self, place_id: str) -> list[SubmissionEntity]:
        with self._lock:
            return _newest_first([e for e in self._load() if e.place_id == place_id])

    def get_by_id(self, submission_id: str) -> SubmissionEntity:
        with self._lock:
            for entity in self._load():
                if entity.id == submission_id:
                    return entity
        raise NotFoundError(f"Submission not found: {submission_id}")

    def update(self, submission_id: str, changes: SubmissionChanges) -> SubmissionEntity:
        parse_glove_type(changes.glove_type)

        with self._lock:
            entities = self._load()
            for index, existing in enumerate(entities):
                if existing.id == submission_id:
                    updated = apply_changes(existing, changes)
                    entities[index] = updated
                    self._save(entities)
                    break
            else:
                raise NotFoundError(f"Submission not found: {submission_id}")

        logger.info(f"Updated submission {submission_id} ({updated.glove_type.value})")
        return updated

    def delete(self, submission_id: str) -> str:
        with self._lock:
            entities = self._load()
            remaining = [e for e in entities if e.id != submission_id]
            if len(remaining) == len(entities):
                raise NotFoundError(f"Submission not found: {submission_id}")
            self._save(remaining)

        logger.info(f"Deleted submission {submission_id}")
        return submission_id
