"""Resource Service — one store operation per request, errors mapped to API errors.

Invariants:
    - Identifier is validated before the body, and both before any store access
    - Store errors never reach the client; each maps to a fixed API error
    - NotFound on get → 404 not_found; NotFound on update/delete and
      AlreadyExists on create → 500 internal_error (kept for client
      compatibility)
    - Store failures are logged with operation, kind, id and record name;
      input errors are logged at INFO only

Design Decisions:
    - One generic service parameterized by model and store, shared by all
      resource routes; route modules stay declarative
"""

import logging
from typing import Generic
from uuid import UUID

from pydantic import BaseModel, ValidationError

from tcg_api.core.domain_types import ResourceKind
from tcg_api.core.errors import (
    InternalError,
    InvalidIdError,
    InvalidJsonError,
    RecordNotFoundError,
    ResourceNotFoundError,
    StorageError,
)
from tcg_api.core.repository_protocols import RecordStore, RecordT
from tcg_api.models.card import Card

logger = logging.getLogger(__name__)

_CANONICAL_UUID_LENGTH = 36


def parse_record_id(raw: str, label: str = "record") -> UUID:
    """Parse a path segment as a canonical hyphenated UUID.

    Surrounding slashes are trimmed first. Anything else (braces, urn prefix,
    bare hex) is rejected with InvalidIdError.
    """
    candidate = raw.strip("/")
    if len(candidate) != _CANONICAL_UUID_LENGTH:
        raise InvalidIdError(label)
    try:
        parsed = UUID(candidate)
    except ValueError:
        raise InvalidIdError(label) from None
    if str(parsed) != candidate.lower():
        raise InvalidIdError(label)  # hyphens out of place
    return parsed


def _record_name(record: BaseModel) -> str | None:
    if isinstance(record, Card):
        return record.get_name()
    return getattr(record, "name", None)


class ResourceService(Generic[RecordT]):
    """CRUD semantics for one resource kind on top of a RecordStore."""

    def __init__(self, kind: ResourceKind, model: type[RecordT], label: str):
        self.kind = kind
        self.model = model
        self.label = label

    # ─── Input parsing ───────────────────────────────────────────

    def decode_body(self, body: bytes) -> RecordT:
        """Decode a JSON request body into the record model, without coercion."""
        try:
            return self.model.model_validate_json(body, strict=True)
        except ValidationError as e:
            logger.info(
                f"Rejected {self.label} body: {e.error_count()} error(s)",
                extra={"resource": self.kind.value, "error_code": "invalid_json"},
            )
            raise InvalidJsonError() from None

    # ─── Operations ──────────────────────────────────────────────

    def list_records(self, store: RecordStore[RecordT]) -> list[RecordT]:
        try:
            return store.list()
        except StorageError as e:
            self._log_failure("list", e)
            raise InternalError(f"Failed to retrieve {self.label}s") from None

    def get_record(self, store: RecordStore[RecordT], raw_id: str) -> RecordT:
        record_id = parse_record_id(raw_id, self.label)
        try:
            return store.get(record_id)
        except RecordNotFoundError:
            logger.info(
                f"{self.label.capitalize()} {record_id} not found",
                extra={
                    "resource": self.kind.value, "operation": "get",
                    "record_id": record_id, "error_code": "not_found",
                },
            )
            raise ResourceNotFoundError(
                f"{self.label.capitalize()} not found",
            ) from None
        except StorageError as e:
            self._log_failure("get", e, record_id)
            raise InternalError(f"Failed to retrieve {self.label}") from None

    def create_record(self, store: RecordStore[RecordT], body: bytes) -> RecordT:
        record = self.decode_body(body)
        try:
            return store.create(record)
        except StorageError as e:
            self._log_failure("create", e, e.record_id, record)
            raise InternalError(f"Failed to create {self.label}") from None

    def update_record(
        self, store: RecordStore[RecordT], raw_id: str, body: bytes,
    ) -> RecordT:
        record_id = parse_record_id(raw_id, self.label)
        record = self.decode_body(body)
        record.id = record_id  # path wins over body
        try:
            return store.update(record)
        except StorageError as e:
            self._log_failure("update", e, record_id, record)
            raise InternalError(f"Failed to update {self.label}") from None

    def delete_record(self, store: RecordStore[RecordT], raw_id: str) -> None:
        record_id = parse_record_id(raw_id, self.label)
        try:
            store.delete(record_id)
        except StorageError as e:
            self._log_failure("delete", e, record_id)
            raise InternalError(f"Failed to delete {self.label}") from None

    def _log_failure(
        self,
        operation: str,
        exc: StorageError,
        record_id: UUID | None = None,
        record: BaseModel | None = None,
    ) -> None:
        logger.error(
            f"Failed to {operation} {self.label}: {exc.message}",
            extra={
                "resource": self.kind.value,
                "operation": operation,
                "record_id": record_id,
                "record_name": _record_name(record) if record is not None else None,
                "error_code": "internal_error",
            },
        )
