"""Boundary Protocols — the store contract the service layer depends on.

Invariants:
    - Every method copies records in and out; callers never hold stored objects
    - Failures surface only as StorageError subclasses (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous: the store never does IO, so lock hold times stay short
"""

from typing import Protocol, TypeVar
from uuid import UUID

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Protocol[RecordT]):
    """Keyed storage for one resource kind."""
    kind: str

    def list(self) -> list[RecordT]: ...
    def get(self, record_id: UUID) -> RecordT: ...
    def create(self, record: RecordT) -> RecordT: ...
    def update(self, record: RecordT) -> RecordT: ...
    def delete(self, record_id: UUID) -> None: ...
