"""In-Memory Store — per-kind record maps guarded by reader/writer locks.

Invariants:
    - Every stored record has a non-nil id, unique within its kind
    - Records are deep-copied on the way in and on the way out; no caller
      ever holds a reference to a stored object
    - list/get share the lock; create/update/delete hold it exclusively
    - Each resource kind has its own lock and map (game cards never block decks)
    - The lock is only held for dict access; nothing under it does IO
    - Failures raise RecordNotFoundError / RecordAlreadyExistsError only

Design Decisions:
    - Writer-preferring lock: a waiting writer blocks new readers, so a
      steady stream of list requests cannot starve a create
    - Module-level storage initialized on startup by the lifespan, exposed
      through get_storage() as a FastAPI dependency (tests override it)
"""

import logging
import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, Iterator
from uuid import UUID

from tcg_api.core.domain_types import ResourceKind
from tcg_api.core.errors import RecordAlreadyExistsError, RecordNotFoundError
from tcg_api.core.repository_protocols import RecordT
from tcg_api.models.deck import Deck
from tcg_api.models.game_card import GameCard
from tcg_api.models.image_card import ImageCard

logger = logging.getLogger(__name__)

NIL_ID = UUID(int=0)


class ReadWriteLock:
    """Many readers or one writer. Waiting writers take priority over new readers."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer_active or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            with self._cond:
                self._writer_active = False
                self._cond.notify_all()


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryStore(Generic[RecordT]):
    """Keyed storage for one resource kind. Implements RecordStore."""

    def __init__(self, kind: ResourceKind):
        self.kind = kind.value
        self._lock = ReadWriteLock()
        self._records: dict[UUID, RecordT] = {}

    def get(self, record_id: UUID) -> RecordT:
        with self._lock.read_locked():
            record = self._records.get(record_id)
            if record is None:
                raise RecordNotFoundError(self.kind, record_id)
            return record.model_copy(deep=True)

    def create(self, record: RecordT) -> RecordT:
        """Insert a copy of record, assigning a fresh id when it has none.

        The nil UUID counts as no id. Timestamps the caller left empty are
        stamped; supplied ones are kept.
        """
        stored = record.model_copy(deep=True)
        if stored.id is None or stored.id == NIL_ID:
            stored.id = uuid.uuid4()
        now = _now()
        if stored.created_at is None:
            stored.created_at = now
        if stored.updated_at is None:
            stored.updated_at = now
        with self._lock.write_locked():
            if stored.id in self._records:
                raise RecordAlreadyExistsError(self.kind, stored.id)
            self._records[stored.id] = stored
            result = stored.model_copy(deep=True)
        logger.debug(
            f"{self.kind} created",
            extra={"resource": self.kind, "record_id": result.id},
        )
        return result

    def update(self, record: RecordT) -> RecordT:
        """Replace the stored record wholesale with a copy of record."""
        replacement = record.model_copy(deep=True)
        with self._lock.write_locked():
            if replacement.id not in self._records:
                raise RecordNotFoundError(self.kind, replacement.id)
            self._records[replacement.id] = replacement
            return replacement.model_copy(deep=True)

    def delete(self, record_id: UUID) -> None:
        with self._lock.write_locked():
            if record_id not in self._records:
                raise RecordNotFoundError(self.kind, record_id)
            del self._records[record_id]

    def list(self) -> list[RecordT]:
        """Snapshot of every record, in no particular order."""
        with self._lock.read_locked():
            return [r.model_copy(deep=True) for r in self._records.values()]


@dataclass
class Storage:
    """One independent store per resource kind."""
    game_cards: InMemoryStore[GameCard]
    image_cards: InMemoryStore[ImageCard]
    decks: InMemoryStore[Deck]


def new_memory_storage() -> Storage:
    """Build a fresh, empty storage aggregate."""
    return Storage(
        game_cards=InMemoryStore(ResourceKind.GAME_CARD),
        image_cards=InMemoryStore(ResourceKind.IMAGE_CARD),
        decks=InMemoryStore(ResourceKind.DECK),
    )


# Singleton (initialized on startup)
storage: Storage | None = None


def init_storage() -> Storage:
    global storage
    storage = new_memory_storage()
    return storage


def get_storage() -> Storage:
    """FastAPI dependency for the process storage."""
    if not storage:
        raise RuntimeError("Storage not initialized")
    return storage
