"""In-Memory Store — CRUD contract, copy isolation, and lock discipline.

Invariants:
    - create assigns an id when absent or nil; duplicate ids raise and store nothing
    - update replaces the record wholesale, timestamps included
    - get/update/delete on unknown ids raise RecordNotFoundError, map unchanged
    - Records are deep-copied in and out (list fields included)
    - Readers share the lock; a writer excludes everyone; waiting writers
      go before newly arriving readers
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest

from tcg_api.core.domain_types import ResourceKind
from tcg_api.core.errors import RecordAlreadyExistsError, RecordNotFoundError
from tcg_api.infrastructure import memory_store
from tcg_api.infrastructure.memory_store import (
    InMemoryStore,
    ReadWriteLock,
    get_storage,
    init_storage,
    new_memory_storage,
)
from tcg_api.models.deck import Deck
from tcg_api.models.game_card import GameCard


@pytest.fixture
def store() -> InMemoryStore[GameCard]:
    return InMemoryStore(ResourceKind.GAME_CARD)


# ─── CRUD contract ───────────────────────────────────────────────

def test_create_assigns_id_and_get_returns_equal_record(store):
    created = store.create(GameCard(name="Test Card", cost=3))
    assert created.id is not None
    assert store.get(created.id) == created


def test_create_does_not_mutate_input(store):
    card = GameCard(name="Input")
    store.create(card)
    assert card.id is None


def test_create_assigns_distinct_ids(store):
    ids = {store.create(GameCard(name=f"c{i}")).id for i in range(20)}
    assert len(ids) == 20


def test_create_duplicate_id_raises_and_keeps_first(store):
    card_id = uuid4()
    store.create(GameCard(id=card_id, name="First"))
    with pytest.raises(RecordAlreadyExistsError) as exc:
        store.create(GameCard(id=card_id, name="Second"))
    assert exc.value.record_id == card_id
    assert store.get(card_id).name == "First"
    assert len(store.list()) == 1


def test_create_stamps_timestamps(store):
    created = store.create(GameCard(name="Stamped"))
    assert created.created_at is not None
    assert created.updated_at == created.created_at


def test_create_keeps_supplied_timestamps(store):
    supplied = datetime(2001, 1, 1, tzinfo=timezone.utc)
    created = store.create(GameCard(
        name="Dated", created_at=supplied, updated_at=supplied,
    ))
    assert created.created_at == supplied
    assert created.updated_at == supplied


def test_create_replaces_nil_id(store):
    created = store.create(GameCard(id=UUID(int=0), name="Nil"))
    assert created.id is not None
    assert created.id != UUID(int=0)
    assert store.get(created.id).name == "Nil"
    with pytest.raises(RecordNotFoundError):
        store.get(UUID(int=0))


def test_nil_id_creates_do_not_collide(store):
    first = store.create(GameCard(id=UUID(int=0), name="A"))
    second = store.create(GameCard(id=UUID(int=0), name="B"))
    assert first.id != second.id
    assert len(store.list()) == 2


def test_missing_id_raises_not_found(store):
    store.create(GameCard(name="Bystander"))
    missing = uuid4()
    with pytest.raises(RecordNotFoundError):
        store.get(missing)
    with pytest.raises(RecordNotFoundError):
        store.update(GameCard(id=missing, name="Ghost"))
    with pytest.raises(RecordNotFoundError):
        store.delete(missing)
    assert [c.name for c in store.list()] == ["Bystander"]


def test_update_replaces_whole_record(store):
    created = store.create(GameCard(
        name="Original", subtitle="Sub", keywords=["Flying"], offense=5,
    ))
    updated = store.update(GameCard(id=created.id, name="Updated"))
    assert updated.name == "Updated"
    assert updated.subtitle == ""
    assert updated.keywords == []
    assert updated.offense == 0
    assert store.get(created.id) == updated


def test_update_does_not_merge_stored_timestamps(store):
    created = store.create(GameCard(name="Timed"))
    updated = store.update(GameCard(id=created.id, name="Timed v2"))
    assert updated.created_at is None
    assert updated.updated_at is None
    assert store.get(created.id) == updated


def test_update_stores_supplied_timestamps(store):
    created = store.create(GameCard(name="Timed"))
    supplied = datetime(2001, 1, 1, tzinfo=timezone.utc)
    updated = store.update(GameCard(
        id=created.id, name="Timed v2", created_at=supplied,
    ))
    assert updated.created_at == supplied
    assert store.get(created.id).created_at == supplied


def test_delete_then_get_raises(store):
    created = store.create(GameCard(name="Doomed"))
    store.delete(created.id)
    with pytest.raises(RecordNotFoundError):
        store.get(created.id)


def test_list_empty_store(store):
    assert store.list() == []


def test_list_counts_creates_minus_deletes(store):
    created = [store.create(GameCard(name=f"c{i}")) for i in range(7)]
    for card in created[:3]:
        store.delete(card.id)
    assert len(store.list()) == 4


# ─── Copy isolation ──────────────────────────────────────────────

def test_mutating_returned_record_does_not_touch_store(store):
    created = store.create(GameCard(name="Safe", keywords=["Flying"]))
    created.name = "Hacked"
    fetched = store.get(created.id)
    fetched.keywords.append("Trample")
    listed = store.list()[0]
    listed.colors.append("Black")

    stored = store.get(created.id)
    assert stored.name == "Safe"
    assert stored.keywords == ["Flying"]
    assert stored.colors == []


def test_mutating_input_after_create_does_not_touch_store(store):
    card = GameCard(id=uuid4(), name="Original", colors=["Red"])
    store.create(card)
    card.colors.append("Blue")
    card.name = "Changed"
    assert store.get(card.id).colors == ["Red"]
    assert store.get(card.id).name == "Original"


def test_mutating_input_after_update_does_not_touch_store(store):
    created = store.create(GameCard(name="A"))
    replacement = GameCard(id=created.id, name="B", keywords=["Reach"])
    store.update(replacement)
    replacement.keywords.clear()
    assert store.get(created.id).keywords == ["Reach"]


# ─── Concurrency ─────────────────────────────────────────────────

def test_concurrent_creates_all_visible():
    store = InMemoryStore(ResourceKind.GAME_CARD)
    ids = [uuid4() for _ in range(200)]
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(
            lambda i: store.create(GameCard(id=i, name=str(i))), ids,
        ))
    assert {r.id for r in results} == set(ids)
    assert {c.id for c in store.list()} == set(ids)


def test_concurrent_duplicate_creates_only_one_wins():
    store = InMemoryStore(ResourceKind.DECK)
    deck_id = uuid4()

    def attempt(n):
        try:
            store.create(Deck(id=deck_id, name=f"deck {n}"))
            return True
        except RecordAlreadyExistsError:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(attempt, range(32)))
    assert outcomes.count(True) == 1
    assert len(store.list()) == 1


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=2)

    def reader():
        with lock.read_locked():
            barrier.wait()  # both must be inside at once

    with ThreadPoolExecutor(max_workers=2) as pool:
        for future in [pool.submit(reader) for _ in range(2)]:
            future.result()


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    with lock.write_locked():
        t = threading.Thread(target=reader)
        t.start()
        assert not entered.wait(0.1)
    assert entered.wait(2)
    t.join(2)


def test_waiting_writer_goes_before_new_readers():
    lock = ReadWriteLock()
    first_reader_in = threading.Event()
    release_first_reader = threading.Event()
    order = []

    def first_reader():
        with lock.read_locked():
            first_reader_in.set()
            release_first_reader.wait(2)

    def writer():
        with lock.write_locked():
            order.append("writer")

    def late_reader():
        with lock.read_locked():
            order.append("reader")

    threads = [threading.Thread(target=first_reader)]
    threads[0].start()
    assert first_reader_in.wait(2)

    threads.append(threading.Thread(target=writer))
    threads[1].start()
    deadline = time.monotonic() + 2
    while lock._writers_waiting == 0 and time.monotonic() < deadline:
        time.sleep(0.005)

    threads.append(threading.Thread(target=late_reader))
    threads[2].start()
    time.sleep(0.05)
    release_first_reader.set()
    for t in threads:
        t.join(2)

    assert order == ["writer", "reader"]


# ─── Storage aggregate ───────────────────────────────────────────

def test_kinds_are_independent():
    storage = new_memory_storage()
    shared_id = uuid4()
    storage.game_cards.create(GameCard(id=shared_id, name="Card"))
    storage.decks.create(Deck(id=shared_id, name="Deck"))
    assert storage.image_cards.list() == []
    assert storage.decks.get(shared_id).name == "Deck"


def test_get_storage_requires_init(monkeypatch):
    monkeypatch.setattr(memory_store, "storage", None)
    with pytest.raises(RuntimeError):
        get_storage()
    initialized = init_storage()
    assert get_storage() is initialized
