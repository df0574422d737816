"""
In-memory entity store holding the book, author and genre collections.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .models import EntityKind, Record


class EntityStore:
    """Single owner of every catalog record.

    Each collection is a dict keyed by id, so lookups are O(1) while
    iteration follows insertion order. Replacing a record keeps its
    position. The store does no validation of its own.

    All access goes through one re-entrant lock; callers that need a
    read-check-write sequence to be atomic wrap it in ``locked()``.
    """

    def __init__(self) -> None:
        self._collections: dict[EntityKind, dict[str, Record]] = {
            kind: {} for kind in EntityKind
        }
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[EntityStore]:
        with self._lock:
            yield self

    def insert(self, kind: EntityKind, record: Record) -> None:
        with self._lock:
            collection = self._collections[kind]
            if record.id in collection:
                raise ValueError(f"{kind.value} with ID {record.id} already exists")
            collection[record.id] = record

    def replace(self, kind: EntityKind, record: Record) -> None:
        with self._lock:
            collection = self._collections[kind]
            if record.id not in collection:
                raise KeyError(record.id)
            collection[record.id] = record

    def remove(self, kind: EntityKind, record_id: str) -> Record | None:
        with self._lock:
            return self._collections[kind].pop(record_id, None)

    def get(self, kind: EntityKind, record_id: str) -> Record | None:
        with self._lock:
            return self._collections[kind].get(record_id)

    def all(self, kind: EntityKind) -> list[Record]:
        """Snapshot of a collection in insertion order."""
        with self._lock:
            return list(self._collections[kind].values())

    def count(self, kind: EntityKind) -> int:
        with self._lock:
            return len(self._collections[kind])
