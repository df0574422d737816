"""
Unit tests for the in-memory entity store
"""

from datetime import UTC, datetime

import pytest

from library_catalog.catalog import AuthorRecord, EntityKind, EntityStore

NOW = datetime(2024, 5, 1, tzinfo=UTC)


def make_author(author_id: str, name: str = "Someone") -> AuthorRecord:
    return AuthorRecord(id=author_id, name=name, created_at=NOW, updated_at=NOW)


class TestEntityStore:
    def test_all_follows_insertion_order(self):
        store = EntityStore()
        for author_id in ("c", "a", "b"):
            store.insert(EntityKind.AUTHOR, make_author(author_id))

        assert [a.id for a in store.all(EntityKind.AUTHOR)] == ["c", "a", "b"]
        assert store.count(EntityKind.AUTHOR) == 3
        assert store.count(EntityKind.BOOK) == 0

    def test_insert_rejects_duplicate_id(self):
        store = EntityStore()
        store.insert(EntityKind.AUTHOR, make_author("a"))

        with pytest.raises(ValueError):
            store.insert(EntityKind.AUTHOR, make_author("a", name="Other"))

        assert store.get(EntityKind.AUTHOR, "a").name == "Someone"

    def test_replace_keeps_position(self):
        store = EntityStore()
        for author_id in ("a", "b", "c"):
            store.insert(EntityKind.AUTHOR, make_author(author_id))

        store.replace(EntityKind.AUTHOR, make_author("b", name="Renamed"))

        authors = store.all(EntityKind.AUTHOR)
        assert [a.id for a in authors] == ["a", "b", "c"]
        assert authors[1].name == "Renamed"

    def test_replace_missing_raises(self):
        store = EntityStore()

        with pytest.raises(KeyError):
            store.replace(EntityKind.AUTHOR, make_author("ghost"))

    def test_remove(self):
        store = EntityStore()
        store.insert(EntityKind.AUTHOR, make_author("a"))

        removed = store.remove(EntityKind.AUTHOR, "a")

        assert removed.id == "a"
        assert store.get(EntityKind.AUTHOR, "a") is None
        assert store.remove(EntityKind.AUTHOR, "a") is None

    def test_collections_are_independent(self):
        store = EntityStore()
        store.insert(EntityKind.AUTHOR, make_author("shared-id"))

        assert store.get(EntityKind.GENRE, "shared-id") is None
        assert store.get(EntityKind.BOOK, "shared-id") is None

    def test_all_returns_snapshot(self):
        store = EntityStore()
        store.insert(EntityKind.AUTHOR, make_author("a"))

        snapshot = store.all(EntityKind.AUTHOR)
        store.insert(EntityKind.AUTHOR, make_author("b"))

        assert len(snapshot) == 1

    def test_records_are_immutable(self):
        author = make_author("a")

        with pytest.raises(Exception):
            author.name = "Changed"  # type: ignore[misc]
