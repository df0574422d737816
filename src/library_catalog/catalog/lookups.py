"""
Id lookups and relationship traversal over the entity store.

Every function reads the current store state; nothing is cached, so a
nested field resolved after a mutation sees the mutation.
"""

from __future__ import annotations

from typing import Protocol

from .models import AuthorRecord, BookRecord, EntityKind, GenreRecord, Record
from .store import EntityStore


class BookReferences(Protocol):
    """Anything carrying a book's outgoing references."""

    author_id: str
    genre_ids: tuple[str, ...]


def find_by_id(store: EntityStore, kind: EntityKind, record_id: str) -> Record | None:
    return store.get(kind, record_id)


def books_by_author(store: EntityStore, author_id: str) -> list[BookRecord]:
    """All books written by ``author_id``, in collection order."""
    return [book for book in store.all(EntityKind.BOOK) if book.author_id == author_id]


def books_by_genre(store: EntityStore, genre_id: str) -> list[BookRecord]:
    """All books tagged with ``genre_id``, in collection order."""
    return [book for book in store.all(EntityKind.BOOK) if genre_id in book.genre_ids]


def author_of(store: EntityStore, book: BookReferences) -> AuthorRecord | None:
    """The book's author, or None when the reference dangles."""
    return store.get(EntityKind.AUTHOR, book.author_id)


def genres_of(store: EntityStore, book: BookReferences) -> list[GenreRecord]:
    """The book's genres in ``genre_ids`` order; dangling ids are skipped."""
    genres = []
    for genre_id in book.genre_ids:
        genre = store.get(EntityKind.GENRE, genre_id)
        if genre is not None:
            genres.append(genre)
    return genres
