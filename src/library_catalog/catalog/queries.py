"""
Read operations over the catalog.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, time
from typing import Any

from ..logging import get_logger
from . import lookups
from .errors import ValidationError
from .models import (
    AuthorRecord,
    BookRecord,
    EntityKind,
    GenreRecord,
    SearchHit,
    SortDirection,
)
from .store import EntityStore

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _attribute_name(field: str) -> str:
    """Map a GraphQL field name (``publishedDate``) to its record attribute."""
    return _CAMEL_BOUNDARY.sub("_", field).lower()


def _sort_key(value: Any) -> tuple:
    """Order values by type class first so mixed values never compare directly.

    Numbers sort numerically, strings by code point, dates chronologically.
    Missing values sort last.
    """
    if value is None:
        return (4,)
    if isinstance(value, int | float):
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return (2, value.date(), value.time())
    if isinstance(value, date):
        return (2, value, time.min)
    return (3, str(value))


def _matches(term: str, *values: str | None) -> bool:
    return any(value is not None and term in value.lower() for value in values)


class CatalogQueries:
    """Query engine: single-record fetches, listings, joins and search."""

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    # Books
    def get_book(self, book_id: str) -> BookRecord | None:
        return lookups.find_by_id(self.store, EntityKind.BOOK, book_id)

    def list_books(
        self,
        limit: int = 10,
        offset: int = 0,
        sort_by: str = "title",
        direction: SortDirection = SortDirection.ASC,
    ) -> list[BookRecord]:
        """Sort all books by ``sort_by`` and return the ``[offset, offset+limit)`` page.

        The sort is stable and DESC reverses the ASC order without reordering
        equal keys. An unknown field leaves books in collection order.
        """
        if limit < 0 or offset < 0:
            raise ValidationError("limit and offset must be non-negative")

        books = self.store.all(EntityKind.BOOK)
        attribute = _attribute_name(sort_by)
        if attribute in BookRecord.model_fields:
            books = sorted(
                books,
                key=lambda book: _sort_key(getattr(book, attribute)),
                reverse=direction is SortDirection.DESC,
            )
        else:
            logger.debug("Unknown sort field, keeping collection order", sort_by=sort_by)

        return books[offset : offset + limit]

    def books_by_author(self, author_id: str) -> list[BookRecord]:
        return lookups.books_by_author(self.store, author_id)

    def books_by_genre(self, genre_id: str) -> list[BookRecord]:
        return lookups.books_by_genre(self.store, genre_id)

    def author_of(self, book: lookups.BookReferences) -> AuthorRecord | None:
        return lookups.author_of(self.store, book)

    def genres_of(self, book: lookups.BookReferences) -> list[GenreRecord]:
        return lookups.genres_of(self.store, book)

    # Authors
    def get_author(self, author_id: str) -> AuthorRecord | None:
        return lookups.find_by_id(self.store, EntityKind.AUTHOR, author_id)

    def list_authors(self) -> list[AuthorRecord]:
        return self.store.all(EntityKind.AUTHOR)

    # Genres
    def get_genre(self, genre_id: str) -> GenreRecord | None:
        return lookups.find_by_id(self.store, EntityKind.GENRE, genre_id)

    def list_genres(self) -> list[GenreRecord]:
        return self.store.all(EntityKind.GENRE)

    # Search
    def search(self, term: str) -> list[SearchHit]:
        """Case-insensitive substring search across every entity kind.

        Books come first, then authors, then genres; each group keeps its
        collection order. Every hit is tagged with its kind.
        """
        needle = term.lower()
        with self.store.locked():
            books = [
                SearchHit(EntityKind.BOOK, book)
                for book in self.store.all(EntityKind.BOOK)
                if _matches(needle, book.title, book.summary)
            ]
            authors = [
                SearchHit(EntityKind.AUTHOR, author)
                for author in self.store.all(EntityKind.AUTHOR)
                if _matches(needle, author.name, author.bio)
            ]
            genres = [
                SearchHit(EntityKind.GENRE, genre)
                for genre in self.store.all(EntityKind.GENRE)
                if _matches(needle, genre.name, genre.description)
            ]

        logger.debug(
            "Search completed",
            term=term,
            books=len(books),
            authors=len(authors),
            genres=len(genres),
        )
        return books + authors + genres
