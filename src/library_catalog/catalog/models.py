"""
Catalog records, mutation inputs and query result types.

Records are frozen pydantic models. The store never hands out anything a
caller could mutate in place; an update builds a new record and swaps it in.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntityKind(Enum):
    """Kinds of entity held by the catalog."""

    BOOK = "Book"
    AUTHOR = "Author"
    GENRE = "Genre"


class SortDirection(Enum):
    ASC = "ASC"
    DESC = "DESC"


def unique_ids(ids: tuple[str, ...] | None) -> tuple[str, ...] | None:
    """Drop repeated ids, keeping the first occurrence of each."""
    return None if ids is None else tuple(dict.fromkeys(ids))


class BookRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(min_length=1)
    summary: str | None = None
    pages: int | None = Field(default=None, ge=0)
    published_date: date | None = None
    author_id: str
    genre_ids: tuple[str, ...] = ()
    rating: float | None = None
    is_available: bool | None = None
    created_at: datetime
    updated_at: datetime

    dedupe_genre_ids = field_validator("genre_ids")(unique_ids)


class AuthorRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(min_length=1)
    bio: str | None = None
    created_at: datetime
    updated_at: datetime


class GenreRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(min_length=1)
    description: str | None = None
    created_at: datetime
    updated_at: datetime


Record = BookRecord | AuthorRecord | GenreRecord


# Mutation inputs
class NewBook(BaseModel):
    """Fields accepted when creating a book."""

    title: str = Field(min_length=1)
    author_id: str
    summary: str | None = None
    pages: int | None = Field(default=None, ge=0)
    published_date: date | None = None
    genre_ids: tuple[str, ...] = ()
    rating: float | None = None
    is_available: bool | None = None

    dedupe_genre_ids = field_validator("genre_ids")(unique_ids)


class BookChanges(BaseModel):
    """Partial update for a book.

    Only fields explicitly set are applied (see ``model_fields_set``); an
    explicit ``None`` clears an optional field, an omitted field is kept.
    """

    title: str | None = None
    author_id: str | None = None
    summary: str | None = None
    pages: int | None = None
    published_date: date | None = None
    genre_ids: tuple[str, ...] | None = None
    rating: float | None = None
    is_available: bool | None = None

    dedupe_genre_ids = field_validator("genre_ids")(unique_ids)


class NewAuthor(BaseModel):
    """Fields accepted when creating an author."""

    name: str = Field(min_length=1)
    bio: str | None = None


class AuthorChanges(BaseModel):
    """Partial update for an author; same presence rules as BookChanges."""

    name: str | None = None
    bio: str | None = None


@dataclass(frozen=True)
class SearchHit:
    """A search result tagged with the kind of record it holds."""

    kind: EntityKind
    record: Record
