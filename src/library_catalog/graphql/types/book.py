"""
Book GraphQL type definitions
"""

from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...catalog.models import BookRecord
from .entity import Entity

if TYPE_CHECKING:
    from .author import Author
    from .genre import Genre


@strawberry.enum
class SortDirection(Enum):
    """Sort direction for book listings."""

    ASC = "ASC"
    DESC = "DESC"


@strawberry.type
class Book(Entity):
    """Book type for GraphQL API."""

    title: str
    summary: str | None
    pages: int | None
    published_date: date | None
    rating: float | None
    is_available: bool | None

    author_id: strawberry.Private[str]
    genre_ids: strawberry.Private[tuple[str, ...]]

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            summary=record.summary,
            pages=record.pages,
            published_date=record.published_date,
            rating=record.rating,
            is_available=record.is_available,
            author_id=record.author_id,
            genre_ids=record.genre_ids,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author of this book; null when the reference dangles."""
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)

    @strawberry.field
    async def genres(
        self, info: strawberry.Info
    ) -> list[Annotated["Genre", strawberry.lazy(".genre")]]:
        """Get the genres this book is tagged with."""
        from ..resolvers.book import resolve_book_genres

        return await resolve_book_genres(self, info)
