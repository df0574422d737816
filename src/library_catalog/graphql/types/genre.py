"""
Genre GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...catalog.models import GenreRecord
from .entity import Entity

if TYPE_CHECKING:
    from .book import Book


@strawberry.type
class Genre(Entity):
    """Genre type for GraphQL API."""

    name: str
    description: str | None

    @classmethod
    def from_record(cls, record: GenreRecord) -> "Genre":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            description=record.description,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    @strawberry.field
    async def books(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")]]:
        """Get the books tagged with this genre."""
        from ..resolvers.genre import resolve_genre_books

        return await resolve_genre_books(self, info)
