"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...catalog.models import AuthorRecord
from .entity import Entity

if TYPE_CHECKING:
    from .book import Book


@strawberry.type
class Author(Entity):
    """Author type for GraphQL API."""

    name: str
    bio: str | None

    @classmethod
    def from_record(cls, record: AuthorRecord) -> "Author":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            bio=record.bio,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    @strawberry.field
    async def books(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")]]:
        """Get the books written by this author."""
        from ..resolvers.author import resolve_author_books

        return await resolve_author_books(self, info)
