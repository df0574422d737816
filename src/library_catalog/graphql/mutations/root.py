"""
Root GraphQL mutation definitions
"""

from datetime import date

import strawberry

from ..types.author import Author
from ..types.book import Book


# Input types for mutations
@strawberry.input
class BookInput:
    """Input for creating a new book."""

    title: str
    author_id: strawberry.ID
    summary: str | None = None
    pages: int | None = None
    published_date: date | None = None
    genre_ids: list[strawberry.ID] | None = None
    rating: float | None = None
    is_available: bool | None = None


@strawberry.input
class BookUpdateInput:
    """Input for updating a book. Omitted fields keep their current value."""

    title: str | None = strawberry.UNSET
    author_id: strawberry.ID | None = strawberry.UNSET
    summary: str | None = strawberry.UNSET
    pages: int | None = strawberry.UNSET
    published_date: date | None = strawberry.UNSET
    genre_ids: list[strawberry.ID] | None = strawberry.UNSET
    rating: float | None = strawberry.UNSET
    is_available: bool | None = strawberry.UNSET


@strawberry.input
class AuthorInput:
    """Input for creating a new author."""

    name: str
    bio: str | None = None


@strawberry.input
class AuthorUpdateInput:
    """Input for updating an author. Omitted fields keep their current value."""

    name: str | None = strawberry.UNSET
    bio: str | None = strawberry.UNSET


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Book mutations
    @strawberry.mutation(name="createBook")
    async def create_book(self, info: strawberry.Info, input: BookInput) -> Book:
        """Create a new book."""
        from ..resolvers.book import create_book

        return await create_book(info, input)

    @strawberry.mutation(name="updateBook")
    async def update_book(
        self, info: strawberry.Info, id: strawberry.ID, input: BookUpdateInput
    ) -> Book:
        """Update an existing book."""
        from ..resolvers.book import update_book

        return await update_book(info, id, input)

    @strawberry.mutation(name="deleteBook")
    async def delete_book(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a book."""
        from ..resolvers.book import delete_book

        return await delete_book(info, id)

    # Author mutations
    @strawberry.mutation(name="createAuthor")
    async def create_author(self, info: strawberry.Info, input: AuthorInput) -> Author:
        """Create a new author."""
        from ..resolvers.author import create_author

        return await create_author(info, input)

    @strawberry.mutation(name="updateAuthor")
    async def update_author(
        self, info: strawberry.Info, id: strawberry.ID, input: AuthorUpdateInput
    ) -> Author:
        """Update an existing author."""
        from ..resolvers.author import update_author

        return await update_author(info, id, input)

    @strawberry.mutation(name="deleteAuthor")
    async def delete_author(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete an author with no books."""
        from ..resolvers.author import delete_author

        return await delete_author(info, id)
