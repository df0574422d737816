"""
Root GraphQL query definitions
"""

import strawberry

from ...config import settings
from ..types.author import Author
from ..types.book import Book, SortDirection
from ..types.genre import Genre
from ..types.search import SearchResult


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # Book queries
    @strawberry.field
    async def book(self, info: strawberry.Info, id: strawberry.ID) -> Book | None:
        """Get a book by ID."""
        from ..resolvers.book import resolve_book_by_id

        return await resolve_book_by_id(info, id)

    @strawberry.field
    async def books(
        self,
        info: strawberry.Info,
        limit: int | None = 10,
        offset: int | None = 0,
        sort_by: str | None = "title",
        direction: SortDirection | None = SortDirection.ASC,
    ) -> list[Book]:
        """Get a page of books sorted on any book field."""
        from ..resolvers.book import resolve_books

        return await resolve_books(
            info,
            limit if limit is not None else settings.default_page_size,
            offset if offset is not None else 0,
            sort_by or settings.default_sort_field,
            direction or SortDirection.ASC,
        )

    @strawberry.field
    async def books_by_author(self, info: strawberry.Info, author_id: strawberry.ID) -> list[Book]:
        """Get every book written by an author."""
        from ..resolvers.book import resolve_books_by_author

        return await resolve_books_by_author(info, author_id)

    # Author queries
    @strawberry.field
    async def author(self, info: strawberry.Info, id: strawberry.ID) -> Author | None:
        """Get an author by ID."""
        from ..resolvers.author import resolve_author_by_id

        return await resolve_author_by_id(info, id)

    @strawberry.field
    async def authors(self, info: strawberry.Info) -> list[Author]:
        """Get all authors."""
        from ..resolvers.author import resolve_authors

        return await resolve_authors(info)

    # Genre queries
    @strawberry.field
    async def genre(self, info: strawberry.Info, id: strawberry.ID) -> Genre | None:
        """Get a genre by ID."""
        from ..resolvers.genre import resolve_genre_by_id

        return await resolve_genre_by_id(info, id)

    @strawberry.field
    async def genres(self, info: strawberry.Info) -> list[Genre]:
        """Get all genres."""
        from ..resolvers.genre import resolve_genres

        return await resolve_genres(info)

    # Search across multiple types
    @strawberry.field
    async def search(self, info: strawberry.Info, term: str) -> list[SearchResult]:
        """Search books, authors and genres for a case-insensitive substring."""
        from ..resolvers.search import search_catalog

        return await search_catalog(info, term)
