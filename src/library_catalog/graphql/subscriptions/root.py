"""
Root GraphQL subscription definitions
"""

from collections.abc import AsyncGenerator
from contextlib import aclosing

import strawberry

from ..types.book import Book


@strawberry.type
class Subscription:
    """Root GraphQL subscription type."""

    @strawberry.subscription(name="bookAdded")
    async def book_added(self, info: strawberry.Info) -> AsyncGenerator[Book, None]:
        """Receive every book as it is created."""
        from ..resolvers.subscription import watch_books_added

        async with aclosing(watch_books_added(info)) as books:
            async for book in books:
                yield book

    @strawberry.subscription(name="bookUpdated")
    async def book_updated(self, info: strawberry.Info) -> AsyncGenerator[Book, None]:
        """Receive every book as it is updated."""
        from ..resolvers.subscription import watch_books_updated

        async with aclosing(watch_books_updated(info)) as books:
            async for book in books:
                yield book

    @strawberry.subscription(name="bookDeleted")
    async def book_deleted(self, info: strawberry.Info) -> AsyncGenerator[strawberry.ID, None]:
        """Receive the ID of every deleted book."""
        from ..resolvers.subscription import watch_books_deleted

        async with aclosing(watch_books_deleted(info)) as book_ids:
            async for book_id in book_ids:
                yield book_id
