from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...notifications import BookEvent, Subscriber
from ..context import get_catalog

if TYPE_CHECKING:
    from ..types.book import Book

logger = get_logger(__name__)


def _subscribe(info: strawberry.Info, event: BookEvent) -> Subscriber:
    subscriber = get_catalog(info).notifications.subscribe(event)
    logger.info("Subscription started", topic=event.value)
    return subscriber


# Each generator holds its subscriber open until the client disconnects;
# closing the generator unregisters it from the channel.
async def watch_books_added(info: strawberry.Info) -> AsyncGenerator[Book, None]:
    from ..types.book import Book as BookType

    with _subscribe(info, BookEvent.ADDED) as subscriber:
        async for record in subscriber:
            yield BookType.from_record(record)


async def watch_books_updated(info: strawberry.Info) -> AsyncGenerator[Book, None]:
    from ..types.book import Book as BookType

    with _subscribe(info, BookEvent.UPDATED) as subscriber:
        async for record in subscriber:
            yield BookType.from_record(record)


async def watch_books_deleted(info: strawberry.Info) -> AsyncGenerator[strawberry.ID, None]:
    with _subscribe(info, BookEvent.DELETED) as subscriber:
        async for book_id in subscriber:
            yield strawberry.ID(book_id)
