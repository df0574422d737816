from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_catalog

if TYPE_CHECKING:
    from ..types.book import Book
    from ..types.genre import Genre

logger = get_logger(__name__)


async def resolve_genre_by_id(info: strawberry.Info, id: str) -> Genre | None:
    from ..types.genre import Genre as GenreType

    record = get_catalog(info).queries.get_genre(id)
    if record is None:
        logger.info("Genre not found", genre_id=id)
        return None
    return GenreType.from_record(record)


async def resolve_genres(info: strawberry.Info) -> list[Genre]:
    from ..types.genre import Genre as GenreType

    return [GenreType.from_record(record) for record in get_catalog(info).queries.list_genres()]


async def resolve_genre_books(genre: Genre, info: strawberry.Info) -> list[Book]:
    from ..types.book import Book as BookType

    records = get_catalog(info).queries.books_by_genre(genre.id)
    return [BookType.from_record(record) for record in records]
