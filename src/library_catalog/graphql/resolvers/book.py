from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog.models import SortDirection as CatalogSortDirection
from ...logging import get_logger
from ..context import get_catalog
from .inputs import input_values

if TYPE_CHECKING:
    from ..mutations.root import BookInput, BookUpdateInput
    from ..types.author import Author
    from ..types.book import Book, SortDirection
    from ..types.genre import Genre

logger = get_logger(__name__)


# Query resolvers
async def resolve_book_by_id(info: strawberry.Info, id: str) -> Book | None:
    """Resolve a book by its ID; null when no such book exists."""
    from ..types.book import Book as BookType

    record = get_catalog(info).queries.get_book(id)
    if record is None:
        logger.info("Book not found", book_id=id)
        return None
    return BookType.from_record(record)


async def resolve_books(
    info: strawberry.Info,
    limit: int,
    offset: int,
    sort_by: str,
    direction: SortDirection,
) -> list[Book]:
    """Resolve one page of books sorted on ``sort_by``."""
    from ..types.book import Book as BookType

    records = get_catalog(info).queries.list_books(
        limit=limit,
        offset=offset,
        sort_by=sort_by,
        direction=CatalogSortDirection(direction.value),
    )
    return [BookType.from_record(record) for record in records]


async def resolve_books_by_author(info: strawberry.Info, author_id: str) -> list[Book]:
    from ..types.book import Book as BookType

    records = get_catalog(info).queries.books_by_author(author_id)
    return [BookType.from_record(record) for record in records]


# Field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """Look the author up at read time so the latest state is returned."""
    from ..types.author import Author as AuthorType

    record = get_catalog(info).queries.author_of(book)
    if record is None:
        logger.warning(
            "Book references a missing author", book_id=book.id, author_id=book.author_id
        )
        return None
    return AuthorType.from_record(record)


async def resolve_book_genres(book: Book, info: strawberry.Info) -> list[Genre]:
    from ..types.genre import Genre as GenreType

    return [GenreType.from_record(record) for record in get_catalog(info).queries.genres_of(book)]


# Mutation resolvers
async def create_book(info: strawberry.Info, input: BookInput) -> Book:
    """Create a new book and announce it to bookAdded subscribers."""
    from ..types.book import Book as BookType

    record = get_catalog(info).mutations.create_book(input_values(input, drop_none=True))
    return BookType.from_record(record)


async def update_book(info: strawberry.Info, id: str, input: BookUpdateInput) -> Book:
    """Apply the supplied fields to an existing book."""
    from ..types.book import Book as BookType

    record = get_catalog(info).mutations.update_book(id, input_values(input))
    return BookType.from_record(record)


async def delete_book(info: strawberry.Info, id: str) -> bool:
    return get_catalog(info).mutations.delete_book(id)
