from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_catalog
from .inputs import input_values

if TYPE_CHECKING:
    from ..mutations.root import AuthorInput, AuthorUpdateInput
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
async def resolve_author_by_id(info: strawberry.Info, id: str) -> Author | None:
    from ..types.author import Author as AuthorType

    record = get_catalog(info).queries.get_author(id)
    if record is None:
        logger.info("Author not found", author_id=id)
        return None
    return AuthorType.from_record(record)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    from ..types.author import Author as AuthorType

    return [AuthorType.from_record(record) for record in get_catalog(info).queries.list_authors()]


# Field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    from ..types.book import Book as BookType

    records = get_catalog(info).queries.books_by_author(author.id)
    return [BookType.from_record(record) for record in records]


# Mutation resolvers
async def create_author(info: strawberry.Info, input: AuthorInput) -> Author:
    from ..types.author import Author as AuthorType

    record = get_catalog(info).mutations.create_author(input_values(input, drop_none=True))
    return AuthorType.from_record(record)


async def update_author(info: strawberry.Info, id: str, input: AuthorUpdateInput) -> Author:
    from ..types.author import Author as AuthorType

    record = get_catalog(info).mutations.update_author(id, input_values(input))
    return AuthorType.from_record(record)


async def delete_author(info: strawberry.Info, id: str) -> bool:
    """Delete an author that no book references."""
    return get_catalog(info).mutations.delete_author(id)
