from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog.models import EntityKind
from ...logging import get_logger
from ..context import get_catalog

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book
    from ..types.genre import Genre

logger = get_logger(__name__)


async def search_catalog(info: strawberry.Info, term: str) -> list[Book | Author | Genre]:
    """
    Search books, authors and genres for ``term``.

    Each hit already carries its kind, so the GraphQL type is chosen from
    the tag rather than guessed from which fields the record has.
    """
    from ..types.author import Author as AuthorType
    from ..types.book import Book as BookType
    from ..types.genre import Genre as GenreType

    graphql_types = {
        EntityKind.BOOK: BookType,
        EntityKind.AUTHOR: AuthorType,
        EntityKind.GENRE: GenreType,
    }

    hits = get_catalog(info).queries.search(term)
    logger.info("Catalog searched", term=term, results=len(hits))
    return [graphql_types[hit.kind].from_record(hit.record) for hit in hits]
