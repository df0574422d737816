"""
In-memory catalog of books, authors and genres
"""

from .container import Catalog
from .errors import CatalogError, ConflictError, NotFoundError, ValidationError
from .models import (
    AuthorChanges,
    AuthorRecord,
    BookChanges,
    BookRecord,
    EntityKind,
    GenreRecord,
    NewAuthor,
    NewBook,
    SearchHit,
    SortDirection,
)
from .mutations import CatalogMutations
from .queries import CatalogQueries
from .store import EntityStore

__all__ = [
    "AuthorChanges",
    "AuthorRecord",
    "BookChanges",
    "BookRecord",
    "Catalog",
    "CatalogError",
    "CatalogMutations",
    "CatalogQueries",
    "ConflictError",
    "EntityKind",
    "EntityStore",
    "GenreRecord",
    "NewAuthor",
    "NewBook",
    "NotFoundError",
    "SearchHit",
    "SortDirection",
    "ValidationError",
]
