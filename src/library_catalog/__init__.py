"""
Library Catalog
GraphQL API over an in-memory catalog of books, authors and genres
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
