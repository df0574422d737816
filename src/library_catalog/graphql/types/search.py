"""
Search result union
"""

from typing import Annotated

import strawberry

from .author import Author
from .book import Book
from .genre import Genre

SearchResult = Annotated[Book | Author | Genre, strawberry.union("SearchResult")]
