"""Event topics published when books change."""

from enum import Enum


class BookEvent(str, Enum):
    ADDED = "BOOK_ADDED"
    UPDATED = "BOOK_UPDATED"
    DELETED = "BOOK_DELETED"
