"""
Create, update and delete operations for books and authors.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..logging import get_logger
from ..notifications import BookEvent, NotificationChannel
from . import lookups
from .errors import ConflictError, NotFoundError, ValidationError, from_pydantic
from .models import (
    AuthorChanges,
    AuthorRecord,
    BookChanges,
    BookRecord,
    EntityKind,
    NewAuthor,
    NewBook,
)
from .store import EntityStore

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_REQUIRED_BOOK_FIELDS = ("title", "author_id", "genre_ids")
_REQUIRED_AUTHOR_FIELDS = ("name",)


def _coerce(model: type[ModelT], data: ModelT | Mapping[str, Any]) -> ModelT:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise from_pydantic(e) from e


def _rebuild(record: BaseModel, changes: Mapping[str, Any]) -> Any:
    """Apply ``changes`` over ``record`` and re-run the record's validation."""
    try:
        return type(record).model_validate({**record.model_dump(), **changes})
    except PydanticValidationError as e:
        raise from_pydantic(e) from e


def _reject_nulls(changes: Mapping[str, Any], required: Iterable[str]) -> None:
    for field in required:
        if field in changes and changes[field] is None:
            raise ValidationError(f"Invalid input: {field} cannot be null")


def _now() -> datetime:
    return datetime.now(UTC)


def _next_updated_at(previous: datetime) -> datetime:
    """A timestamp strictly later than ``previous``, even on a coarse clock."""
    return max(_now(), previous + timedelta(microseconds=1))


class CatalogMutations:
    """Mutation engine. Publishes book events on the notification channel."""

    def __init__(self, store: EntityStore, notifications: NotificationChannel) -> None:
        self.store = store
        self.notifications = notifications

    def _check_references(self, author_id: str | None, genre_ids: Iterable[str] | None) -> None:
        if author_id is not None and (
            lookups.find_by_id(self.store, EntityKind.AUTHOR, author_id) is None
        ):
            raise ValidationError(f"Author with ID {author_id} does not exist")
        for genre_id in genre_ids or ():
            if lookups.find_by_id(self.store, EntityKind.GENRE, genre_id) is None:
                raise ValidationError(f"Genre with ID {genre_id} does not exist")

    # Books
    def create_book(self, data: NewBook | Mapping[str, Any]) -> BookRecord:
        book_input = _coerce(NewBook, data)
        now = _now()

        with self.store.locked():
            self._check_references(book_input.author_id, book_input.genre_ids)
            book = BookRecord(
                id=str(uuid.uuid4()),
                **book_input.model_dump(),
                created_at=now,
                updated_at=now,
            )
            self.store.insert(EntityKind.BOOK, book)

        logger.info("Book created", book_id=book.id, title=book.title)
        self.notifications.publish(BookEvent.ADDED, book)
        return book

    def update_book(self, book_id: str, changes: BookChanges | Mapping[str, Any]) -> BookRecord:
        patch = _coerce(BookChanges, changes).model_dump(exclude_unset=True)
        _reject_nulls(patch, _REQUIRED_BOOK_FIELDS)

        with self.store.locked():
            existing = lookups.find_by_id(self.store, EntityKind.BOOK, book_id)
            if existing is None:
                raise NotFoundError("Book", book_id)

            self._check_references(patch.get("author_id"), patch.get("genre_ids"))
            book = _rebuild(
                existing, {**patch, "updated_at": _next_updated_at(existing.updated_at)}
            )
            self.store.replace(EntityKind.BOOK, book)

        logger.info("Book updated", book_id=book_id, fields=sorted(patch))
        self.notifications.publish(BookEvent.UPDATED, book)
        return book

    def delete_book(self, book_id: str) -> bool:
        with self.store.locked():
            if self.store.remove(EntityKind.BOOK, book_id) is None:
                raise NotFoundError("Book", book_id)

        logger.info("Book deleted", book_id=book_id)
        self.notifications.publish(BookEvent.DELETED, book_id)
        return True

    # Authors
    def create_author(self, data: NewAuthor | Mapping[str, Any]) -> AuthorRecord:
        author_input = _coerce(NewAuthor, data)
        now = _now()
        author = AuthorRecord(
            id=str(uuid.uuid4()),
            **author_input.model_dump(),
            created_at=now,
            updated_at=now,
        )
        self.store.insert(EntityKind.AUTHOR, author)

        logger.info("Author created", author_id=author.id, name=author.name)
        return author

    def update_author(
        self, author_id: str, changes: AuthorChanges | Mapping[str, Any]
    ) -> AuthorRecord:
        patch = _coerce(AuthorChanges, changes).model_dump(exclude_unset=True)
        _reject_nulls(patch, _REQUIRED_AUTHOR_FIELDS)

        with self.store.locked():
            existing = lookups.find_by_id(self.store, EntityKind.AUTHOR, author_id)
            if existing is None:
                raise NotFoundError("Author", author_id)

            author = _rebuild(
                existing, {**patch, "updated_at": _next_updated_at(existing.updated_at)}
            )
            self.store.replace(EntityKind.AUTHOR, author)

        logger.info("Author updated", author_id=author_id, fields=sorted(patch))
        return author

    def delete_author(self, author_id: str) -> bool:
        with self.store.locked():
            if lookups.find_by_id(self.store, EntityKind.AUTHOR, author_id) is None:
                raise NotFoundError("Author", author_id)

            if lookups.books_by_author(self.store, author_id):
                logger.info("Author delete blocked by books", author_id=author_id)
                raise ConflictError(
                    f"Cannot delete author with ID {author_id} "
                    "because they have associated books"
                )

            self.store.remove(EntityKind.AUTHOR, author_id)

        logger.info("Author deleted", author_id=author_id)
        return True
