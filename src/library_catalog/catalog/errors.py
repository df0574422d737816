"""
Error taxonomy for catalog operations.

Reads never raise these for a missing id; they return ``None`` or an empty
list instead. Only mutations and malformed requests fail.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError


class CatalogError(Exception):
    """Base class for errors raised by catalog operations."""


class NotFoundError(CatalogError):
    """Raised when a mutation targets an id that does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class ConflictError(CatalogError):
    """Raised when a mutation would break referential integrity."""


class ValidationError(CatalogError):
    """Raised when input is missing required fields or references unknown records."""


def from_pydantic(error: PydanticValidationError) -> ValidationError:
    """Summarize a pydantic validation failure as a catalog ValidationError."""
    details = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "input"
        details.append(f"{location}: {err['msg']}")
    return ValidationError("Invalid input: " + "; ".join(details))
