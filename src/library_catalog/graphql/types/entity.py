"""
Fields shared by every catalog entity
"""

from datetime import datetime

import strawberry


@strawberry.interface
class Entity:
    """A stored catalog record."""

    id: strawberry.ID
    created_at: datetime
    updated_at: datetime
