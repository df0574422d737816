"""
The Catalog object: one store plus the engines and channel that work on it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import settings
from ..logging import get_logger
from ..notifications import NotificationChannel
from .models import EntityKind
from .mutations import CatalogMutations
from .queries import CatalogQueries
from .seed import seed_catalog
from .store import EntityStore

logger = get_logger(__name__)


@dataclass
class Catalog:
    """Everything a request needs to read or change the catalog."""

    store: EntityStore
    notifications: NotificationChannel
    queries: CatalogQueries
    mutations: CatalogMutations

    @classmethod
    def create(cls, *, seed: bool = True, queue_size: int | None = None) -> Catalog:
        """Build a catalog around a fresh store, optionally loading the seed data."""
        store = EntityStore()
        notifications = NotificationChannel(
            queue_size=queue_size if queue_size is not None else settings.subscriber_queue_size
        )
        catalog = cls(
            store=store,
            notifications=notifications,
            queries=CatalogQueries(store),
            mutations=CatalogMutations(store, notifications),
        )
        if seed:
            seed_catalog(store)
        logger.debug("Catalog created", **catalog.counts())
        return catalog

    def counts(self) -> dict[str, int]:
        return {
            "books": self.store.count(EntityKind.BOOK),
            "authors": self.store.count(EntityKind.AUTHOR),
            "genres": self.store.count(EntityKind.GENRE),
        }
