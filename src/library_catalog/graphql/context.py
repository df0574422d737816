"""
Access to the catalog from GraphQL resolvers
"""

import strawberry

from ..catalog import Catalog
from ..logging import get_logger

logger = get_logger(__name__)


def get_catalog(info: strawberry.Info) -> Catalog:
    """
    Extract the catalog from the GraphQL context.

    Raises:
        RuntimeError: If the context was built without a catalog
    """
    catalog = info.context.get("catalog")
    if catalog is None:
        logger.error("Catalog not found in GraphQL context")
        raise RuntimeError("Catalog not available")
    return catalog
