"""
FastAPI application serving the catalog over GraphQL
"""

from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..catalog import Catalog
from ..config import settings
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)

health_router = APIRouter()


@health_router.get("/health")
async def health(request: Request) -> dict:
    """Liveness plus the current size of each collection."""
    catalog: Catalog = request.app.state.catalog
    return {"status": "healthy", "version": __version__, "counts": catalog.counts()}


@asynccontextmanager
async def lifespan(app: FastAPI):
    catalog: Catalog = app.state.catalog
    logger.info("Library catalog API started", **catalog.counts())
    yield
    # Ends open subscriptions so their websockets can close
    catalog.notifications.close()
    logger.info("Library catalog API stopped")


def create_app(catalog: Catalog | None = None) -> FastAPI:
    """Build the application around ``catalog``.

    Args:
        catalog: Catalog to serve. When omitted a new one is created, seeded
            if ``settings.seed_on_startup``.
    """
    if catalog is None:
        catalog = Catalog.create(seed=settings.seed_on_startup)

    validate_schema()

    app = FastAPI(
        title="Library Catalog API",
        description="GraphQL API over an in-memory catalog of books, authors and genres",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.catalog = catalog

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(create_graphql_router(catalog, graphiql=settings.graphiql))
    logger.info("GraphQL endpoint ready", endpoint="/graphql", graphiql=settings.graphiql)

    return app


app = create_app()
