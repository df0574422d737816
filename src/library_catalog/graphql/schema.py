"""
The catalog's Strawberry schema and its FastAPI router
"""

from typing import Any

import strawberry
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..catalog import Catalog
from ..logging import get_logger
from ..notifications import BookEvent
from .mutations.root import Mutation
from .queries.root import Query
from .subscriptions.root import Subscription
from .types.author import Author
from .types.book import Book
from .types.genre import Genre

logger = get_logger(__name__)

# Book/Author/Genre are listed so the Entity interface always knows its implementations
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    subscription=Subscription,
    types=[Book, Author, Genre],
)

# Subscription field serving each notification topic
TOPIC_FIELDS = {
    BookEvent.ADDED: "bookAdded",
    BookEvent.UPDATED: "bookUpdated",
    BookEvent.DELETED: "bookDeleted",
}


class SchemaValidationError(RuntimeError):
    """The schema cannot be served."""


def validate_schema() -> None:
    """Fail fast at boot if the schema is broken.

    Runs graphql-core's structural validation and a full introspection
    query, which forces every lazy type reference to resolve, then checks
    that every notification topic has a subscription field.

    Raises:
        SchemaValidationError: Describing every problem found
    """
    graphql_schema = schema._schema

    problems = [str(e) for e in gql_validate_schema(graphql_schema)]
    if not problems:
        result = graphql_sync(graphql_schema, get_introspection_query())
        problems = [str(e) for e in result.errors or ()]

    subscription_type = graphql_schema.subscription_type
    subscription_fields = subscription_type.fields if subscription_type else {}
    problems += [
        f"no subscription field {field} for topic {topic.value}"
        for topic, field in TOPIC_FIELDS.items()
        if field not in subscription_fields
    ]

    if problems:
        logger.error("GraphQL schema validation failed", problems=problems)
        raise SchemaValidationError("; ".join(problems))

    logger.info("GraphQL schema validation successful", types=len(graphql_schema.type_map))


def create_graphql_router(
    catalog: Catalog, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Router serving ``catalog`` over HTTP and WebSocket at ``/graphql``."""

    async def get_context() -> dict[str, Any]:
        # Strawberry adds request (or websocket) and response to this dict
        return {"catalog": catalog}

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
