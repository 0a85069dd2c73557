"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from ..store import InMemoryStore
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


class SchemaValidationError(Exception):
    """Raised when the schema fails validation at startup."""


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core's structural validation and an introspection query so
    unresolved lazy types fail the server start instead of the first request.

    Raises:
        SchemaValidationError: If the schema is invalid or has unresolved types
    """
    from graphql import get_introspection_query, graphql_sync

    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=message)
        raise SchemaValidationError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=message)
        raise SchemaValidationError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful")


def print_schema() -> str:
    """Return the schema in SDL form."""
    return schema.as_str()


# Create the GraphQL router for FastAPI integration
def create_graphql_router(
    store: InMemoryStore,
    *,
    graphiql: bool = True,
    legacy_add_author: bool = False,
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI bound to a single store."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(store, legacy_add_author=legacy_add_author, request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
