"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"

# Query-string keys that carry the GraphQL payload itself
GRAPHQL_PAYLOAD_KEYS = ("query", "variables", "extensions")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact the GraphQL payload from query parameters before logging.

    Args:
        params: Dictionary of query parameters

    Returns:
        Dictionary with the GraphQL document and variables redacted
    """
    return {
        key: "[REDACTED]" if key in GRAPHQL_PAYLOAD_KEYS else value
        for key, value in params.items()
    }


def operation_name_from_document(document: Any) -> str | None:
    """Derive a loggable operation name from a raw GraphQL document."""
    if not isinstance(document, str) or not document:
        return None
    if "__schema" in document or "IntrospectionQuery" in document:
        return "__introspection"

    match = re.search(r"\bquery\s+(\w+)", document) or re.search(r"\bmutation\s+(\w+)", document)
    if match:
        kind = "mutation:" if document.lstrip().startswith("mutation") else ""
        return f"{kind}{match.group(1)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Find the operation name of a GET or POST request to /graphql."""
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if isinstance(op, str) and op:
            return op
        return operation_name_from_document(params.get("query"))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None

        op = data.get("operationName")
        if isinstance(op, str) and op:
            return op
        return operation_name_from_document(data.get("query"))

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        graphql_operation = await extract_graphql_operation_name(request)
        set_request_context(operation=graphql_operation)

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(dict(request.query_params))

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=sanitized_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
