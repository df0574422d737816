"""
Request logging middleware
"""

import json
import re
import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

REDACTED = "[REDACTED]"

SENSITIVE_KEYS = frozenset(
    {"password", "token", "secret", "auth", "key", "session", "cookie", "credentials"}
)

# GraphQL documents and variables can carry anything; never log them from a GET
GRAPHQL_PARAMS = ("query", "variables", "extensions")

_OPERATION = re.compile(r"\b(query|mutation|subscription)\s+(\w+)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``params`` with every key that looks like a credential redacted."""
    return {
        key: REDACTED if any(word in key.lower() for word in SENSITIVE_KEYS) else value
        for key, value in params.items()
    }


def operation_name_from_payload(data: dict[str, Any]) -> str | None:
    """Name a GraphQL request for the logs.

    An explicit ``operationName`` wins. Otherwise the first named operation
    in the document is used, prefixed with its kind unless it is a query.
    """
    name = data.get("operationName")
    if isinstance(name, str) and name:
        return name

    document = data.get("query")
    if not isinstance(document, str) or not document:
        return None
    if "__schema" in document or "IntrospectionQuery" in document:
        return "__introspection"

    match = _OPERATION.search(document)
    if match is None:
        return "unnamed_operation"
    kind, name = match.groups()
    return name if kind == "query" else f"{kind}:{name}"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        return operation_name_from_payload(dict(request.query_params))
    if request.method != "POST":
        return None

    body = await request.body()
    if not body:
        return None
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return operation_name_from_payload(data) if isinstance(data, dict) else None


def _loggable_params(request: Request) -> dict[str, Any] | None:
    if not request.query_params:
        return None
    params = sanitize_query_params(dict(request.query_params))
    if request.url.path == "/graphql":
        params.update({k: REDACTED for k in GRAPHQL_PARAMS if k in params})
    return params


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id to every log line of a request and log its outcome.

    A client-supplied ``X-Request-ID`` is reused; otherwise one is generated.
    The id is echoed back in the response headers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        operation = await extract_graphql_operation_name(request)
        request_id = set_request_context(request.headers.get("x-request-id"), operation)
        started = time.perf_counter()

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            query_params=_loggable_params(request),
            user_agent=request.headers.get("user-agent"),
            remote_addr=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed", method=request.method, path=request.url.path, error=str(e)
            )
            raise
        else:
            response.headers["X-Request-ID"] = request_id
            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_request_context()
