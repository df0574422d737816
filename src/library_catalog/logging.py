"""
Structured logging for the catalog service, built on structlog
"""

import base64
import logging
import secrets
import struct
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

# Per-request context, populated by LoggingContextMiddleware
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)


class RequestContextFilter:
    """structlog processor that stamps events with the current request context."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        del logger, method_name

        for key, var in (("request_id", request_id_ctx), ("graphql_operation", operation_ctx)):
            value = var.get()
            if value and key not in event_dict:
                event_dict[key] = value

        return event_dict


def _level_number(level: str | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    return logging.getLevelNamesMapping().get((level or "INFO").upper(), logging.INFO)


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Colored console output at DEBUG level. Otherwise one JSON
            object per line.
        level: Minimum level name when not in debug mode (default INFO).
    """
    logging.basicConfig(
        level=_level_number(level, debug),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            RequestContextFilter(),
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Module-level logger; call as ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """14 url-safe characters: a microsecond clock followed by 16 random bits."""
    packed = struct.pack(">QH", time.time_ns() // 1_000, secrets.randbits(16))
    return base64.urlsafe_b64encode(packed).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, operation: str | None = None) -> str:
    """Bind a request (and optionally its GraphQL operation) to the current context.

    Returns the request id, generating one when none is given.
    """
    request_id = request_id or generate_request_id()
    request_id_ctx.set(request_id)
    operation_ctx.set(operation)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
    operation_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()
