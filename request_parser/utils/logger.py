"""
Logging utility for request_parser.

Correlation ID Support:
- Uses contextvars to propagate correlation IDs across async operations,
  so the auth step of an async parse logs under the same ID as the
  synchronous extraction before it
- Every parse call opens its own scope with with_correlation_id()
- get_logger() returns the loguru logger bound to the current ID
"""

import os
import secrets
import time
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Generator

from loguru import logger as loguru_logger

# ============================================================================
# Request Context
# ============================================================================


@dataclass
class RequestContext:
    """Request context for correlation ID tracking."""

    correlation_id: str
    operation: str | None = None


# Context variable for request tracking
_request_context: ContextVar[RequestContext | None] = ContextVar(
    "request_context", default=None
)


def generate_request_id() -> str:
    """
    Generate a unique request ID for correlation.

    Format: req_<timestamp_base36>_<random_hex>
    """
    timestamp = int(time.time() * 1000)
    random_part = secrets.token_hex(4)
    return f"req_{base36_encode(timestamp)}_{random_part}"


def base36_encode(number: int) -> str:
    """Encode an integer to base36 string."""
    if number == 0:
        return "0"

    chars = "0123456789abcdefghijklmnopqrstuvwxyz"
    result = []
    while number:
        result.append(chars[number % 36])
        number //= 36
    return "".join(reversed(result))


def get_request_context() -> RequestContext | None:
    """Get the current request context (if any)."""
    return _request_context.get()


def get_correlation_id() -> str | None:
    """Get the current correlation ID (if any)."""
    ctx = get_request_context()
    return ctx.correlation_id if ctx else None


@contextmanager
def with_correlation_id(
    correlation_id: str | None = None,
    operation: str | None = None,
) -> Generator[RequestContext, None, None]:
    """
    Context manager for running code with a correlation ID.

    Args:
        correlation_id: The correlation ID to use (generated when omitted)
        operation: Optional operation name for additional context

    Yields:
        The RequestContext object
    """
    context = RequestContext(
        correlation_id=correlation_id or generate_request_id(),
        operation=operation,
    )
    token = _request_context.set(context)
    try:
        yield context
    finally:
        _request_context.reset(token)


def get_logger():
    """Return the logger bound to the current correlation ID and operation."""
    ctx = get_request_context()
    if ctx is None:
        return logger
    return logger.bind(correlation_id=ctx.correlation_id, operation=ctx.operation)


# ============================================================================
# Logger Configuration
# ============================================================================


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get("REQUEST_PARSER_DEBUG", "").lower() == "true"


# Export loguru logger for direct use
logger = loguru_logger
