"""
request_parser utility modules.

This package provides shared utilities used across the request_parser codebase:
- Logging (correlation IDs per parse call)
- Value kind helpers
- Security (ready-made sanitize function)
"""

# Logger
from .logger import (
    RequestContext,
    generate_request_id,
    get_correlation_id,
    get_logger,
    get_request_context,
    is_debug_enabled,
    logger,
    with_correlation_id,
)

# Helpers
from .helpers import normalize_kind, read_member, value_kind

# Security
from .security import strip_markup

__all__ = [
    # Logger
    "RequestContext",
    "generate_request_id",
    "get_correlation_id",
    "get_logger",
    "get_request_context",
    "is_debug_enabled",
    "logger",
    "with_correlation_id",
    # Helpers
    "normalize_kind",
    "read_member",
    "value_kind",
    # Security
    "strip_markup",
]
