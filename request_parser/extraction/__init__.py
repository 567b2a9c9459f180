"""Extraction engine.

Resolves compiled specifiers against a request's sections and, in async
mode, the principal through the auth function.

Usage:
    from request_parser.extraction import fold_specifiers

    outcome = fold_specifiers(request, ["Bid", "Hlang?"], config, allow_auth=False)
"""

from request_parser.extraction.auth import AuthFailure, resolve_authorization
from request_parser.extraction.engine import fold_specifiers
from request_parser.extraction.fields import extract_field, read_section, resolve
from request_parser.extraction.protocols import AuthFunction, RequestLike, SanitizeFunction

__all__ = [
    "AuthFailure",
    "AuthFunction",
    "RequestLike",
    "SanitizeFunction",
    "extract_field",
    "fold_specifiers",
    "read_section",
    "resolve",
    "resolve_authorization",
]
