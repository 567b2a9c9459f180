"""
request_parser - Declarative field extraction for HTTP-like requests.

Callers describe the fields they need as short specifier strings such as
``"Bid"``, ``"H*lang?"`` or ``"A"``. The parser validates the specifiers,
pulls the fields out of the request's body, headers, route params and query
string, optionally runs a sanitize function over them and optionally resolves
an authorization principal through an async auth function.

Usage:
    from request_parser import RequestParser

    parser = RequestParser(sanitize_function=strip_markup)
    result = parser.parse_sync(request, ["Bid", "Q*search?"])
    if result.ok:
        print(result.body["id"])
"""

from request_parser.config import ParserConfig
from request_parser.parser import RequestParser
from request_parser.types import (
    ErrorCode,
    ExtractionResult,
    ParseFailure,
    Request,
    RequestParserError,
    Source,
    Specifier,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "ExtractionResult",
    "ParseFailure",
    "ParserConfig",
    "Request",
    "RequestParser",
    "RequestParserError",
    "Source",
    "Specifier",
]
