"""
request_parser type definitions.

This module exports all type definitions for the request_parser package.
"""

# Core types
from .core import (
    Accumulated,
    AuthRequest,
    ExtractionResult,
    Fatal,
    ParseFailure,
    Request,
    Source,
    Specifier,
)

# Error types
from .errors import (
    AuthorizationError,
    CallShapeError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    RequestParserError,
    SpecifierGrammarError,
    incorrect_key,
    missing_field,
    regex_error,
)

__all__ = [
    # Core types
    "Accumulated",
    "AuthRequest",
    "ExtractionResult",
    "Fatal",
    "ParseFailure",
    "Request",
    "Source",
    "Specifier",
    # Error types
    "ErrorCode",
    "ErrorContext",
    "ErrorSeverity",
    "RequestParserError",
    "CallShapeError",
    "SpecifierGrammarError",
    "ConfigurationError",
    "AuthorizationError",
    "incorrect_key",
    "missing_field",
    "regex_error",
]
