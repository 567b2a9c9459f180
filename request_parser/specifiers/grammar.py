"""Call-shape and grammar validation for specifier lists."""

from __future__ import annotations

from typing import Any

from request_parser.config import ParserConfig
from request_parser.constants import SPECIFIER_REGEX
from request_parser.types.errors import (
    CallShapeError,
    ErrorCode,
    ErrorContext,
    SpecifierGrammarError,
)


def is_valid_specifier(key: Any) -> bool:
    """Check a single specifier against the grammar."""
    return isinstance(key, str) and SPECIFIER_REGEX.fullmatch(key) is not None


def check_input(request: Any, needed_data: Any, config: ParserConfig) -> None:
    """Validate the arguments of a parse call.

    Only the caller-supplied list is checked against the grammar; entries of
    ``config.always_parse`` are operator-supplied and skip it. Validation
    stops at the first entry that fails.

    Args:
        request: The request object
        needed_data: The caller's specifier list
        config: Parser configuration

    Raises:
        CallShapeError: If the list is not a list, the request is missing or
            there is nothing to parse
        SpecifierGrammarError: For the first specifier violating the grammar
    """
    context = ErrorContext(operation="check_input")

    if not isinstance(needed_data, (list, tuple)):
        raise CallShapeError(ErrorCode.NEEDED_DATA_NO_ARRAY, context)
    if request is None:
        raise CallShapeError(ErrorCode.NO_REQUEST_OBJECT, context)
    if not needed_data and not config.always_parse:
        raise CallShapeError(ErrorCode.NEEDED_DATA_SIZE_ZERO, context)

    if config.disable_regex:
        return

    for key in needed_data:
        if not is_valid_specifier(key):
            raise SpecifierGrammarError(key)
