"""Compile specifier strings into Specifier directives.

A specifier is ``<source>[*]<field>[?]``:

    B  body       H  headers     P  params
    Q  query      A  authorization

``*`` after the source letter requests the sanitize function, a trailing
``?`` makes the field optional. Unknown source letters compile to a
directive with ``source=None``; the engine reports those as field-level
errors rather than failing the call.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from request_parser.config import ParserConfig
from request_parser.constants import OPTIONAL_MARKER, SANITIZE_MARKER
from request_parser.types.core import Source, Specifier
from request_parser.types.errors import ConfigurationError, ErrorCode, ErrorContext


def compile_specifier(key: Any, config: ParserConfig) -> Specifier:
    """Parse one specifier.

    Args:
        key: The specifier string
        config: Parser configuration (decides whether ``*`` is allowed)

    Returns:
        The compiled directive

    Raises:
        ConfigurationError: If the key carries ``*`` and no sanitize function
            is configured
    """
    if not isinstance(key, str):
        return Specifier(raw=str(key), source=None, field_name=str(key))

    source = Source.from_prefix(key[:1])
    rest = key[1:]
    sanitize = False
    optional = False

    # Authorization is never sanitized; only the optional marker matters.
    if source is Source.AUTH:
        optional = key.endswith(OPTIONAL_MARKER)
        if optional:
            rest = rest[: -len(OPTIONAL_MARKER)]
        return Specifier(raw=key, source=source, optional=optional, field_name=rest)

    if rest.startswith(SANITIZE_MARKER):
        if not config.can_sanitize:
            raise ConfigurationError(
                ErrorCode.SANITIZE_FUNCTION_NOT_SET,
                ErrorContext(operation="compile_specifier", specifier=key),
            )
        sanitize = True
        rest = rest[len(SANITIZE_MARKER):]

    if rest.endswith(OPTIONAL_MARKER):
        optional = True
        rest = rest[: -len(OPTIONAL_MARKER)]

    return Specifier(
        raw=key,
        source=source,
        sanitize=sanitize,
        optional=optional,
        field_name=rest,
    )


def iter_specifiers(needed_data: Sequence[Any], config: ParserConfig) -> Iterator[Specifier]:
    """Compile ``always_parse`` followed by ``needed_data``, in order.

    Compilation is lazy: a ConfigurationError surfaces when the offending
    key is reached, after the directives before it have been yielded.
    """
    for key in (*config.always_parse, *needed_data):
        yield compile_specifier(key, config)
