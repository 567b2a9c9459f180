"""Per-field resolution against a request section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from request_parser.config import ParserConfig
from request_parser.extraction.protocols import RequestLike
from request_parser.types.core import Source, Specifier
from request_parser.utils.helpers import read_member, value_kind


def read_section(
    request: RequestLike | Mapping[str, Any], source: Source
) -> Mapping[str, Any] | None:
    """Return the request section backing ``source``, or None if absent."""
    section = read_member(request, source.value)
    if section is None or not isinstance(section, Mapping):
        return None
    return section


def extract_field(
    section: Mapping[str, Any] | None,
    name: str,
    *,
    sanitize: bool,
    optional: bool,
    config: ParserConfig,
) -> tuple[bool, Any]:
    """Resolve one field.

    A field counts as present when its name is a key of the section, even
    if the value is None. None and values whose kind is listed in
    ``config.exclude_sanitize_types`` are never passed to the sanitize
    function.

    Args:
        section: The request section, or None when the request lacks it
        name: Key to look up
        sanitize: Whether the sanitize function applies
        optional: Whether a missing field resolves to None instead of failing
        config: Parser configuration

    Returns:
        ``(True, value)`` when resolved, ``(False, None)`` when a required
        field (or its whole section) is missing
    """
    if section is None:
        return False, None

    if name not in section:
        if optional:
            return True, None
        return False, None

    value = section[name]
    if value is None:
        return True, None
    if value_kind(value) in config.exclude_sanitize_types:
        return True, value
    if sanitize:
        return True, config.sanitize_function(value)
    return True, value


def resolve(
    request: RequestLike | Mapping[str, Any], spec: Specifier, config: ParserConfig
) -> tuple[bool, Any]:
    """Resolve a section directive against the request."""
    section = read_section(request, spec.source)
    return extract_field(
        section,
        spec.lookup_name,
        sanitize=spec.sanitize,
        optional=spec.optional,
        config=config,
    )
