"""Shared constants and helpers for request_parser.

Centralizes the specifier grammar, marker characters, default sanitize
exclusions and timezone-aware datetime helpers.
"""

import re
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)


# Longest field name the grammar accepts.
MAX_FIELD_NAME_LENGTH: int = 100

# Source letter, optional sanitize marker, field name, optional marker.
SPECIFIER_PATTERN: str = rf"^[ABHPQ][*]?[A-Za-z0-9_-]{{0,{MAX_FIELD_NAME_LENGTH}}}[?]?$"
SPECIFIER_REGEX: re.Pattern[str] = re.compile(SPECIFIER_PATTERN)

SANITIZE_MARKER: str = "*"
OPTIONAL_MARKER: str = "?"

# Value kinds that are returned untouched even when sanitizing is requested.
DEFAULT_EXCLUDE_SANITIZE_TYPES: frozenset[str] = frozenset({"boolean", "number"})

# Environment variable supplying the default for ``disable_regex``.
DISABLE_REGEX_ENV: str = "REQUEST_PARSER_DISABLE_REGEX"
