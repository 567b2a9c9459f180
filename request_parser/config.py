"""Parser configuration.

Each RequestParser owns one immutable ParserConfig built at construction.
Options can be given with the camelCase names used by request-parser
configurations elsewhere (``sanitizeFunction``, ``alwaysParse``, ...) or
with the snake_case field names. Invalid option values fall back to their
defaults instead of raising.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from request_parser.constants import DEFAULT_EXCLUDE_SANITIZE_TYPES, DISABLE_REGEX_ENV
from request_parser.utils.helpers import normalize_kind
from request_parser.utils.logger import logger

if TYPE_CHECKING:
    from request_parser.extraction.protocols import AuthFunction, SanitizeFunction

# camelCase option name -> field name
_OPTION_ALIASES: dict[str, str] = {
    "sanitizeFunction": "sanitize_function",
    "alwaysParse": "always_parse",
    "authFunction": "auth_function",
    "excludeSanitizeTypes": "exclude_sanitize_types",
    "disableRegex": "disable_regex",
}
_FIELDS = frozenset(_OPTION_ALIASES.values())


def _env_disable_regex() -> bool:
    return os.environ.get(DISABLE_REGEX_ENV, "").lower() == "true"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(frozen=True)
class ParserConfig:
    """Immutable configuration of one RequestParser."""

    sanitize_function: SanitizeFunction | None = None
    always_parse: tuple[str, ...] = ()
    auth_function: AuthFunction | None = None
    exclude_sanitize_types: frozenset[str] = DEFAULT_EXCLUDE_SANITIZE_TYPES
    disable_regex: bool = field(default_factory=_env_disable_regex)

    def __post_init__(self) -> None:
        object.__setattr__(self, "always_parse", tuple(self.always_parse))
        object.__setattr__(
            self,
            "exclude_sanitize_types",
            frozenset(normalize_kind(str(kind)) for kind in self.exclude_sanitize_types),
        )

    @property
    def can_sanitize(self) -> bool:
        return self.sanitize_function is not None

    @property
    def can_authorize(self) -> bool:
        return self.auth_function is not None

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any] | None = None, **overrides: Any
    ) -> ParserConfig:
        """Build a config from an options mapping plus keyword overrides.

        Args:
            options: Mapping of option names (camelCase or snake_case)
            **overrides: snake_case options that take precedence over ``options``

        Returns:
            A new ParserConfig; unspecified options keep their defaults
        """
        merged: dict[str, Any] = {}
        for source in (options or {}, overrides):
            for name, value in source.items():
                key = _OPTION_ALIASES.get(name, name)
                if key not in _FIELDS:
                    logger.debug("Ignoring unknown parser option {!r}", name)
                    continue
                merged[key] = value

        kwargs: dict[str, Any] = {}

        if "sanitize_function" in merged:
            kwargs["sanitize_function"] = _callable_or_none("sanitize_function", merged["sanitize_function"])

        if "auth_function" in merged:
            kwargs["auth_function"] = _callable_or_none("auth_function", merged["auth_function"])

        if "always_parse" in merged:
            value = merged["always_parse"]
            if _is_sequence(value):
                kwargs["always_parse"] = tuple(value)
            else:
                logger.debug("always_parse is not a list, using no always-parsed specifiers")

        if "exclude_sanitize_types" in merged:
            value = merged["exclude_sanitize_types"]
            if _is_sequence(value) or isinstance(value, (set, frozenset)):
                kwargs["exclude_sanitize_types"] = frozenset(normalize_kind(str(v)) for v in value)
            else:
                logger.debug("exclude_sanitize_types is not a list, using defaults")

        if "disable_regex" in merged:
            kwargs["disable_regex"] = bool(merged["disable_regex"])

        return cls(**kwargs)


def _callable_or_none(name: str, value: Any) -> Callable[..., Any] | None:
    if value is None:
        return None
    if callable(value):
        return value
    logger.debug("{} is not callable, treating it as unset", name)
    return None
