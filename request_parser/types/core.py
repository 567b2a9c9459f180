"""
Core types for request field extraction.

These are the structures passed between the specifier compiler, the
extraction engine and callers: compiled directives, the per-call result,
the failure value and the outcome of folding a specifier list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Source(StrEnum):
    """Where a specifier's value comes from."""

    BODY = "body"
    HEADERS = "headers"
    PARAMS = "params"
    QUERY = "query"
    AUTH = "auth"

    @classmethod
    def from_prefix(cls, prefix: str) -> Source | None:
        """Map a specifier's leading character to its source, or None."""
        return _PREFIXES.get(prefix)

    @property
    def is_section(self) -> bool:
        """True for sources backed by a request section."""
        return self is not Source.AUTH


_PREFIXES: dict[str, Source] = {
    "A": Source.AUTH,
    "B": Source.BODY,
    "H": Source.HEADERS,
    "P": Source.PARAMS,
    "Q": Source.QUERY,
}


@dataclass(frozen=True, slots=True)
class Specifier:
    """A compiled specifier string."""

    raw: str
    source: Source | None
    sanitize: bool = False
    optional: bool = False
    field_name: str = ""

    @property
    def lookup_name(self) -> str:
        """Key used to read the request section (headers fold to lower-case)."""
        if self.source is Source.HEADERS:
            return self.field_name.lower()
        return self.field_name


@dataclass
class ExtractionResult:
    """Fields extracted from one request, grouped by section."""

    body: dict[str, Any] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, Any] = field(default_factory=dict)
    query: dict[str, Any] = field(default_factory=dict)
    authorization: Any = None

    ok = True

    def section(self, source: Source) -> dict[str, Any]:
        """Return the result mapping for a section source."""
        if not source.is_section:
            raise ValueError(f"{source} has no result section")
        return getattr(self, source.value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "body": dict(self.body),
            "params": dict(self.params),
            "headers": dict(self.headers),
            "query": dict(self.query),
            "authorization": self.authorization,
        }


@dataclass(frozen=True)
class ParseFailure:
    """The value a parse call produces instead of a result.

    ``error`` is an error code string for parser-detected failures, the auth
    function's exception when a required authorization failed, or the
    unexpected exception caught at the call boundary. ``errors`` lists the
    field-level codes behind a ``parser_error``.
    """

    error: Any
    errors: tuple[str, ...] = ()

    ok = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"error": self.error}
        if self.errors:
            data["errors"] = list(self.errors)
        return data


@dataclass(frozen=True, slots=True)
class AuthRequest:
    """A deferred Auth directive recorded while folding the specifier list."""

    optional: bool = False


@dataclass(frozen=True, slots=True)
class Fatal:
    """Fold outcome: a fatal error aborted the specifier list."""

    code: str


@dataclass(frozen=True, slots=True)
class Accumulated:
    """Fold outcome: every specifier was processed."""

    result: ExtractionResult
    errors: tuple[str, ...] = ()
    auth: AuthRequest | None = None


@dataclass
class Request:
    """Minimal request object exposing the four sections the parser reads.

    Framework request objects work as long as they expose ``body``,
    ``headers``, ``params`` and ``query`` attributes (or keys).
    """

    body: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, Any] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    query: dict[str, Any] = field(default_factory=dict)
