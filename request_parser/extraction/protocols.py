"""Collaborator protocols for the extraction engine.

The engine only needs a request exposing four sections and, when the
corresponding markers are used, a sanitize function and an auth function.
Framework request objects satisfy RequestLike by exposing ``body``,
``headers``, ``params`` and ``query``; plain mappings with those keys work
as well.
"""

from __future__ import annotations

from collections.abc import Awaitable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RequestLike(Protocol):
    """A request exposing the four sections the parser reads."""

    @property
    def body(self) -> Mapping[str, Any] | None: ...

    @property
    def headers(self) -> Mapping[str, Any] | None: ...

    @property
    def params(self) -> Mapping[str, Any] | None: ...

    @property
    def query(self) -> Mapping[str, Any] | None: ...


class SanitizeFunction(Protocol):
    """Called once per sanitize-marked value not excluded by its kind."""

    def __call__(self, value: Any, /) -> Any: ...


class AuthFunction(Protocol):
    """Resolves a principal from request headers.

    Raising signals an auth failure; returning a falsy value means no
    principal could be resolved.
    """

    def __call__(self, headers: Mapping[str, Any], /) -> Awaitable[Any] | Any: ...
