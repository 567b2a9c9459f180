"""RequestParser: the public entry point.

A RequestParser owns one immutable ParserConfig and offers two execution
modes over the same extraction engine:

- parse_sync: returns immediately, rejects Auth specifiers
- parse: coroutine that additionally resolves authorization through the
  configured auth function, optionally reporting to a ``(error, result)``
  callback

Neither mode raises. Parser errors, auth failures and unexpected exceptions
all come back as a ParseFailure.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from request_parser.config import ParserConfig
from request_parser.extraction import (
    AuthFailure,
    RequestLike,
    fold_specifiers,
    read_section,
    resolve_authorization,
)
from request_parser.specifiers import check_input
from request_parser.types.core import ExtractionResult, Fatal, ParseFailure, Source
from request_parser.types.errors import ErrorCode, RequestParserError
from request_parser.utils.logger import get_logger, with_correlation_id

ParseOutcome = ExtractionResult | ParseFailure
Callback = Callable[[Any, Any], Any]


def _handle_exception(operation: str, e: Exception) -> ParseFailure:
    if isinstance(e, RequestParserError):
        return e.to_failure()
    if isinstance(e, AuthFailure):
        return ParseFailure(error=e.error)
    get_logger().opt(exception=e).warning(
        "Unexpected error in operation '{}': {}: {}", operation, type(e).__name__, e
    )
    return ParseFailure(error=e)


def _call_boundary(operation: str):
    """Decorator converting every exception raised by a parse call into a ParseFailure.

    Each call runs in its own correlation ID scope. Supports both sync and
    async implementations.
    """

    def decorator(func):
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                with with_correlation_id(operation=operation):
                    try:
                        return await func(*args, **kwargs)
                    except Exception as e:
                        return _handle_exception(operation, e)

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            with with_correlation_id(operation=operation):
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    return _handle_exception(operation, e)

        return sync_wrapper

    return decorator


class RequestParser:
    """Extracts, sanitizes and authorizes request fields from specifier lists.

    Usage:
        parser = RequestParser(sanitize_function=strip_markup, auth_function=load_user)

        result = parser.parse_sync(request, ["Bid", "H*lang?"])

        result = await parser.parse(request, ["Bid", "A"])
        if result.ok:
            print(result.authorization)
    """

    def __init__(self, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Create a parser.

        Args:
            options: Mapping of options, camelCase or snake_case names
            **kwargs: snake_case options overriding ``options``
        """
        self._config = ParserConfig.from_options(options, **kwargs)

    @property
    def config(self) -> ParserConfig:
        return self._config

    @_call_boundary("parse_sync")
    def parse_sync(
        self,
        request: RequestLike | Mapping[str, Any],
        needed_data: Sequence[str],
    ) -> ParseOutcome:
        """Extract fields without authorization.

        Args:
            request: Object (or mapping) exposing body, headers, params and query
            needed_data: Specifier strings, processed after ``always_parse``

        Returns:
            The extraction result, or a ParseFailure. Any Auth specifier
            fails the call with ``sync_auth_not_possible``.
        """
        check_input(request, needed_data, self._config)
        outcome = fold_specifiers(request, needed_data, self._config, allow_auth=False)
        if isinstance(outcome, Fatal):
            return ParseFailure(error=outcome.code)
        if outcome.errors:
            return ParseFailure(error=str(ErrorCode.PARSER_ERROR), errors=outcome.errors)
        return outcome.result

    async def parse(
        self,
        request: Any,
        needed_data: Sequence[str],
        callback: Callback | None = None,
    ) -> ParseOutcome:
        """Extract fields and resolve authorization.

        Field extraction completes before the auth function is awaited, and
        the auth function is only awaited when every field resolved.

        Args:
            request: Object (or mapping) exposing body, headers, params and query
            needed_data: Specifier strings, processed after ``always_parse``
            callback: Optional ``callback(error, result)`` invoked once with
                the outcome. On a ``parser_error`` the second argument is
                the list of field-level error codes.

        Returns:
            The extraction result, or a ParseFailure
        """
        outcome = await self._parse(request, needed_data)
        if callback is not None:
            _deliver(outcome, callback)
        return outcome

    def parse_callback(
        self,
        request: Any,
        needed_data: Sequence[str],
        callback: Callback,
    ) -> ParseOutcome | asyncio.Task:
        """Run ``parse`` with a callback from synchronous code.

        Without a running event loop the parse runs to completion and its
        outcome is returned. Inside a running loop it is scheduled as a task
        and the task is returned.
        """
        coro = self.parse(request, needed_data, callback)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(coro)
        return loop.create_task(coro)

    @_call_boundary("parse")
    async def _parse(
        self,
        request: RequestLike | Mapping[str, Any],
        needed_data: Sequence[str],
    ) -> ParseOutcome:
        config = self._config
        check_input(request, needed_data, config)
        outcome = fold_specifiers(request, needed_data, config, allow_auth=True)
        if isinstance(outcome, Fatal):
            return ParseFailure(error=outcome.code)
        if outcome.errors:
            return ParseFailure(error=str(ErrorCode.PARSER_ERROR), errors=outcome.errors)

        result = outcome.result
        if outcome.auth is not None:
            result.authorization = await resolve_authorization(
                config.auth_function,
                read_section(request, Source.HEADERS),
                optional=outcome.auth.optional,
            )
        return result


def _deliver(outcome: ParseOutcome, callback: Callback) -> None:
    if outcome.ok:
        callback(None, outcome)
    elif outcome.error == ErrorCode.PARSER_ERROR:
        callback(outcome.error, list(outcome.errors))
    else:
        callback(outcome.error, None)
