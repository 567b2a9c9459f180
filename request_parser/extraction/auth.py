"""Authorization through the configured auth function.

This is the only step of a parse that suspends: the auth function is
awaited once, after every field has been extracted successfully.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any

from request_parser.extraction.protocols import AuthFunction
from request_parser.types.errors import AuthorizationError, ErrorContext
from request_parser.utils.logger import get_logger


class AuthFailure(Exception):
    """Wraps the error raised by the auth function so it can be surfaced verbatim."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error


async def resolve_authorization(
    auth_function: AuthFunction,
    headers: Mapping[str, Any] | None,
    *,
    optional: bool,
) -> Any:
    """
    Resolve the principal for a request.

    Args:
        auth_function: Async (or plain) callable taking the header mapping
        headers: The request's headers; None is passed on as an empty dict
        optional: Whether authorization was requested with ``A?``

    Returns:
        The principal, or None when optional authorization failed

    Raises:
        AuthFailure: The auth function raised and authorization is required
        AuthorizationError: No principal resolved and authorization is required
    """
    log = get_logger()
    try:
        principal = auth_function(headers if headers is not None else {})
        if inspect.isawaitable(principal):
            principal = await principal
    except Exception as e:
        if optional:
            log.debug("Optional authorization failed, continuing without principal: {}", e)
            return None
        raise AuthFailure(e) from e

    if not principal:
        if optional:
            return None
        raise AuthorizationError(ErrorContext(operation="resolve_authorization"))

    return principal
