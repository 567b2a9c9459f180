"""Fold a specifier list over a request.

The fold visits ``always_parse`` followed by the caller's specifiers and
ends in one of two outcomes:

- Fatal: a specifier needed a collaborator that is not configured, or asked
  for authorization in a mode that cannot await it. Nothing after it is
  processed and no partial result is kept.
- Accumulated: every specifier was visited. Missing fields and unknown
  sources are collected as field-level error codes without stopping the
  fold, and a requested authorization is recorded for the caller to resolve.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from request_parser.config import ParserConfig
from request_parser.extraction.fields import resolve
from request_parser.extraction.protocols import RequestLike
from request_parser.specifiers import iter_specifiers
from request_parser.types.core import (
    Accumulated,
    AuthRequest,
    ExtractionResult,
    Fatal,
    Source,
    Specifier,
)
from request_parser.types.errors import (
    ConfigurationError,
    ErrorCode,
    incorrect_key,
    missing_field,
)
from request_parser.utils.logger import get_logger, is_debug_enabled


def fold_specifiers(
    request: RequestLike | Mapping[str, Any],
    needed_data: Sequence[Any],
    config: ParserConfig,
    *,
    allow_auth: bool,
) -> Fatal | Accumulated:
    """
    Extract every specified field from ``request``.

    Args:
        request: The request object
        needed_data: The caller's specifier list (already validated)
        config: Parser configuration
        allow_auth: Whether Auth specifiers may be deferred for resolution;
            when False the first one ends the fold with
            ``sync_auth_not_possible``

    Returns:
        Fatal or Accumulated
    """
    log = get_logger()
    trace = is_debug_enabled()
    result = ExtractionResult()
    errors: list[str] = []
    auth: AuthRequest | None = None

    specs = iter_specifiers(needed_data, config)
    while True:
        try:
            spec = next(specs)
        except StopIteration:
            break
        except ConfigurationError as e:
            return Fatal(str(e.code))

        if trace:
            log.debug("Compiled specifier {!r} -> {}", spec.raw, spec)

        if spec.source is Source.AUTH:
            if not allow_auth:
                return Fatal(str(ErrorCode.SYNC_AUTH_NOT_POSSIBLE))
            if not config.can_authorize:
                return Fatal(str(ErrorCode.AUTH_FUNCTION_NOT_SET))
            auth = AuthRequest(optional=spec.optional or (auth is not None and auth.optional))
            continue

        if spec.source is None:
            errors.append(incorrect_key(spec.raw))
            continue

        _apply(request, spec, config, result, errors)

    return Accumulated(result=result, errors=tuple(errors), auth=auth)


def _apply(
    request: Any,
    spec: Specifier,
    config: ParserConfig,
    result: ExtractionResult,
    errors: list[str],
) -> None:
    found, value = resolve(request, spec, config)
    if found:
        result.section(spec.source)[spec.field_name] = value
    else:
        errors.append(missing_field(spec.source.value, spec.field_name))
