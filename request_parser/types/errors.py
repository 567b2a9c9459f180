"""
Error handling system for request_parser.

Every fatal condition the parser can hit is modelled as a subclass of
RequestParserError carrying the wire-level error code callers see. These
exceptions never escape a parse call: the call boundary in
``request_parser.parser`` converts them into ParseFailure values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, StrEnum
from typing import TYPE_CHECKING, Any

from request_parser.constants import utcnow

if TYPE_CHECKING:
    from request_parser.types.core import ParseFailure


class ErrorCode(StrEnum):
    """Fixed error codes reported by the parser."""

    # Call shape
    NEEDED_DATA_NO_ARRAY = "neededData_no_array"
    NO_REQUEST_OBJECT = "no_request_object"
    NEEDED_DATA_SIZE_ZERO = "neededData_size_zero"

    # Configuration mismatch
    SANITIZE_FUNCTION_NOT_SET = "sanitizeFunction_not_set"
    AUTH_FUNCTION_NOT_SET = "authFunction_not_set"

    # Mode mismatch
    SYNC_AUTH_NOT_POSSIBLE = "sync_auth_not_possible"

    # Aggregated field-level failures
    PARSER_ERROR = "parser_error"

    # Auth collaborator returned no principal
    NO_PARSED_USER = "no_parsed_user_error"


def regex_error(key: Any) -> str:
    """Code for a specifier that fails the grammar."""
    return f"regex_error_{key}"


def missing_field(section: str, field_name: str) -> str:
    """Code for a required field absent from its request section."""
    return f"{section}_missing_{field_name}"


def incorrect_key(key: Any) -> str:
    """Code for a specifier whose source character is unknown."""
    return f"incorrectKey_{key}"


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    specifier: str | None = None
    timestamp: datetime = field(default_factory=utcnow)


class RequestParserError(Exception):
    """Base error class for request_parser."""

    def __init__(
        self,
        code: str,
        message: str | None = None,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message or code)
        self.code = str(code)
        self.severity = severity
        self.context = context or ErrorContext()

    def to_failure(self) -> ParseFailure:
        """Convert to the value returned from a parse call."""
        from request_parser.types.core import ParseFailure

        return ParseFailure(error=self.code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code,
            "message": str(self),
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "specifier": self.context.specifier,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


class CallShapeError(RequestParserError):
    """The arguments of a parse call are unusable."""

    def __init__(self, code: ErrorCode, context: ErrorContext | None = None) -> None:
        super().__init__(
            code=code,
            message=f"Invalid parse call: {code}",
            severity=ErrorSeverity.HIGH,
            context=context,
        )


class SpecifierGrammarError(RequestParserError):
    """A caller-supplied specifier does not match the grammar."""

    def __init__(self, key: Any, context: ErrorContext | None = None) -> None:
        self.key = key
        super().__init__(
            code=regex_error(key),
            message=f"Specifier {key!r} does not match the specifier grammar",
            context=context or ErrorContext(specifier=str(key)),
        )


class ConfigurationError(RequestParserError):
    """A specifier needs a collaborator the parser was not configured with."""

    def __init__(self, code: ErrorCode, context: ErrorContext | None = None) -> None:
        super().__init__(
            code=code,
            message=f"Parser configuration does not support this specifier: {code}",
            severity=ErrorSeverity.HIGH,
            context=context,
        )


class AuthorizationError(RequestParserError):
    """The auth function resolved no principal for a required Auth specifier."""

    def __init__(self, context: ErrorContext | None = None) -> None:
        super().__init__(
            code=ErrorCode.NO_PARSED_USER,
            message="Auth function returned no principal",
            context=context,
        )
