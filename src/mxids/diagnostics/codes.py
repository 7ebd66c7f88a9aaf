"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for identifier validation.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    One code per error kind. Organized by category:
        1000-1999: Length errors (byte bounds, empty segments)
        2000-2999: Grammar errors (sigil and delimiter placement)
        3000-3999: Authority errors (host and port)
        4000-4999: Server key identifier errors
        5000-5999: Character class errors
    """

    # Length errors (1000-1999)
    MAXIMUM_LENGTH_EXCEEDED = 1001
    MINIMUM_LENGTH_NOT_SATISFIED = 1002

    # Grammar errors (2000-2999)
    MISSING_SIGIL = 2001
    MISSING_DELIMITER = 2002

    # Authority errors (3000-3999)
    # INVALID_HOST covers an absent host only. A host that is present but
    # malformed, or a bad port, is INVALID_SERVER_NAME.
    INVALID_HOST = 3001
    INVALID_SERVER_NAME = 3002

    # Server key identifier errors (4000-4999)
    MISSING_SERVER_KEY_DELIMITER = 4001
    UNKNOWN_KEY_ALGORITHM = 4002

    # Character class errors (5000-5999)
    # Only raised when IdentifierConfig.strict_key_versions is enabled.
    INVALID_CHARACTERS = 5001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        input_value: The (possibly clipped) text that failed validation
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    input_value: str | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[MISSING_SIGIL]: Identifier must start with '$'
              --> input: '39hvsi03hlne:example.com'
              = help: Prefix the identifier with its sigil
              = note: see https://spec.matrix.org/latest/appendices/#common-identifier-format

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
