"""Identifier exception hierarchy with structured diagnostics.

One exception class per error kind. All exceptions store Diagnostic objects
for rich error information and expose the matching DiagnosticCode as
``code`` even when constructed from a plain message string.

IdentifierError derives from ValueError: malformed identifier text is a bad
value, and validation frameworks (pydantic) translate ValueError into their
own validation errors.

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from .codes import Diagnostic, DiagnosticCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "IdentifierError",
    # Length
    "LengthError",
    "MaximumLengthExceededError",
    "MinimumLengthNotSatisfiedError",
    # Grammar
    "MissingSigilError",
    "MissingDelimiterError",
    # Authority
    "InvalidHostError",
    "InvalidServerNameError",
    # Server key identifiers
    "MissingServerKeyDelimiterError",
    "UnknownKeyAlgorithmError",
    # Character class
    "InvalidCharactersError",
]


class IdentifierError(ValueError):
    """Base exception for all identifier validation errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    code: ClassVar[DiagnosticCode]

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IdentifierError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def message(self) -> str:
        """Short message without the formatted help/note lines."""
        if self.diagnostic is not None:
            return self.diagnostic.message
        return str(self)


class LengthError(IdentifierError):
    """Identifier text is outside its permitted length bounds."""


class MaximumLengthExceededError(LengthError):
    """Identifier is longer than 255 bytes (32 characters for room versions)."""

    code = DiagnosticCode.MAXIMUM_LENGTH_EXCEEDED


class MinimumLengthNotSatisfiedError(LengthError):
    """Identifier is shorter than 4 bytes, or a required segment is empty.

    Raised for an empty localpart, an empty server key version and an empty
    room version as well as for short input.
    """

    code = DiagnosticCode.MINIMUM_LENGTH_NOT_SATISFIED


class MissingSigilError(IdentifierError):
    """First character is not the sigil required by the identifier kind."""

    code = DiagnosticCode.MISSING_SIGIL


class MissingDelimiterError(IdentifierError):
    """Room, alias or user identifier has no ``:`` before its server name."""

    code = DiagnosticCode.MISSING_DELIMITER


class InvalidHostError(IdentifierError):
    """Authority suffix has no host at all."""

    code = DiagnosticCode.INVALID_HOST


class InvalidServerNameError(IdentifierError):
    """Authority suffix is present but malformed.

    Examples:
    - Non-numeric or out-of-range port
    - Malformed IPv4 or IPv6 literal
    - Path, query, fragment or userinfo characters after the host
    """

    code = DiagnosticCode.INVALID_SERVER_NAME


class MissingServerKeyDelimiterError(IdentifierError):
    """Server key identifier has no ``:`` between algorithm and version.

    Deliberately not a subclass of MissingDelimiterError: callers tell the
    identifier families apart by exception type.
    """

    code = DiagnosticCode.MISSING_SERVER_KEY_DELIMITER


class UnknownKeyAlgorithmError(IdentifierError):
    """Server key algorithm is not a known ServerKeyAlgorithm."""

    code = DiagnosticCode.UNKNOWN_KEY_ALGORITHM


class InvalidCharactersError(IdentifierError):
    """Server key version contains characters other than alphanumerics and ``_``.

    Only raised when ``IdentifierConfig.strict_key_versions`` is enabled.
    """

    code = DiagnosticCode.INVALID_CHARACTERS
