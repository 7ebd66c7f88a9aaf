"""Diagnostic system for identifier validation errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    IdentifierError,
    InvalidCharactersError,
    InvalidHostError,
    InvalidServerNameError,
    LengthError,
    MaximumLengthExceededError,
    MinimumLengthNotSatisfiedError,
    MissingDelimiterError,
    MissingServerKeyDelimiterError,
    MissingSigilError,
    UnknownKeyAlgorithmError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IdentifierError",
    "InvalidCharactersError",
    "InvalidHostError",
    "InvalidServerNameError",
    "LengthError",
    "MaximumLengthExceededError",
    "MinimumLengthNotSatisfiedError",
    "MissingDelimiterError",
    "MissingServerKeyDelimiterError",
    "MissingSigilError",
    "OutputFormat",
    "UnknownKeyAlgorithmError",
]
