"""Grammar of server signing key identifiers.

    server-key-id = algorithm ":" version

No sigil and no overall length bound. Checks run in this order:

    1. Delimiter present (MissingServerKeyDelimiterError)
    2. Delimiter index in 1..255 (UnknownKeyAlgorithmError)
    3. Algorithm is a ServerKeyAlgorithm member, case-sensitive
       (UnknownKeyAlgorithmError)
    4. Version non-empty (MinimumLengthNotSatisfiedError)
    5. Optional, off by default: version is alphanumerics and "_" only
       (InvalidCharactersError)

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

from mxids.constants import DELIMITER, MAX_KEY_DELIMITER_INDEX
from mxids.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    InvalidCharactersError,
    MinimumLengthNotSatisfiedError,
    MissingServerKeyDelimiterError,
    UnknownKeyAlgorithmError,
)
from mxids.enums import ServerKeyAlgorithm

__all__ = ["is_key_version_char", "parse_server_key_id"]


def is_key_version_char(ch: str) -> bool:
    """Check if character is allowed in a key version under the strict rule.

    Example:
        >>> is_key_version_char('a'), is_key_version_char('_'), is_key_version_char('-')
        (True, True, False)
    """
    return ch.isalnum() or ch == "_"


def parse_server_key_id(text: str, *, strict_version: bool = False) -> int:
    """Validate a server key identifier.

    Args:
        text: Untrusted key identifier text
        strict_version: Enforce the alphanumeric-plus-underscore rule on
            the version segment

    Returns:
        Index of the ':' delimiter

    Raises:
        MissingServerKeyDelimiterError: If there is no ':'
        UnknownKeyAlgorithmError: If the algorithm is unknown
        MinimumLengthNotSatisfiedError: If the version is empty
        InvalidCharactersError: If strict_version and the version has
            characters other than alphanumerics and '_'

    Example:
        >>> parse_server_key_id("ed25519:abc")
        7
    """
    delimiter_offset = text.find(DELIMITER)
    if delimiter_offset == -1:
        raise MissingServerKeyDelimiterError(ErrorTemplate.missing_server_key_delimiter(text))

    algorithm = text[:delimiter_offset]
    if not 0 < delimiter_offset <= MAX_KEY_DELIMITER_INDEX:
        raise UnknownKeyAlgorithmError(_unknown_algorithm(text, algorithm))
    try:
        ServerKeyAlgorithm(algorithm)
    except ValueError as e:
        raise UnknownKeyAlgorithmError(_unknown_algorithm(text, algorithm)) from e

    version = text[delimiter_offset + 1 :]
    if not version:
        raise MinimumLengthNotSatisfiedError(ErrorTemplate.empty_segment(text, "version"))
    if strict_version and not all(is_key_version_char(ch) for ch in version):
        raise InvalidCharactersError(ErrorTemplate.invalid_characters(text, "version"))

    return delimiter_offset


def _unknown_algorithm(text: str, algorithm: str) -> Diagnostic:
    known = tuple(member.value for member in ServerKeyAlgorithm)
    return ErrorTemplate.unknown_key_algorithm(text, algorithm, known)
