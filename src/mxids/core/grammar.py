"""Shared grammar validator for sigil-based identifiers.

This module is the single source of truth for the grammar every sigil-based
identifier (events, rooms, aliases, users) shares:

    identifier = sigil localpart [ ":" server-name ]

Checks run in a fixed order, and the first violated rule is reported:

    1. Length: 4 <= UTF-8 byte length <= 255
    2. Sigil: first character is one of the expected sigils
    3. Delimiter: first ":" at or after position 1 (optional for event ids)
    4. Localpart: non-empty
    5. Server name: delegated to the authority parser

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from mxids.constants import DELIMITER, MAX_BYTES, MIN_CHARS, SIGIL_BYTES
from mxids.core.authority import ServerName, parse_authority
from mxids.diagnostics import (
    ErrorTemplate,
    MaximumLengthExceededError,
    MinimumLengthNotSatisfiedError,
    MissingDelimiterError,
    MissingSigilError,
)

__all__ = [
    "ParsedId",
    "find_delimiter",
    "parse_authority_id",
    "parse_id",
    "parse_server_part",
    "utf8_length",
    "validate_length",
    "validate_sigil",
]


@dataclass(frozen=True, slots=True)
class ParsedId:
    """Result of validating a sigil-based identifier.

    Attributes:
        sigil: The leading sigil found
        delimiter_offset: Index of the first ':' (None when absent)
        server_name: Parsed authority (None when there is no delimiter)
    """

    sigil: str
    delimiter_offset: int | None
    server_name: ServerName | None


def utf8_length(text: str) -> int:
    """Return the length of text in UTF-8 bytes."""
    return len(text.encode("utf-8"))


def validate_length(text: str) -> None:
    """Enforce the shared byte-length bounds.

    Raises:
        MaximumLengthExceededError: If text is longer than 255 bytes
        MinimumLengthNotSatisfiedError: If text is shorter than 4 bytes
    """
    length = utf8_length(text)
    if length > MAX_BYTES:
        raise MaximumLengthExceededError(
            ErrorTemplate.maximum_length_exceeded(text, length, MAX_BYTES, "bytes")
        )
    if length < MIN_CHARS:
        raise MinimumLengthNotSatisfiedError(
            ErrorTemplate.minimum_length_not_satisfied(text, length, MIN_CHARS)
        )


def validate_sigil(text: str, sigils: tuple[str, ...]) -> str:
    """Check that text starts with one of sigils and return it.

    Raises:
        MissingSigilError: If the first character is not an expected sigil
    """
    if not text or text[0] not in sigils:
        raise MissingSigilError(ErrorTemplate.missing_sigil(text, sigils))
    return text[0]


def find_delimiter(text: str) -> int | None:
    """Return the index of the first ':' after the sigil, or None."""
    index = text.find(DELIMITER, SIGIL_BYTES)
    return None if index == -1 else index


def parse_id(
    text: str,
    sigils: tuple[str, ...],
    *,
    delimiter_required: bool = True,
) -> ParsedId:
    """Validate a sigil-based identifier and locate its parts.

    Args:
        text: Untrusted identifier text
        sigils: Sigils accepted at position 0
        delimiter_required: Whether a missing ':' is an error. Event
            identifiers pass False: their modern form has no server name.

    Returns:
        ParsedId with the delimiter offset and parsed server name

    Raises:
        IdentifierError: The subclass matching the first violated rule

    Example:
        >>> parsed = parse_id("@alice:example.com:8448", ("@",))
        >>> parsed.delimiter_offset, parsed.server_name.port
        (6, 8448)
        >>> parse_id("$acR1l0raoZnm60CBwAVgqbZqoO", ("$",), delimiter_required=False)
        ParsedId(sigil='$', delimiter_offset=None, server_name=None)
    """
    validate_length(text)
    sigil = validate_sigil(text, sigils)

    delimiter_offset = find_delimiter(text)
    if delimiter_offset is None:
        if delimiter_required:
            raise MissingDelimiterError(ErrorTemplate.missing_delimiter(text))
        return ParsedId(sigil=sigil, delimiter_offset=None, server_name=None)

    server_name = parse_server_part(text, delimiter_offset)
    return ParsedId(sigil=sigil, delimiter_offset=delimiter_offset, server_name=server_name)


def parse_authority_id(text: str, sigils: tuple[str, ...]) -> tuple[int, ServerName]:
    """Validate an identifier whose server name is mandatory.

    Same checks as parse_id() with delimiter_required=True, typed for
    callers that always get a delimiter and a server name back.

    Returns:
        Tuple of (delimiter offset, server name)

    Raises:
        IdentifierError: The subclass matching the first violated rule
    """
    validate_length(text)
    validate_sigil(text, sigils)

    delimiter_offset = find_delimiter(text)
    if delimiter_offset is None:
        raise MissingDelimiterError(ErrorTemplate.missing_delimiter(text))
    return delimiter_offset, parse_server_part(text, delimiter_offset)


def parse_server_part(text: str, delimiter_offset: int) -> ServerName:
    """Check the localpart is non-empty and parse the text after the delimiter."""
    if delimiter_offset == SIGIL_BYTES:
        raise MinimumLengthNotSatisfiedError(ErrorTemplate.empty_segment(text, "localpart"))
    return parse_authority(text[delimiter_offset + 1 :])
