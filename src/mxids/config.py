"""Validation and generation configuration.

Provides a single frozen dataclass that encapsulates the tunable parts of
identifier handling: the optional strict character check on server key
versions and the localpart lengths used by the random generator.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from mxids.constants import (
    EVENT_LOCALPART_LENGTH,
    MAX_BYTES,
    MIN_CHARS,
    ROOM_LOCALPART_LENGTH,
    USER_LOCALPART_LENGTH,
)

__all__ = ["DEFAULT_CONFIG", "IdentifierConfig"]


@dataclass(frozen=True, slots=True)
class IdentifierConfig:
    """Immutable configuration for identifier validation and generation.

    All fields have sensible defaults; constructing ``IdentifierConfig()``
    with no arguments reproduces the protocol's standard behavior.

    Attributes:
        strict_key_versions: Reject server key versions containing characters
            other than alphanumerics and ``_`` with InvalidCharactersError
            (default: False). Versions are opaque in the protocol, so the
            check is off unless a deployment asks for it.
        event_localpart_length: Localpart length of generated event
            identifiers (default: 18).
        room_localpart_length: Localpart length of generated room
            identifiers (default: 18).
        user_localpart_length: Localpart length of generated user
            identifiers (default: 12).

    Example:
        >>> from mxids import ServerKeyId
        >>> from mxids.config import IdentifierConfig
        >>> strict = IdentifierConfig(strict_key_versions=True)
        >>> ServerKeyId("ed25519:a_1", config=strict).version
        'a_1'
        >>> ServerKeyId("ed25519:a-1", config=strict)
        Traceback (most recent call last):
        ...
        mxids.diagnostics.errors.InvalidCharactersError: ...
    """

    strict_key_versions: bool = False
    event_localpart_length: int = EVENT_LOCALPART_LENGTH
    room_localpart_length: int = ROOM_LOCALPART_LENGTH
    user_localpart_length: int = USER_LOCALPART_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a localpart length is not positive, or leaves no
                room for the sigil, delimiter and a one character host.
        """
        longest = MAX_BYTES - (MIN_CHARS - 1)
        for name in (
            "event_localpart_length",
            "room_localpart_length",
            "user_localpart_length",
        ):
            length = getattr(self, name)
            if length <= 0:
                msg = f"{name} must be positive"
                raise ValueError(msg)
            if length > longest:
                msg = f"{name} must be at most {longest}"
                raise ValueError(msg)


DEFAULT_CONFIG = IdentifierConfig()
