"""Room version identifiers.

Room versions are opaque strings of 1 to 32 characters. Versions "1" to
"6" are defined by the protocol (official); servers may implement others
(custom).

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mxids.constants import MAX_ROOM_VERSION_CHARS, OFFICIAL_ROOM_VERSIONS
from mxids.diagnostics import (
    ErrorTemplate,
    MaximumLengthExceededError,
    MinimumLengthNotSatisfiedError,
)

from .base import Identifier

if TYPE_CHECKING:
    from mxids.config import IdentifierConfig
    from mxids.core.authority import ServerName

__all__ = ["RoomVersionId"]


class RoomVersionId(Identifier):
    """A room version identifier.

    Example:
        >>> RoomVersionId("5").is_official
        True
        >>> RoomVersionId("io.ruma.1").is_custom
        True
    """

    __slots__ = ()

    @classmethod
    def _validate(cls, text: str, config: IdentifierConfig) -> tuple[None, ServerName | None]:
        if not text:
            raise MinimumLengthNotSatisfiedError(ErrorTemplate.empty_segment(text, "room version"))
        if len(text) > MAX_ROOM_VERSION_CHARS:
            raise MaximumLengthExceededError(
                ErrorTemplate.maximum_length_exceeded(
                    text, len(text), MAX_ROOM_VERSION_CHARS, "characters"
                )
            )
        return None, None

    @classmethod
    def official(cls) -> tuple[RoomVersionId, ...]:
        """All room versions defined by the protocol, oldest first."""
        return tuple(cls(version) for version in OFFICIAL_ROOM_VERSIONS)

    @property
    def is_official(self) -> bool:
        return self.as_str() in OFFICIAL_ROOM_VERSIONS

    @property
    def is_custom(self) -> bool:
        return not self.is_official
