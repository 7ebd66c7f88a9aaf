"""Boolean validators for untrusted identifier text.

Each guard answers whether text would be accepted by the matching validating
constructor, without building a value or raising.

Note: All guards accept non-str input and return False, so they can be
applied to raw decoded JSON directly.

Example:
    >>> from mxids.parsing.guards import is_valid_user_id
    >>> is_valid_user_id("@carl:example.com")
    True
    >>> is_valid_user_id("carl:example.com")
    False
"""

from mxids.core.authority import is_valid_server_name as _is_valid_server_name
from mxids.diagnostics import IdentifierError
from mxids.identifiers import (
    EventId,
    Identifier,
    RoomAliasId,
    RoomId,
    ServerKeyId,
    UserId,
)

__all__ = [
    "is_valid_event_id",
    "is_valid_room_alias_id",
    "is_valid_room_id",
    "is_valid_server_key_id",
    "is_valid_server_name",
    "is_valid_user_id",
]


def _accepts(cls: type[Identifier], value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        cls(value)
    except IdentifierError:
        return False
    return True


def is_valid_event_id(value: object) -> bool:
    """Check whether value is a valid event ID (legacy or opaque form)."""
    return _accepts(EventId, value)


def is_valid_room_id(value: object) -> bool:
    return _accepts(RoomId, value)


def is_valid_room_alias_id(value: object) -> bool:
    return _accepts(RoomAliasId, value)


def is_valid_user_id(value: object) -> bool:
    """Check whether value is a valid user ID.

    Historical user IDs (upper case or other characters outside the current
    localpart grammar) are valid.
    """
    return _accepts(UserId, value)


def is_valid_server_key_id(value: object) -> bool:
    return _accepts(ServerKeyId, value)


def is_valid_server_name(value: object) -> bool:
    """Check whether value is a valid ``host[:port]`` server name."""
    return isinstance(value, str) and _is_valid_server_name(value)
