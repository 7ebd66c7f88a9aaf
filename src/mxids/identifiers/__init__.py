"""Identifier value types.

One class per identifier kind. All share the Identifier base: a validating
constructor, immutable value semantics over the canonical form, and pydantic
field support.

Exports:
    EventId: $ identifiers, legacy and opaque forms
    RoomId: ! identifiers
    RoomAliasId: # identifiers
    UserId: @ identifiers
    RoomIdOrAliasId: either ! or #
    ServerKeyId: algorithm:version signing key identifiers
    RoomVersionId: room version strings

Python 3.13+.
"""

from .base import AuthorityIdentifier, Identifier
from .event_id import EventId
from .room_alias_id import RoomAliasId
from .room_id import RoomId
from .room_id_or_alias_id import RoomIdOrAliasId
from .room_version_id import RoomVersionId
from .server_key_id import ServerKeyId
from .user_id import UserId

__all__ = [
    "AuthorityIdentifier",
    "EventId",
    "Identifier",
    "RoomAliasId",
    "RoomId",
    "RoomIdOrAliasId",
    "RoomVersionId",
    "ServerKeyId",
    "UserId",
]
