"""Non-raising parsing and validation of untrusted identifier text.

- try_parse NEVER raises for malformed input - errors are returned in tuple
- Guards return bool and accept any object

Public API:
    Parsing Functions:
        try_parse - Returns tuple[T | None, tuple[IdentifierError, ...]]

    Validators:
        is_valid_event_id
        is_valid_room_id
        is_valid_room_alias_id
        is_valid_user_id
        is_valid_server_key_id
        is_valid_server_name

Example:
    >>> from mxids import RoomId
    >>> from mxids.parsing import try_parse
    >>> room_id, errors = try_parse(RoomId, "!29fhd83h92h0:example.com")
    >>> if not errors:
    ...     print(room_id.server_name)
    example.com

Python 3.13+.
"""

from .guards import (
    is_valid_event_id,
    is_valid_room_alias_id,
    is_valid_room_id,
    is_valid_server_key_id,
    is_valid_server_name,
    is_valid_user_id,
)
from .identifiers import try_parse

__all__ = [
    # Validators
    "is_valid_event_id",
    "is_valid_room_alias_id",
    "is_valid_room_id",
    "is_valid_server_key_id",
    "is_valid_server_name",
    "is_valid_user_id",
    # Parsing functions
    "try_parse",
]
