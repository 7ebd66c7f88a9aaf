"""Room ID or room alias.

Some endpoints accept either a room ID (``!``) or a room alias (``#``) in
the same position. RoomIdOrAliasId validates both and dispatches on the
sigil.

Python 3.13+.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic_core import core_schema

from mxids.enums import Sigil

from .base import AuthorityIdentifier
from .room_alias_id import RoomAliasId
from .room_id import RoomId

__all__ = ["RoomIdOrAliasId"]


class RoomIdOrAliasId(AuthorityIdentifier):
    """Either a room ID or a room alias ID.

    Example:
        >>> target = RoomIdOrAliasId("#ruma:example.com")
        >>> target.is_room_alias_id
        True
        >>> target.variant
        RoomAliasId('#ruma:example.com')
    """

    __slots__ = ()

    sigils: ClassVar[tuple[str, ...]] = (Sigil.ROOM, Sigil.ROOM_ALIAS)

    @classmethod
    def from_identifier(cls, identifier: RoomId | RoomAliasId) -> RoomIdOrAliasId:
        """Wrap an already-validated room ID or alias without re-parsing."""
        return cls._from_parts(
            identifier.storage, identifier.delimiter_offset, identifier.server_name
        )

    @classmethod
    def _instance_schemas(cls) -> list[core_schema.CoreSchema]:
        # A RoomId or RoomAliasId is wrapped as is.
        return [
            *super()._instance_schemas(),
            *(
                core_schema.no_info_after_validator_function(
                    cls.from_identifier, core_schema.is_instance_schema(kind)
                )
                for kind in (RoomId, RoomAliasId)
            ),
        ]

    @property
    def sigil(self) -> Sigil:
        return Sigil(self.as_str()[0])

    @property
    def is_room_id(self) -> bool:
        return self.sigil is Sigil.ROOM

    @property
    def is_room_alias_id(self) -> bool:
        return self.sigil is Sigil.ROOM_ALIAS

    @property
    def variant(self) -> RoomId | RoomAliasId:
        """The concrete RoomId or RoomAliasId, sharing this value's storage."""
        kind = RoomId if self.is_room_id else RoomAliasId
        return kind._from_parts(self._storage, self._delimiter_offset, self._server_name)
