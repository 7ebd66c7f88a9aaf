"""Room alias identifiers.

    #ruma:example.com

Aliases are chosen by people, so there is no generator.

Python 3.13+.
"""

from __future__ import annotations

from typing import ClassVar

from mxids.enums import Sigil

from .base import AuthorityIdentifier

__all__ = ["RoomAliasId"]


class RoomAliasId(AuthorityIdentifier):
    """A Matrix room alias ID.

    Example:
        >>> alias = RoomAliasId("#ruma:example.com")
        >>> alias.alias
        'ruma'
    """

    __slots__ = ()

    sigil: ClassVar[str] = Sigil.ROOM_ALIAS
    sigils: ClassVar[tuple[str, ...]] = (Sigil.ROOM_ALIAS,)

    @property
    def alias(self) -> str:
        """The alias name, i.e. the localpart."""
        return self.localpart
