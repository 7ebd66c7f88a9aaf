"""Room identifiers.

    !n8f893n9:example.com

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from mxids.config import DEFAULT_CONFIG
from mxids.core.generator import generate_id
from mxids.enums import Sigil

from .base import AuthorityIdentifier

if TYPE_CHECKING:
    import random

    from mxids.config import IdentifierConfig

__all__ = ["RoomId"]


class RoomId(AuthorityIdentifier):
    """A Matrix room ID.

    Example:
        >>> room_id = RoomId("!29fhd83h92h0:example.com:5000")
        >>> room_id.localpart, room_id.host, room_id.port
        ('29fhd83h92h0', 'example.com', 5000)
    """

    __slots__ = ()

    sigil: ClassVar[str] = Sigil.ROOM
    sigils: ClassVar[tuple[str, ...]] = (Sigil.ROOM,)

    @classmethod
    def generate(
        cls,
        server_name: str,
        *,
        rng: random.Random | None = None,
        config: IdentifierConfig | None = None,
    ) -> RoomId:
        """Generate a room ID with a random localpart (18 characters by default).

        Raises:
            InvalidServerNameError: If server_name is not a valid server name
        """
        length = (config or DEFAULT_CONFIG).room_localpart_length
        return generate_id(cls, server_name, length=length, rng=rng)
