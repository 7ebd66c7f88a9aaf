"""Event identifiers.

The format of event identifiers changed between room versions. Rooms of
versions 1 and 2 use a short random localpart followed by the server name
of the originating homeserver (legacy form). Later room versions use a hash
of the event encoded with unpadded base64, with no server name (opaque
form):

    legacy:  $h29iv0s8:example.com
    opaque:  $acR1l0raoZnm60CBwAVgqbZqoO/mYU81xysh1u7XcJk
    opaque:  $Rqnc-F-dvnEYJTyHq_iKxU2bZ1CI92-kuZq3a5lr5Zg   (URL-safe alphabet)

A ':' anywhere after the sigil selects the legacy grammar. Both forms share
one type and one accessor surface: ``localpart`` is the legacy localpart or
the whole opaque body, ``server_name`` is the parsed server name or None.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, cast

from mxids.config import DEFAULT_CONFIG
from mxids.core.generator import generate_id
from mxids.core.grammar import parse_id
from mxids.core.render import render_authority_id
from mxids.enums import EventIdFormat, Sigil

from .base import Identifier

if TYPE_CHECKING:
    import random

    from mxids.config import IdentifierConfig
    from mxids.core.authority import ServerName
    from mxids.core.storage import TextStorage

__all__ = ["EventId"]


class EventId(Identifier):
    """A Matrix event ID in either the legacy or the opaque form.

    Example:
        >>> event_id = EventId("$h29iv0s8:example.com")
        >>> event_id.localpart, str(event_id.server_name)
        ('h29iv0s8', 'example.com')
        >>> EventId("$acR1l0raoZnm60CBwAVgqbZqoO/mYU81xysh1u7XcJk").server_name is None
        True
    """

    __slots__ = ("_format",)

    sigil: ClassVar[str] = Sigil.EVENT

    _format: EventIdFormat

    @classmethod
    def _validate(
        cls, text: str, config: IdentifierConfig
    ) -> tuple[int | None, ServerName | None]:
        parsed = parse_id(text, (cls.sigil,), delimiter_required=False)
        return parsed.delimiter_offset, parsed.server_name

    def _assign(
        self,
        storage: TextStorage,
        delimiter_offset: int | None,
        server_name: ServerName | None,
    ) -> None:
        super()._assign(storage, delimiter_offset, server_name)
        event_format = EventIdFormat.OPAQUE if delimiter_offset is None else EventIdFormat.LEGACY
        object.__setattr__(self, "_format", event_format)

    def _render(self) -> str:
        if self._format is EventIdFormat.OPAQUE:
            return self.as_str()
        # Legacy IDs always carry a server name
        server_name = cast("ServerName", self._server_name)
        return render_authority_id(self.sigil, self.localpart, server_name.host, server_name.port)

    @classmethod
    def generate(
        cls,
        server_name: str,
        *,
        rng: random.Random | None = None,
        config: IdentifierConfig | None = None,
    ) -> EventId:
        """Generate a legacy-form event ID with a random localpart.

        Only meaningful for rooms of versions 1 and 2; later room versions
        derive event IDs from the event content.

        Args:
            server_name: ``host[:port]`` of the originating server
            rng: Random generator (default: per-thread default)
            config: Supplies event_localpart_length (default: 18)

        Raises:
            InvalidServerNameError: If server_name is not a valid server name

        Example:
            >>> event_id = EventId.generate("example.com")
            >>> len(event_id.localpart)
            18
        """
        length = (config or DEFAULT_CONFIG).event_localpart_length
        return generate_id(cls, server_name, length=length, rng=rng)

    @property
    def localpart(self) -> str:
        """Legacy localpart, or the whole body (without '$') of an opaque ID."""
        text = self.as_str()
        if self._format is EventIdFormat.OPAQUE:
            return text[1:]
        return text[1 : self._delimiter_offset]

    @property
    def server_name(self) -> ServerName | None:
        """Server name of a legacy ID; None for an opaque ID."""
        return self._server_name

    @property
    def host(self) -> str | None:
        return None if self._server_name is None else self._server_name.host

    @property
    def port(self) -> int | None:
        return None if self._server_name is None else self._server_name.port
