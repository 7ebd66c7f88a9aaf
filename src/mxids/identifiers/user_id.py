"""User identifiers.

    @carl:example.com

The current grammar restricts user localparts to ``[a-z0-9._=/-]``. Older
servers created users outside that set; such historical IDs stay valid and
are flagged by ``UserId.is_historical``.

Python 3.13+.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from mxids.config import DEFAULT_CONFIG
from mxids.constants import USER_LOCALPART_ALPHABET
from mxids.core.generator import generate_id
from mxids.enums import Sigil

from .base import AuthorityIdentifier

if TYPE_CHECKING:
    import random

    from mxids.config import IdentifierConfig
    from mxids.core.authority import ServerName
    from mxids.core.storage import TextStorage

__all__ = ["UserId"]

_USER_LOCALPART_PATTERN: re.Pattern[str] = re.compile(r"[a-z0-9._=/-]+")


class UserId(AuthorityIdentifier):
    """A Matrix user ID.

    Example:
        >>> user_id = UserId("@carl:example.com")
        >>> user_id.localpart, user_id.is_historical
        ('carl', False)
        >>> UserId("@Carl:example.com").is_historical
        True
    """

    __slots__ = ("_is_historical",)

    sigil: ClassVar[str] = Sigil.USER
    sigils: ClassVar[tuple[str, ...]] = (Sigil.USER,)

    _is_historical: bool

    def _assign(
        self,
        storage: TextStorage,
        delimiter_offset: int | None,
        server_name: ServerName | None,
    ) -> None:
        super()._assign(storage, delimiter_offset, server_name)
        localpart = storage.as_str()[1:delimiter_offset]
        is_historical = _USER_LOCALPART_PATTERN.fullmatch(localpart) is None
        object.__setattr__(self, "_is_historical", is_historical)

    @classmethod
    def generate(
        cls,
        server_name: str,
        *,
        rng: random.Random | None = None,
        config: IdentifierConfig | None = None,
    ) -> UserId:
        """Generate a user ID with a random localpart (12 characters by default).

        Generated localparts are lower case alphanumeric, so generated IDs
        are never historical.

        Raises:
            InvalidServerNameError: If server_name is not a valid server name
        """
        length = (config or DEFAULT_CONFIG).user_localpart_length
        return generate_id(
            cls, server_name, length=length, rng=rng, alphabet=USER_LOCALPART_ALPHABET
        )

    @property
    def is_historical(self) -> bool:
        """Whether the localpart uses characters outside ``[a-z0-9._=/-]``."""
        return self._is_historical
