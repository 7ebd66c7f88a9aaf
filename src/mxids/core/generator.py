"""Random identifier generator.

Synthesizes ``sigil + random localpart + ":" + server name`` and passes the
result through the identifier's own validating constructor, so generation
and validation share a single source of truth: a generated value always
re-validates.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, Protocol, Self

from mxids.constants import DELIMITER, LOCALPART_ALPHABET, MAX_BYTES
from mxids.core.authority import parse_authority
from mxids.core.random_source import generate_localpart
from mxids.diagnostics import (
    ErrorTemplate,
    IdentifierError,
    InvalidServerNameError,
)

if TYPE_CHECKING:
    import random

__all__ = ["GeneratableId", "generate_id"]

logger = logging.getLogger(__name__)


class GeneratableId(Protocol):
    """Identifier kind with a fixed sigil and a validating constructor."""

    sigil: ClassVar[str]

    def as_str(self) -> str: ...  # pragma: no cover

    @classmethod
    def parse(cls, source: str) -> Self: ...  # pragma: no cover


def generate_id[T: GeneratableId](
    cls: type[T],
    server_name: str,
    *,
    length: int,
    rng: random.Random | None = None,
    alphabet: str = LOCALPART_ALPHABET,
) -> T:
    """Generate a random identifier of kind ``cls`` on ``server_name``.

    Args:
        cls: Identifier class to generate (EventId, RoomId, UserId)
        server_name: ``host[:port]`` of the originating server
        length: Localpart length
        rng: Random generator (default: per-thread default)
        alphabet: Localpart alphabet (default: ASCII letters and digits)

    Returns:
        Validated identifier

    Raises:
        InvalidServerNameError: If server_name is not a valid server name,
            or is so long that the identifier would exceed 255 bytes
    """
    try:
        parse_authority(server_name)
    except IdentifierError as e:
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(server_name, e.message)
        ) from e

    localpart = generate_localpart(length, rng, alphabet)
    source = f"{cls.sigil}{localpart}{DELIMITER}{server_name}"
    if len(source.encode("utf-8")) > MAX_BYTES:
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(
                server_name, "server name is too long for a generated identifier"
            )
        )
    identifier = cls.parse(source)
    logger.debug("Generated %s %s", cls.__name__, identifier.as_str())
    return identifier
