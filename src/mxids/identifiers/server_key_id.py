"""Server signing key identifiers.

    ed25519:abc

Unlike the other identifier kinds there is no sigil: the identifier is an
algorithm name from ServerKeyAlgorithm and an opaque, non-empty version
separated by ':'.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mxids.core.key_grammar import parse_server_key_id
from mxids.enums import ServerKeyAlgorithm

from .base import Identifier

if TYPE_CHECKING:
    from mxids.config import IdentifierConfig
    from mxids.core.authority import ServerName

__all__ = ["ServerKeyId"]


class ServerKeyId(Identifier):
    """A key algorithm and key version pair.

    Versions are not restricted to any character set unless
    ``IdentifierConfig.strict_key_versions`` is enabled.

    Example:
        >>> key_id = ServerKeyId("ed25519:abc")
        >>> key_id.algorithm, key_id.version
        (<ServerKeyAlgorithm.ED25519: 'ed25519'>, 'abc')
    """

    __slots__ = ()

    _delimiter_offset: int

    @classmethod
    def _validate(cls, text: str, config: IdentifierConfig) -> tuple[int, ServerName | None]:
        delimiter_offset = parse_server_key_id(text, strict_version=config.strict_key_versions)
        return delimiter_offset, None

    @property
    def algorithm(self) -> ServerKeyAlgorithm:
        return ServerKeyAlgorithm(self.as_str()[: self._delimiter_offset])

    @property
    def version(self) -> str:
        return self.as_str()[self._delimiter_offset + 1 :]
