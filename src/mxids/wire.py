"""JSON wire codec for identifiers.

Identifiers travel as JSON string literals. encode() writes the canonical
form, so ``UserId("@carl:example.com:443")`` encodes as
``"@carl:example.com"``. decode() runs the validating constructor on the
decoded string.

For identifiers embedded in larger documents, declare them as pydantic
model fields instead (see Identifier.__get_pydantic_core_schema__).

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mxids.config import IdentifierConfig
    from mxids.identifiers import Identifier

__all__ = ["decode", "encode"]

logger = logging.getLogger(__name__)


def encode(identifier: Identifier) -> str:
    """Encode identifier as a JSON string literal of its canonical form.

    Example:
        >>> from mxids import RoomAliasId
        >>> encode(RoomAliasId("#ruma:example.com:443"))
        '"#ruma:example.com"'
    """
    return json.dumps(str(identifier), ensure_ascii=False)


def decode[T: Identifier](
    cls: type[T],
    payload: str | bytes,
    *,
    config: IdentifierConfig | None = None,
) -> T:
    """Decode a JSON string literal into an identifier of kind cls.

    Args:
        cls: Identifier class to construct
        payload: JSON document holding a single string
        config: Validation options (default: DEFAULT_CONFIG)

    Returns:
        The validated identifier

    Raises:
        json.JSONDecodeError: If payload is not valid JSON
        TypeError: If payload is valid JSON but not a string
        IdentifierError: If the string is not a valid identifier of kind cls

    Example:
        >>> from mxids import UserId
        >>> decode(UserId, '"@carl:example.com"')
        UserId('@carl:example.com')
    """
    value = json.loads(payload)
    if not isinstance(value, str):
        msg = f"{cls.__name__} must be encoded as a JSON string, got {type(value).__name__}"
        raise TypeError(msg)
    logger.debug("Decoding %s from wire", cls.__name__)
    return cls.parse(value, config=config)
