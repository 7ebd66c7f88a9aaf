"""Non-raising identifier parsing.

try_parse() mirrors the validating constructors but returns errors instead
of raising them, in the same (result, errors) tuple shape used throughout
this package.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mxids.diagnostics import IdentifierError

if TYPE_CHECKING:
    from mxids.config import IdentifierConfig
    from mxids.core.storage import IdentifierSource
    from mxids.identifiers import Identifier

__all__ = ["try_parse"]

logger = logging.getLogger(__name__)


def try_parse[T: Identifier](
    cls: type[T],
    source: IdentifierSource,
    *,
    config: IdentifierConfig | None = None,
) -> tuple[T | None, tuple[IdentifierError, ...]]:
    """Parse source as an identifier of kind cls without raising.

    Args:
        cls: Identifier class (EventId, UserId, ...)
        source: Untrusted identifier text or a TextStorage holding it
        config: Validation options (default: DEFAULT_CONFIG)

    Returns:
        Tuple of (result, errors):
        - result: The identifier, or None if validation failed
        - errors: Tuple holding the first violated rule (empty on success)

    Examples:
        >>> from mxids import UserId
        >>> user_id, errors = try_parse(UserId, "@carl:example.com")
        >>> errors
        ()
        >>> user_id, errors = try_parse(UserId, "carl:example.com")
        >>> user_id is None, type(errors[0]).__name__
        (True, 'MissingSigilError')
    """
    try:
        value = cls.parse(source, config=config)
    except IdentifierError as error:
        logger.debug("Rejected %s: %s", cls.__name__, error)
        return None, (error,)
    return value, ()
