"""Random source for identifier generation.

Generation takes the random generator as an explicit argument so tests can
pass a seeded ``random.Random``. When none is passed, a per-thread default
is created lazily; threads never share generator state and there is nothing
to tear down.

The source is deliberately non-cryptographic: generated localparts only need
to be unlikely to collide, not unpredictable.

Python 3.13+.
"""

from __future__ import annotations

import random
import threading

from mxids.constants import LOCALPART_ALPHABET

__all__ = ["default_rng", "generate_localpart"]

_thread_local = threading.local()


def default_rng() -> random.Random:
    """Return this thread's random generator, creating it on first use."""
    rng: random.Random | None = getattr(_thread_local, "rng", None)
    if rng is None:
        rng = random.Random()  # noqa: S311 - localparts are not secrets
        _thread_local.rng = rng
    return rng


def generate_localpart(
    length: int,
    rng: random.Random | None = None,
    alphabet: str = LOCALPART_ALPHABET,
) -> str:
    """Draw ``length`` characters uniformly from ``alphabet``.

    Args:
        length: Number of characters
        rng: Random generator (default: this thread's default_rng())
        alphabet: Characters to draw from (default: ASCII letters and digits)

    Returns:
        Random alphanumeric string

    Example:
        >>> generate_localpart(8, random.Random(0))  # doctest: +SKIP
        'y0UZ2vKJ'
    """
    source = rng if rng is not None else default_rng()
    return "".join(source.choices(alphabet, k=length))
