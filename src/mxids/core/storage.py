"""Backing text for identifier values.

An identifier either owns its text or borrows a slice of a larger string
owned by someone else (a decoded payload, a line of a log). Parsing and
accessors are written once against the TextStorage protocol; OwnedText and
BorrowedText are its two implementations.

A BorrowedText holds a reference to its owner, so the owner lives at least
as long as any identifier built on the view.

Thread Safety:
    Both implementations are frozen and safe to share between threads.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol

__all__ = [
    "BorrowedText",
    "IdentifierSource",
    "OwnedText",
    "TextStorage",
    "as_storage",
]


class TextStorage(Protocol):
    """Protocol for the text an identifier value was validated from."""

    is_borrowed: ClassVar[bool]

    def as_str(self) -> str:
        """Return the identifier text."""
        ...  # pragma: no cover  # Protocol stub - not executable


@dataclass(frozen=True, slots=True)
class OwnedText:
    """Text owned by the identifier value itself."""

    is_borrowed: ClassVar[bool] = False

    value: str

    def as_str(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class BorrowedText:
    """View of ``owner[start:end]``.

    Attributes:
        owner: The string that owns the text
        start: Offset of the first character of the view
        end: Offset one past the last character of the view

    Example:
        >>> payload = "sender=@alice:example.com;room=!abc:example.com"
        >>> view = BorrowedText(payload, 7, 25)
        >>> view.as_str()
        '@alice:example.com'
    """

    is_borrowed: ClassVar[bool] = True

    owner: str
    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate that the view lies inside its owner.

        Raises:
            ValueError: If start or end fall outside the owner, or end
                precedes start.
        """
        if not 0 <= self.start <= self.end <= len(self.owner):
            msg = (
                f"BorrowedText view [{self.start}:{self.end}] "
                f"outside owner of length {len(self.owner)}"
            )
            raise ValueError(msg)

    def as_str(self) -> str:
        return self.owner[self.start : self.end]


type IdentifierSource = str | TextStorage


def as_storage(source: IdentifierSource) -> TextStorage:
    """Wrap a plain string as OwnedText; pass storage objects through."""
    if isinstance(source, str):
        return OwnedText(source)
    return source
