"""Enumerations for mxids type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Sigil(StrEnum):
    """Leading character selecting an identifier's entity kind.

    StrEnum provides automatic string conversion: str(Sigil.EVENT) == "$"
    """

    EVENT = "$"
    """Event identifier: $h29iv0s8:example.com"""

    ROOM = "!"
    """Room identifier: !n8f893n9:example.com"""

    ROOM_ALIAS = "#"
    """Room alias: #room:example.com"""

    USER = "@"
    """User identifier: @alice:example.com"""


class ServerKeyAlgorithm(StrEnum):
    """Known server signing key algorithms.

    Membership is matched case-sensitively against the algorithm segment of
    a server key identifier. Supporting a new algorithm means adding a
    member here.
    """

    ED25519 = "ed25519"
    """Ed25519 signature algorithm"""


class HostKind(StrEnum):
    """Syntactic kind of a server name host."""

    DOMAIN = "domain"
    """DNS name: example.com"""

    IPV4 = "ipv4"
    """Dotted-quad IPv4 literal: 1.2.3.4"""

    IPV6 = "ipv6"
    """Bracketed IPv6 literal: [1234:5678::abcd]"""


class EventIdFormat(StrEnum):
    """Grammar an event identifier was parsed with."""

    LEGACY = "legacy"
    """Room versions 1 and 2: random localpart plus server name"""

    OPAQUE = "opaque"
    """Room versions 3 and later: base64 event hash"""


__all__ = [
    "EventIdFormat",
    "HostKind",
    "ServerKeyAlgorithm",
    "Sigil",
]
