"""Authority parser: ``host[:port]`` server names.

The authority is checked with general URL-authority syntax by splitting it
behind a synthetic ``https://`` scheme; anything the URL splitter does not
take as the whole network location (a path, query or fragment) is rejected.
The host and port are then validated separately:

    server-name = host [ ":" [ port ] ]
    host        = domain / IPv4address / "[" IPv6address "]"
    domain      = 1*( any character but a forbidden domain code point )
    port        = 1*DIGIT                  ; 0-65535, default 443

As in URL authorities, an empty port (``example.com:``) means the default
port, and a dotted-quad part with a leading zero is octal (``1.2.3.04``).

Error taxonomy:
    InvalidHostError: the host is absent (empty authority, or ":port" only)
    InvalidServerNameError: anything else (bad port, malformed literal,
        forbidden characters)

The host is kept exactly as written. No case folding, IDNA conversion or
resolution is performed.

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from mxids.constants import DEFAULT_PORT, DELIMITER, MAX_PORT
from mxids.core.render import render_server_name
from mxids.diagnostics import (
    ErrorTemplate,
    IdentifierError,
    InvalidHostError,
    InvalidServerNameError,
)
from mxids.enums import HostKind

__all__ = [
    "ServerName",
    "is_valid_server_name",
    "parse_authority",
]

# Forbidden domain code points of the URL standard: C0 controls, space,
# DEL and the delimiters "#%/:<>?@[\]^|".
_FORBIDDEN_DOMAIN_PATTERN: re.Pattern[str] = re.compile(r"[\x00-\x20\x7f#%/:<>?@\[\\\]^|]")
# Dotted quads are IPv4 literals; other all-digit names are DNS names.
_IPV4_SHAPE_PATTERN: re.Pattern[str] = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+")


@dataclass(frozen=True, slots=True)
class ServerName:
    """Parsed ``host[:port]`` of an identifier.

    Attributes:
        host: Host as written; IPv6 literals keep their brackets
        port: Port number (443 when the authority names none)
        kind: Whether the host is a DNS name, IPv4 or IPv6 literal

    Example:
        >>> name = ServerName.parse("example.com:8448")
        >>> name.host, name.port
        ('example.com', 8448)
        >>> str(ServerName.parse("example.com:443"))
        'example.com'
    """

    host: str
    port: int = DEFAULT_PORT
    kind: HostKind = HostKind.DOMAIN

    def __str__(self) -> str:
        """Canonical form: the port is omitted when it is 443."""
        return render_server_name(self.host, self.port)

    @classmethod
    def parse(cls, authority: str) -> ServerName:
        """Parse ``host[:port]``. See parse_authority()."""
        return parse_authority(authority)


def parse_authority(authority: str) -> ServerName:
    """Parse and validate a server name.

    Args:
        authority: Text after an identifier's delimiter, e.g. "example.com:8448"

    Returns:
        Parsed ServerName

    Raises:
        InvalidHostError: If the host is absent
        InvalidServerNameError: If the authority is otherwise malformed

    Example:
        >>> parse_authority("[::1]:8448").kind
        <HostKind.IPV6: 'ipv6'>
        >>> parse_authority("example.com:notaport")
        Traceback (most recent call last):
        ...
        mxids.diagnostics.errors.InvalidServerNameError: ...
    """
    if not authority:
        raise InvalidHostError(ErrorTemplate.invalid_host(authority))

    try:
        netloc = urlsplit(f"https://{authority}").netloc
    except ValueError as e:
        # Unbalanced brackets, invalid bracketed literals
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(authority, str(e))
        ) from e

    if netloc != authority:
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(
                authority, "only a host and an optional port are allowed"
            )
        )
    if "@" in authority:
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(authority, "user information is not allowed")
        )

    if authority.startswith("["):
        host, port_text = _split_ipv6(authority)
        kind = HostKind.IPV6
    else:
        host, separator, port_part = authority.partition(DELIMITER)
        if not host:
            raise InvalidHostError(ErrorTemplate.invalid_host(authority))
        kind = _classify_host(authority, host)
        port_text = port_part if separator else None

    port = DEFAULT_PORT if port_text is None else _parse_port(authority, port_text)
    return ServerName(host=host, port=port, kind=kind)


def is_valid_server_name(server_name: str) -> bool:
    """Check whether text is a valid ``host[:port]`` server name.

    Example:
        >>> is_valid_server_name("example.com")
        True
        >>> is_valid_server_name("")
        False
    """
    try:
        parse_authority(server_name)
    except IdentifierError:
        return False
    return True


def _split_ipv6(authority: str) -> tuple[str, str | None]:
    """Split ``[literal]`` or ``[literal]:port``; validate the literal."""
    close = authority.find("]")
    if close == -1:
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(authority, "unterminated IPv6 literal")
        )

    literal = authority[1:close]
    # Zone identifiers ("%eth0") have no meaning outside the local host.
    if not literal or "%" in literal:
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(authority, "malformed IPv6 literal")
        )
    try:
        ipaddress.IPv6Address(literal)
    except ValueError as e:
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(authority, "malformed IPv6 literal")
        ) from e

    rest = authority[close + 1 :]
    if not rest:
        return authority, None
    if not rest.startswith(DELIMITER):
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(authority, "unexpected text after IPv6 literal")
        )
    return authority[: close + 1], rest[1:]


def _classify_host(authority: str, host: str) -> HostKind:
    if _IPV4_SHAPE_PATTERN.fullmatch(host):
        if not all(_is_ipv4_part(part) for part in host.split(".")):
            raise InvalidServerNameError(
                ErrorTemplate.invalid_server_name(authority, "malformed IPv4 address")
            )
        return HostKind.IPV4
    if _FORBIDDEN_DOMAIN_PATTERN.search(host) is None:
        return HostKind.DOMAIN
    raise InvalidServerNameError(
        ErrorTemplate.invalid_server_name(authority, "host contains invalid characters")
    )


def _is_ipv4_part(part: str) -> bool:
    """Check a dotted-quad part: decimal, or octal when it has a leading zero."""
    try:
        value = int(part, 8) if len(part) > 1 and part.startswith("0") else int(part)
    except ValueError:
        return False
    return value <= 255


def _parse_port(authority: str, port_text: str) -> int:
    if not port_text:
        return DEFAULT_PORT
    # str.isdigit() accepts non-ASCII digits; ports are ASCII only.
    if not (port_text.isascii() and port_text.isdigit()):
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(authority, "port is not a number")
        )
    port = int(port_text)
    if port > MAX_PORT:
        raise InvalidServerNameError(
            ErrorTemplate.invalid_server_name(authority, "port is out of range")
        )
    return port
