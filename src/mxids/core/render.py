"""Canonical renderer for authority-bearing identifiers.

Canonical form omits the port when it is the default (443), so
``$abc:example.com:443`` and ``$abc:example.com`` render identically.
Opaque event identifiers, server key identifiers and room versions carry
nothing to normalize and render as their stored text.

Python 3.13+. Zero external dependencies.
"""

from mxids.constants import DEFAULT_PORT, DELIMITER

__all__ = ["render_authority_id", "render_server_name"]


def render_server_name(host: str, port: int) -> str:
    """Render ``host`` or ``host:port`` (port omitted when it is 443).

    Example:
        >>> render_server_name("example.com", 443)
        'example.com'
        >>> render_server_name("[::1]", 8448)
        '[::1]:8448'
    """
    if port == DEFAULT_PORT:
        return host
    return f"{host}{DELIMITER}{port}"


def render_authority_id(sigil: str, localpart: str, host: str, port: int) -> str:
    """Render ``sigil + localpart + ":" + server name`` in canonical form.

    Example:
        >>> render_authority_id("$", "39hvsi03hlne", "example.com", 443)
        '$39hvsi03hlne:example.com'
        >>> render_authority_id("@", "alice", "example.com", 5000)
        '@alice:example.com:5000'
    """
    return f"{sigil}{localpart}{DELIMITER}{render_server_name(host, port)}"
