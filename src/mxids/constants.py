"""Shared constants for mxids.

This module provides centralized configuration constants used across the
core grammar and identifier packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Length limits: byte bounds shared by every sigil-based identifier
- Authority: delimiter and default port
- Generation: localpart lengths and alphabet
- Room versions: length limit and official versions

Python 3.13+. Zero external dependencies.
"""

import string

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Length limits
    "MAX_BYTES",
    "MIN_CHARS",
    "SIGIL_BYTES",
    "MAX_KEY_DELIMITER_INDEX",
    # Authority
    "DELIMITER",
    "DEFAULT_PORT",
    "MAX_PORT",
    # Generation
    "EVENT_LOCALPART_LENGTH",
    "ROOM_LOCALPART_LENGTH",
    "USER_LOCALPART_LENGTH",
    "LOCALPART_ALPHABET",
    "USER_LOCALPART_ALPHABET",
    # Room versions
    "MAX_ROOM_VERSION_CHARS",
    "OFFICIAL_ROOM_VERSIONS",
]

# ============================================================================
# LENGTH LIMITS
# ============================================================================

# All identifiers must be 255 bytes or less (UTF-8 encoded).
MAX_BYTES: int = 255

# The shortest well-formed identifier is a sigil, a single localpart
# character, a colon and a single character host: 4 bytes.
MIN_CHARS: int = 4

# The number of bytes in a valid sigil.
SIGIL_BYTES: int = 1

# Server key identifiers record the delimiter position in a single unsigned
# byte. A delimiter further in than this can only follow an algorithm name
# that is not in the registry.
MAX_KEY_DELIMITER_INDEX: int = 255

# ============================================================================
# AUTHORITY
# ============================================================================

DELIMITER: str = ":"

# Port assumed when a server name carries none; omitted from canonical form.
DEFAULT_PORT: int = 443

MAX_PORT: int = 65535

# ============================================================================
# GENERATION
# ============================================================================

# Localpart lengths of randomly generated identifiers.
EVENT_LOCALPART_LENGTH: int = 18
ROOM_LOCALPART_LENGTH: int = 18
USER_LOCALPART_LENGTH: int = 12

LOCALPART_ALPHABET: str = string.ascii_letters + string.digits

# User localparts may not contain upper case letters.
USER_LOCALPART_ALPHABET: str = string.ascii_lowercase + string.digits

# ============================================================================
# ROOM VERSIONS
# ============================================================================

# Room version identifiers are limited in code points, not bytes.
MAX_ROOM_VERSION_CHARS: int = 32

OFFICIAL_ROOM_VERSIONS: tuple[str, ...] = ("1", "2", "3", "4", "5", "6")
