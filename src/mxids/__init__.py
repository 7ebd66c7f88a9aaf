"""mxids - Matrix identifier validation, parsing, rendering and generation.

Typed, immutable values for the identifiers of the Matrix protocol. Every
value is validated on construction; an invalid value cannot exist.

Public API:
    EventId - ``$`` event identifiers (legacy ``$local:server`` and opaque forms)
    RoomId - ``!`` room identifiers
    RoomAliasId - ``#`` room aliases
    UserId - ``@`` user identifiers
    RoomIdOrAliasId - Either a room ID or a room alias
    ServerKeyId - ``algorithm:version`` server signing key identifiers
    RoomVersionId - Room version strings
    ServerName - Parsed ``host[:port]`` authority
    IdentifierConfig - Validation and generation options

Exceptions:
    IdentifierError - Base exception class (a ValueError)
    MaximumLengthExceededError, MinimumLengthNotSatisfiedError - Length bounds
    MissingSigilError, MissingDelimiterError - Identifier grammar
    InvalidHostError, InvalidServerNameError - Server name grammar
    MissingServerKeyDelimiterError, UnknownKeyAlgorithmError - Key IDs
    InvalidCharactersError - Strict key version charset

Submodules:
    mxids.parsing - Non-raising try_parse and is_valid_* validators
    mxids.wire - JSON encode/decode
    mxids.diagnostics - Diagnostic codes, templates and formatter
    mxids.core - Grammar, authority parser, renderer and generator
"""

from .config import DEFAULT_CONFIG, IdentifierConfig
from .core import ServerName
from .diagnostics import (
    IdentifierError,
    InvalidCharactersError,
    InvalidHostError,
    InvalidServerNameError,
    LengthError,
    MaximumLengthExceededError,
    MinimumLengthNotSatisfiedError,
    MissingDelimiterError,
    MissingServerKeyDelimiterError,
    MissingSigilError,
    UnknownKeyAlgorithmError,
)
from .enums import EventIdFormat, HostKind, ServerKeyAlgorithm, Sigil
from .identifiers import (
    EventId,
    RoomAliasId,
    RoomId,
    RoomIdOrAliasId,
    RoomVersionId,
    ServerKeyId,
    UserId,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("mxids")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CONFIG",
    "EventId",
    "EventIdFormat",
    "HostKind",
    "IdentifierConfig",
    "IdentifierError",
    "InvalidCharactersError",
    "InvalidHostError",
    "InvalidServerNameError",
    "LengthError",
    "MaximumLengthExceededError",
    "MinimumLengthNotSatisfiedError",
    "MissingDelimiterError",
    "MissingServerKeyDelimiterError",
    "MissingSigilError",
    "RoomAliasId",
    "RoomId",
    "RoomIdOrAliasId",
    "RoomVersionId",
    "ServerKeyAlgorithm",
    "ServerKeyId",
    "ServerName",
    "Sigil",
    "UnknownKeyAlgorithmError",
    "UserId",
    "__version__",
]
