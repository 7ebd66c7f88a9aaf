"""Base classes shared by all identifier kinds.

Every identifier value stores the text it was validated from (owned or
borrowed, see mxids.core.storage), the offset of its delimiter and, for
authority-bearing kinds, the parsed server name. All of it is computed once
by the validating constructor; accessors only slice the stored text.

Values are immutable. Equality, ordering and hashing use the canonical
string form, so ``EventId("$a:example.com:443") == EventId("$a:example.com")``.
Values of different kinds never compare equal.

Wire form:
    Identifiers are plain strings on the wire. They can be used directly as
    pydantic model field types: validation runs the validating constructor
    and serialization emits the canonical form.

Python 3.13+.
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn, Self

from pydantic_core import core_schema

from mxids.config import DEFAULT_CONFIG, IdentifierConfig
from mxids.core.grammar import parse_authority_id
from mxids.core.render import render_authority_id
from mxids.core.storage import IdentifierSource, TextStorage, as_storage

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

    from mxids.core.authority import ServerName

__all__ = ["AuthorityIdentifier", "Identifier"]


@total_ordering
class Identifier:
    """Base class for identifier values.

    Subclasses implement ``_validate`` (and ``_render`` when their canonical
    form differs from the stored text).
    """

    __slots__ = ("_delimiter_offset", "_server_name", "_storage")

    _storage: TextStorage
    _delimiter_offset: int | None
    _server_name: ServerName | None

    def __init__(
        self,
        source: IdentifierSource,
        *,
        config: IdentifierConfig | None = None,
    ) -> None:
        """Validate source and build the identifier.

        Args:
            source: Identifier text, or a TextStorage holding it
            config: Validation options (default: DEFAULT_CONFIG)

        Raises:
            IdentifierError: The subclass matching the first violated rule
        """
        storage = as_storage(source)
        delimiter_offset, server_name = self._validate(
            storage.as_str(), config if config is not None else DEFAULT_CONFIG
        )
        self._assign(storage, delimiter_offset, server_name)

    @classmethod
    def parse(cls, source: IdentifierSource, *, config: IdentifierConfig | None = None) -> Self:
        """Validating constructor. Equivalent to ``cls(source)``."""
        return cls(source, config=config)

    @classmethod
    def _validate(
        cls, text: str, config: IdentifierConfig
    ) -> tuple[int | None, ServerName | None]:
        """Validate text; return (delimiter offset, server name)."""
        raise NotImplementedError

    @classmethod
    def _from_parts(
        cls,
        storage: TextStorage,
        delimiter_offset: int | None,
        server_name: ServerName | None,
    ) -> Self:
        """Build a value from already-validated parts without re-parsing."""
        instance = object.__new__(cls)
        instance._assign(storage, delimiter_offset, server_name)
        return instance

    def _assign(
        self,
        storage: TextStorage,
        delimiter_offset: int | None,
        server_name: ServerName | None,
    ) -> None:
        object.__setattr__(self, "_storage", storage)
        object.__setattr__(self, "_delimiter_offset", delimiter_offset)
        object.__setattr__(self, "_server_name", server_name)

    def _render(self) -> str:
        return self.as_str()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def storage(self) -> TextStorage:
        """Backing text (OwnedText or BorrowedText)."""
        return self._storage

    @property
    def delimiter_offset(self) -> int | None:
        """Index of the ':' delimiter in the stored text, or None."""
        return self._delimiter_offset

    def as_str(self) -> str:
        """Return the stored text exactly as validated."""
        return self._storage.as_str()

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        """Canonical form."""
        return self._render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_str()!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return str(self) < str(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, str(self)))

    def __setattr__(self, name: str, value: object) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type[Self], tuple[str]]:
        return (type(self), (self.as_str(),))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from str through the constructor; serialize canonically."""
        from_str = core_schema.no_info_after_validator_function(cls, core_schema.str_schema())
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([*cls._instance_schemas(), from_str]),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _instance_schemas(cls) -> list[core_schema.CoreSchema]:
        """Python-mode schemas for values accepted without re-parsing."""
        return [core_schema.is_instance_schema(cls)]


class AuthorityIdentifier(Identifier):
    """Identifier of the form ``sigil localpart ":" server-name``.

    The delimiter and server name are mandatory. Shared by room, room alias
    and user identifiers, and by RoomIdOrAliasId.
    """

    __slots__ = ()

    sigils: ClassVar[tuple[str, ...]]

    _delimiter_offset: int
    _server_name: ServerName

    @classmethod
    def _validate(cls, text: str, config: IdentifierConfig) -> tuple[int, ServerName]:
        return parse_authority_id(text, cls.sigils)

    def _render(self) -> str:
        server_name = self._server_name
        return render_authority_id(
            self.as_str()[0], self.localpart, server_name.host, server_name.port
        )

    @property
    def localpart(self) -> str:
        """Text between the sigil and the delimiter."""
        return self.as_str()[1 : self._delimiter_offset]

    @property
    def server_name(self) -> ServerName:
        """Parsed ``host[:port]`` of the owning server."""
        return self._server_name

    @property
    def host(self) -> str:
        return self._server_name.host

    @property
    def port(self) -> int:
        """Server port (443 when the identifier names none)."""
        return self._server_name.port
