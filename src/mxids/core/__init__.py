"""Core grammar shared by every identifier kind.

This package holds the parsing machinery the identifier classes are built
on. By isolating it here, we keep a clean dependency graph:

    diagnostics <- core <- identifiers

Exports:
    ServerName, parse_authority, is_valid_server_name: authority parser
    ParsedId, parse_id: shared grammar validator for sigil-based kinds
    parse_server_key_id: grammar of server key identifiers
    OwnedText, BorrowedText, TextStorage: identifier backing text
    generate_id, generate_localpart, default_rng: random generation

Python 3.13+.
"""

from .authority import ServerName, is_valid_server_name, parse_authority
from .generator import generate_id
from .grammar import ParsedId, parse_id
from .key_grammar import parse_server_key_id
from .random_source import default_rng, generate_localpart
from .render import render_authority_id, render_server_name
from .storage import BorrowedText, IdentifierSource, OwnedText, TextStorage, as_storage

__all__ = [
    "BorrowedText",
    "IdentifierSource",
    "OwnedText",
    "ParsedId",
    "ServerName",
    "TextStorage",
    "as_storage",
    "default_rng",
    "generate_id",
    "generate_localpart",
    "is_valid_server_name",
    "parse_authority",
    "parse_id",
    "parse_server_key_id",
    "render_authority_id",
    "render_server_name",
]
