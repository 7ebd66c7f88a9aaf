"""Hypothesis strategies for mxids property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules:

- identifiers: server names, localparts, identifiers and malformed input

Usage:
    from tests.strategies import server_names, legacy_identifiers
    from tests.strategies.identifiers import too_long_texts

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - hosts, server_names
"""

from .identifiers import (
    LOCALPART_CHARS,
    OPAQUE_CHARS,
    dns_labels,
    dns_names,
    hosts,
    invalid_port_texts,
    ipv4_hosts,
    ipv6_hosts,
    legacy_identifiers,
    localparts,
    non_default_ports,
    non_sigil_chars,
    opaque_event_bodies,
    ports,
    server_names,
    too_long_texts,
    too_short_texts,
)

__all__ = [
    "LOCALPART_CHARS",
    "OPAQUE_CHARS",
    "dns_labels",
    "dns_names",
    "hosts",
    "invalid_port_texts",
    "ipv4_hosts",
    "ipv6_hosts",
    "legacy_identifiers",
    "localparts",
    "non_default_ports",
    "non_sigil_chars",
    "opaque_event_bodies",
    "ports",
    "server_names",
    "too_long_texts",
    "too_short_texts",
]
