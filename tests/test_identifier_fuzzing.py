"""Intensive fuzzing of the identifier parsers.

Excluded from normal runs (see conftest.py). Run with: pytest -m fuzz
"""

import pytest
from hypothesis import HealthCheck, event, given, settings
from hypothesis import strategies as st

from mxids import (
    EventId,
    IdentifierError,
    RoomIdOrAliasId,
    ServerKeyId,
    ServerName,
    UserId,
)
from mxids.core import is_valid_server_name
from tests.strategies import legacy_identifiers

# Characters that exercise every authority branch
AUTHORITY_CHARS = "abc019.-:[]%@/?#_ \t\x00é"


# ============================================================================
# PARSER TOTALITY
# ============================================================================


@pytest.mark.fuzz
class TestParserTotality:
    """Parsers only ever raise IdentifierError."""

    @given(authority=st.text(alphabet=AUTHORITY_CHARS, max_size=30))
    @settings(max_examples=1500, suppress_health_check=[HealthCheck.too_slow])
    def test_authority_parser(self, authority: str) -> None:
        """INVARIANT: parse either succeeds or raises IdentifierError."""
        try:
            name = ServerName.parse(authority)
        except IdentifierError as error:
            event(f"error={type(error).__name__}")
            assert not is_valid_server_name(authority)
        else:
            event(f"kind={name.kind}")
            assert ServerName.parse(str(name)) == name

    @given(
        sigil=st.sampled_from("$!#@x"),
        body=st.text(alphabet=AUTHORITY_CHARS, max_size=40),
    )
    @settings(max_examples=1500)
    def test_sigil_identifiers(self, sigil: str, body: str) -> None:
        """INVARIANT: every kind raises only IdentifierError."""
        text = sigil + body
        for kind in (EventId, UserId, RoomIdOrAliasId):
            try:
                value = kind(text)
            except IdentifierError:
                event(f"{kind.__name__}=rejected")
            else:
                event(f"{kind.__name__}=accepted")
                assert kind(str(value)) == value

    @given(text=st.text(alphabet="ed25519:abcED_-", max_size=20))
    @settings(max_examples=1000)
    def test_server_key_ids(self, text: str) -> None:
        """INVARIANT: key IDs raise only IdentifierError."""
        try:
            key_id = ServerKeyId(text)
        except IdentifierError as error:
            event(f"error={type(error).__name__}")
        else:
            assert f"{key_id.algorithm}:{key_id.version}" == text


# ============================================================================
# MUTATION
# ============================================================================


@pytest.mark.fuzz
class TestMutation:
    """Single-character mutations of well-formed identifiers."""

    @given(
        text=legacy_identifiers("@"),
        data=st.data(),
    )
    @settings(max_examples=1000)
    def test_mutated_user_ids(self, text: str, data: st.DataObject) -> None:
        """PROPERTY: a mutated user ID is either valid or cleanly rejected."""
        index = data.draw(st.integers(min_value=0, max_value=len(text) - 1))
        replacement = data.draw(st.sampled_from(AUTHORITY_CHARS))
        mutated = text[:index] + replacement + text[index + 1 :]
        try:
            UserId(mutated)
        except IdentifierError as error:
            event(f"error={type(error).__name__}")
