"""Canonical renderer tests."""

import pytest

import mxids
from mxids import EventId, RoomId, ServerKeyId, UserId
from mxids.core import render_authority_id, render_server_name


class TestRenderServerName:
    """host or host:port."""

    @pytest.mark.parametrize(
        ("host", "port", "expected"),
        [
            ("example.com", 443, "example.com"),
            ("example.com", 8448, "example.com:8448"),
            ("example.com", 0, "example.com:0"),
            ("1.2.3.4", 80, "1.2.3.4:80"),
            ("[::1]", 443, "[::1]"),
            ("[::1]", 8448, "[::1]:8448"),
        ],
    )
    def test_render_server_name(self, host: str, port: int, expected: str) -> None:
        """The port is omitted only when it is 443."""
        assert render_server_name(host, port) == expected


class TestRenderAuthorityId:
    """sigil + localpart + ':' + server name."""

    def test_default_port(self) -> None:
        """Port 443 omitted."""
        assert render_authority_id("$", "39hvsi03hlne", "example.com", 443) == (
            "$39hvsi03hlne:example.com"
        )

    def test_custom_port(self) -> None:
        """Other ports kept."""
        assert render_authority_id("@", "carl", "example.com", 5000) == "@carl:example.com:5000"


class TestIdentifierRendering:
    """str() of identifier values."""

    def test_explicit_443_is_normalized(self) -> None:
        """The one intentional non-identity of the round trip."""
        text = "$39hvsi03hlne:example.com:443"
        event_id = EventId(text)
        assert str(event_id) == "$39hvsi03hlne:example.com"
        assert event_id.as_str() == text
        assert EventId(str(event_id)) == event_id

    @pytest.mark.parametrize(
        "text",
        [
            "!29fhd83h92h0:example.com",
            "!29fhd83h92h0:example.com:5000",
            "!29fhd83h92h0:1.2.3.4",
            "!29fhd83h92h0:[2001:db8::1]:8448",
            "!29fhd83h92h0:Example.COM",
        ],
    )
    def test_identity_round_trip(self, text: str) -> None:
        """Without an explicit 443 the rendering is the input."""
        assert str(RoomId(text)) == text

    def test_host_written_as_is(self) -> None:
        """IPv6 literals are not compressed or case folded."""
        user_id = UserId("@carl:[2001:DB8:0:0::1]")
        assert str(user_id) == "@carl:[2001:DB8:0:0::1]"

    def test_server_key_id_verbatim(self) -> None:
        """Key IDs render as stored."""
        assert str(ServerKeyId("ed25519:0")) == "ed25519:0"


class TestPackageMetadata:
    """Package-level attributes."""

    def test_version(self) -> None:
        """A version string is always available."""
        assert isinstance(mxids.__version__, str)
        assert mxids.__version__
