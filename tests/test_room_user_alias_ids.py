"""Room, room alias and user identifier tests."""

import pytest

from mxids import (
    HostKind,
    InvalidHostError,
    InvalidServerNameError,
    MaximumLengthExceededError,
    MinimumLengthNotSatisfiedError,
    MissingDelimiterError,
    MissingSigilError,
    RoomAliasId,
    RoomId,
    UserId,
)


class TestRoomId:
    """``!localpart:server``."""

    def test_valid_room_id(self) -> None:
        """Localpart and server name are exposed."""
        room_id = RoomId("!29fhd83h92h0:example.com")
        assert room_id.localpart == "29fhd83h92h0"
        assert room_id.host == "example.com"
        assert room_id.port == 443
        assert room_id.server_name.kind is HostKind.DOMAIN

    def test_room_id_with_port(self) -> None:
        """Non-default ports are kept in the canonical form."""
        room_id = RoomId("!29fhd83h92h0:example.com:5000")
        assert room_id.port == 5000
        assert str(room_id) == "!29fhd83h92h0:example.com:5000"

    def test_default_port_normalized(self) -> None:
        """Port 443 is dropped from the canonical form."""
        assert str(RoomId("!29fhd83h92h0:example.com:443")) == "!29fhd83h92h0:example.com"

    def test_missing_delimiter(self) -> None:
        """The server name is mandatory."""
        with pytest.raises(MissingDelimiterError):
            RoomId("!29fhd83h92h0")

    def test_missing_sigil(self) -> None:
        """Alias sigil is not accepted."""
        with pytest.raises(MissingSigilError):
            RoomId("#29fhd83h92h0:example.com")

    def test_empty_localpart(self) -> None:
        """Nothing between the sigil and the delimiter."""
        with pytest.raises(MinimumLengthNotSatisfiedError):
            RoomId("!:example.com")

    def test_absent_host(self) -> None:
        """Port without host."""
        with pytest.raises(InvalidHostError):
            RoomId("!29fhd83h92h0::5000")

    def test_invalid_port(self) -> None:
        """Port out of range."""
        with pytest.raises(InvalidServerNameError):
            RoomId("!29fhd83h92h0:example.com:70000")

    def test_too_long(self) -> None:
        """More than 255 bytes."""
        with pytest.raises(MaximumLengthExceededError):
            RoomId("!" + "x" * 250 + ":example.com")


class TestRoomAliasId:
    """``#alias:server``."""

    def test_valid_room_alias_id(self) -> None:
        """alias is the localpart."""
        alias = RoomAliasId("#ruma:example.com")
        assert alias.alias == "ruma"
        assert alias.localpart == "ruma"
        assert alias.host == "example.com"

    def test_alias_with_ipv6_and_port(self) -> None:
        """IPv6 host with port."""
        alias = RoomAliasId("#ruma:[::1]:5000")
        assert alias.host == "[::1]"
        assert alias.port == 5000
        assert str(alias) == "#ruma:[::1]:5000"

    def test_missing_delimiter(self) -> None:
        """The server name is mandatory."""
        with pytest.raises(MissingDelimiterError):
            RoomAliasId("#ruma")

    def test_missing_sigil(self) -> None:
        """Room sigil is not accepted."""
        with pytest.raises(MissingSigilError):
            RoomAliasId("!ruma:example.com")

    def test_no_generator(self) -> None:
        """Aliases are chosen by people and cannot be generated."""
        assert not hasattr(RoomAliasId, "generate")


class TestUserId:
    """``@localpart:server``."""

    def test_valid_user_id(self) -> None:
        """Current grammar localpart."""
        user_id = UserId("@carl:example.com")
        assert user_id.localpart == "carl"
        assert user_id.host == "example.com"
        assert not user_id.is_historical

    @pytest.mark.parametrize("localpart", ["a.b", "a_b", "a=b", "a-b", "a/b", "0123"])
    def test_current_grammar_characters(self, localpart: str) -> None:
        """All characters of the current localpart grammar."""
        assert not UserId(f"@{localpart}:example.com").is_historical

    @pytest.mark.parametrize("localpart", ["Carl", "carl!", "c arl", "çarl", "🦀"])
    def test_historical_user_id(self, localpart: str) -> None:
        """Characters outside the current grammar are still valid."""
        user_id = UserId(f"@{localpart}:example.com")
        assert user_id.is_historical
        assert user_id.localpart == localpart

    def test_missing_sigil(self) -> None:
        """Missing '@'."""
        with pytest.raises(MissingSigilError):
            UserId("carl:example.com")

    def test_missing_delimiter(self) -> None:
        """The server name is mandatory."""
        with pytest.raises(MissingDelimiterError):
            UserId("@carl")

    def test_invalid_host(self) -> None:
        """Empty server name."""
        with pytest.raises(InvalidHostError):
            UserId("@carl:")

    def test_same_text_different_kinds(self) -> None:
        """A user ID and a room alias with the same body are different values."""
        assert UserId("@carl:example.com") != RoomAliasId("#carl:example.com")
        assert len({UserId("@carl:example.com"), UserId("@carl:example.com:443")}) == 1
