"""Room version identifier tests."""

import pytest

from mxids import MaximumLengthExceededError, MinimumLengthNotSatisfiedError, RoomVersionId


class TestRoomVersionId:
    """Official and custom room versions."""

    @pytest.mark.parametrize("version", ["1", "2", "3", "4", "5", "6"])
    def test_official_versions(self, version: str) -> None:
        """Versions 1 to 6 are official."""
        room_version = RoomVersionId(version)
        assert room_version.is_official
        assert not room_version.is_custom
        assert str(room_version) == version

    @pytest.mark.parametrize("version", ["7", "io.ruma.1", "org.matrix.msc2176"])
    def test_custom_versions(self, version: str) -> None:
        """Anything else valid is custom."""
        room_version = RoomVersionId(version)
        assert room_version.is_custom
        assert not room_version.is_official

    def test_official_listing(self) -> None:
        """official() lists every protocol-defined version in order."""
        assert [str(v) for v in RoomVersionId.official()] == ["1", "2", "3", "4", "5", "6"]

    def test_empty(self) -> None:
        """An empty version is a length error."""
        with pytest.raises(MinimumLengthNotSatisfiedError):
            RoomVersionId("")

    def test_maximum_is_inclusive(self) -> None:
        """32 characters is accepted."""
        assert RoomVersionId("v" * 32).is_custom

    def test_too_long(self) -> None:
        """33 characters is rejected."""
        with pytest.raises(MaximumLengthExceededError) as exc_info:
            RoomVersionId("v" * 33)
        assert "characters" in exc_info.value.message

    def test_limit_counts_characters(self) -> None:
        """Multi-byte characters count once."""
        assert RoomVersionId("é" * 32).as_str() == "é" * 32

    def test_equality(self) -> None:
        """Equal text, equal value."""
        assert RoomVersionId("5") == RoomVersionId("5")
        assert RoomVersionId("5") != RoomVersionId("6")
        assert RoomVersionId("1") < RoomVersionId("2")
