"""IdentifierConfig tests."""

import dataclasses

import pytest

from mxids import DEFAULT_CONFIG, IdentifierConfig


class TestIdentifierConfig:
    """Construction and validation."""

    def test_defaults(self) -> None:
        """Defaults reproduce the protocol's standard behavior."""
        config = IdentifierConfig()
        assert config.strict_key_versions is False
        assert config.event_localpart_length == 18
        assert config.room_localpart_length == 18
        assert config.user_localpart_length == 12
        assert config == DEFAULT_CONFIG

    def test_frozen(self) -> None:
        """Configuration is immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.strict_key_versions = True  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field", ["event_localpart_length", "room_localpart_length", "user_localpart_length"]
    )
    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_length(self, field: str, length: int) -> None:
        """Localpart lengths must be positive."""
        with pytest.raises(ValueError, match="must be positive"):
            IdentifierConfig(**{field: length})

    def test_length_leaves_room_for_server_name(self) -> None:
        """A localpart may not fill the whole identifier."""
        assert IdentifierConfig(room_localpart_length=252).room_localpart_length == 252
        with pytest.raises(ValueError, match="at most 252"):
            IdentifierConfig(room_localpart_length=253)
