"""
Unit tests for normalizer configuration.
"""

import pytest

from playlist_source.core.config import (
    DEFAULT_NORMALIZER_CONFIG,
    DEFAULT_TYPE_ALIASES,
    resolve_normalizer_config,
)
from playlist_source.core.errors import ConfigurationError, PlaylistSourceError


class TestResolveNormalizerConfig:
    """Tests for resolve_normalizer_config."""

    def test_defaults(self):
        """Test that no overrides gives the default configuration."""
        config = resolve_normalizer_config()

        assert config == DEFAULT_NORMALIZER_CONFIG
        assert config["type_aliases"]["m3u8"] == "hls"
        assert config["source_defaults"] == {"default": False, "type": ""}

    def test_returns_a_copy(self):
        """Test that mutating the result leaves the defaults alone."""
        config = resolve_normalizer_config()
        config["type_aliases"]["m3u8"] = "mp4"

        assert DEFAULT_TYPE_ALIASES["m3u8"] == "hls"

    def test_aliases_merge(self):
        """Test that alias overrides merge into the built-in table."""
        config = resolve_normalizer_config({"type_aliases": {"mpd": "dash", "smil": "hls"}})

        assert config["type_aliases"]["mpd"] == "dash"
        assert config["type_aliases"]["smil"] == "hls"
        assert config["type_aliases"]["m4a"] == "aac"

    def test_source_defaults_merge(self):
        """Test that source default overrides merge key by key."""
        config = resolve_normalizer_config({"source_defaults": {"default": True}})

        assert config["source_defaults"] == {"default": True, "type": ""}

    def test_scalar_override(self):
        """Test that other keys are replaced."""
        config = resolve_normalizer_config({"include_raw_source": True})
        assert config["include_raw_source"] is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {"type_aliases": "m3u8=hls"},
            {"type_aliases": {"m3u8": ""}},
            {"type_aliases": {"": "hls"}},
            {"type_aliases": {"m3u8": 1}},
            {"source_defaults": ["default"]},
        ],
    )
    def test_invalid_overrides(self, overrides):
        """Test that malformed overrides raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            resolve_normalizer_config(overrides)

    def test_non_mapping(self):
        """Test that the overrides themselves must be a mapping."""
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_normalizer_config([("include_raw_source", True)])

        assert isinstance(exc_info.value, PlaylistSourceError)
        assert str(exc_info.value) == "Normalizer configuration must be a mapping: got list"
