"""Configuration for playlist source normalization.

Configuration is a plain dictionary resolved in code. Callers pass inline
overrides which are merged on top of DEFAULT_NORMALIZER_CONFIG; the alias
table is merged key by key so a caller can add an alias without restating
the built-in ones.

Usage:
    from playlist_source.core.config import resolve_normalizer_config

    config = resolve_normalizer_config({
        "type_aliases": {"mpd": "dash"},
        "include_raw_source": True,
    })
"""

import copy
import os
from typing import Any, Mapping

from playlist_source.core.errors import ConfigurationError

# Powertools reads POWERTOOLS_SERVICE_NAME itself; this is the fallback
SERVICE_NAME = os.environ.get("POWERTOOLS_SERVICE_NAME", "playlist-source")

# Extension or MIME subtype -> canonical playback type token
DEFAULT_TYPE_ALIASES: dict[str, str] = {
    "m3u8": "hls",
    "vnd.apple.mpegurl": "hls",
    "dash+xml": "dash",
    # m4a is a container format but is overwhelmingly used for AAC audio
    "m4a": "aac",
    "smil": "rtmp",
}

# Values every working record starts from before the caller's fields overlay it
DEFAULT_SOURCE_VALUES: dict[str, Any] = {
    "default": False,
    "type": "",
}

DEFAULT_NORMALIZER_CONFIG: dict[str, Any] = {
    "type_aliases": DEFAULT_TYPE_ALIASES,
    "source_defaults": DEFAULT_SOURCE_VALUES,
    "include_raw_source": False,
    "warn_on_unknown_type": True,
}


def resolve_normalizer_config(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Resolve the normalizer configuration from inline overrides.

    Resolution order:
    1. Start from a deep copy of DEFAULT_NORMALIZER_CONFIG
    2. Merge ``type_aliases`` and ``source_defaults`` key by key
    3. Replace every other key wholesale

    Args:
        overrides: Inline configuration overrides (optional)

    Returns:
        Resolved configuration dictionary, safe for the caller to mutate

    Raises:
        ConfigurationError: If an override has the wrong shape
    """
    config = copy.deepcopy(DEFAULT_NORMALIZER_CONFIG)
    if not overrides:
        return config

    if not isinstance(overrides, Mapping):
        raise ConfigurationError(
            "Normalizer configuration must be a mapping",
            details=f"got {type(overrides).__name__}",
        )

    for key, value in overrides.items():
        if key == "type_aliases":
            config[key].update(_validate_type_aliases(value))
        elif key == "source_defaults":
            if not isinstance(value, Mapping):
                raise ConfigurationError(
                    "source_defaults must be a mapping",
                    details=f"got {type(value).__name__}",
                )
            config[key].update(value)
        else:
            config[key] = value

    return config


def _validate_type_aliases(aliases: Any) -> dict[str, str]:
    """Check that an alias table maps non-empty strings to non-empty strings."""
    if not isinstance(aliases, Mapping):
        raise ConfigurationError(
            "type_aliases must be a mapping",
            details=f"got {type(aliases).__name__}",
        )
    for alias, canonical in aliases.items():
        if not isinstance(alias, str) or not alias:
            raise ConfigurationError("Type alias keys must be non-empty strings", details=repr(alias))
        if not isinstance(canonical, str) or not canonical:
            raise ConfigurationError(
                f"Type alias '{alias}' must map to a non-empty string",
                details=repr(canonical),
            )
    return dict(aliases)
