"""Core module for playlist source normalization."""

from playlist_source.core.version import __version__
from playlist_source.core.config import resolve_normalizer_config
from playlist_source.core.models import NormalizedSource, RawSourceConfig, SourceRejection
from playlist_source.core.errors import (
    PlaylistSourceError,
    SourceRejectedError,
    MissingFileError,
    UndeterminedTypeError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    "resolve_normalizer_config",
    "NormalizedSource",
    "RawSourceConfig",
    "SourceRejection",
    "PlaylistSourceError",
    "SourceRejectedError",
    "MissingFileError",
    "UndeterminedTypeError",
    "ConfigurationError",
]
