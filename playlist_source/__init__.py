"""Playlist source normalization.

Normalizes the loosely specified media source descriptors of a playlist
item into canonical records for the playback pipeline.
"""

from playlist_source.core.version import __version__
from playlist_source.core.errors import (
    PlaylistSourceError,
    SourceRejectedError,
    MissingFileError,
    UndeterminedTypeError,
    ConfigurationError,
)
from playlist_source.core.models import NormalizedSource, RawSourceConfig, SourceRejection
from playlist_source.normalizers.collaborators import SourceCollaborators
from playlist_source.normalizer import (
    normalize,
    normalize_or_raise,
    normalize_sources,
    normalize_with_result,
)

__all__ = [
    "__version__",
    "normalize",
    "normalize_or_raise",
    "normalize_sources",
    "normalize_with_result",
    "SourceCollaborators",
    "NormalizedSource",
    "RawSourceConfig",
    "SourceRejection",
    "PlaylistSourceError",
    "SourceRejectedError",
    "MissingFileError",
    "UndeterminedTypeError",
    "ConfigurationError",
]
