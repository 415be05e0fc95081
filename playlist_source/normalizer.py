"""Source normalizer facade for playlist construction.

The playlist layer calls these functions once per source of a playlist
item. ``normalize`` follows the skip-on-absence convention: an unusable
source comes back as None and the caller drops it. ``normalize_or_raise``
is the strict form for callers that want to report why.
"""

from typing import Any, Iterable

from playlist_source.core.errors import MissingFileError, UndeterminedTypeError
from playlist_source.core.models import NormalizedSource, SourceRejection
from playlist_source.normalizers import create_normalizer
from playlist_source.normalizers.base import NormalizationResult
from playlist_source.normalizers.collaborators import SourceCollaborators


def normalize_with_result(
    config: Any,
    collaborators: SourceCollaborators,
    normalizer_config: dict[str, Any] | None = None,
) -> NormalizationResult:
    """Normalize one source descriptor and return the full result."""
    normalizer = create_normalizer("playlist_item", collaborators, normalizer_config)
    return normalizer.normalize(config)


def normalize(
    config: Any,
    collaborators: SourceCollaborators,
    normalizer_config: dict[str, Any] | None = None,
) -> NormalizedSource | None:
    """Normalize one source descriptor.

    Args:
        config: Mapping or RawSourceConfig describing the source, or None
        collaborators: URL predicates and string helpers
        normalizer_config: Inline configuration overrides (optional)

    Returns:
        The NormalizedSource, or None if the source has no file or no
        determinable type
    """
    return normalize_with_result(config, collaborators, normalizer_config).source


def normalize_or_raise(
    config: Any,
    collaborators: SourceCollaborators,
    normalizer_config: dict[str, Any] | None = None,
) -> NormalizedSource:
    """Normalize one source descriptor, raising if it is unusable.

    Raises:
        MissingFileError: If the descriptor is absent or has no file
        UndeterminedTypeError: If no type can be established
    """
    result = normalize_with_result(config, collaborators, normalizer_config)
    if result.success:
        return result.source

    if result.rejection == SourceRejection.UNDETERMINED_TYPE:
        file = None
        for issue in result.validation.errors:
            if issue.field_path == "type":
                file = issue.source_value
        raise UndeterminedTypeError(file=file)

    details = "; ".join(issue.message for issue in result.validation.errors) or None
    raise MissingFileError(details=details)


def normalize_sources(
    configs: Iterable[Any],
    collaborators: SourceCollaborators,
    normalizer_config: dict[str, Any] | None = None,
) -> list[NormalizedSource]:
    """Normalize several source descriptors, dropping unusable ones.

    Order is preserved.
    """
    normalizer = create_normalizer("playlist_item", collaborators, normalizer_config)
    sources = []
    for config in configs:
        result = normalizer.normalize(config)
        if result.success:
            sources.append(result.source)
    return sources
