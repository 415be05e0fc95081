"""Pluggable playlist source normalizers.

Usage:
    from playlist_source.normalizers import create_normalizer

    normalizer = create_normalizer("playlist_item", collaborators, {
        "type_aliases": {"mpd": "dash"},
    })
    result = normalizer.normalize(raw_source)
"""

from typing import Any

from playlist_source.normalizers.base import (
    NormalizationResult,
    SourceNormalizer,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from playlist_source.normalizers.collaborators import SourceCollaborators
from playlist_source.normalizers.playlist_item import PlaylistItemSourceNormalizer
from playlist_source.normalizers.validation import (
    validate_input_source,
    validate_output_source,
)

# Maps source_type string to normalizer class
NORMALIZER_REGISTRY: dict[str, type[SourceNormalizer]] = {
    "playlist_item": PlaylistItemSourceNormalizer,
}


def create_normalizer(
    source_type: str,
    collaborators: SourceCollaborators,
    config: dict[str, Any] | None = None,
) -> SourceNormalizer:
    """Factory function to create the appropriate normalizer.

    Args:
        source_type: The normalizer type identifier (e.g., "playlist_item")
        collaborators: URL predicates and string helpers for the normalizer
        config: Inline configuration overrides

    Returns:
        SourceNormalizer instance configured for the specified source type

    Raises:
        ValueError: If source_type is not registered in NORMALIZER_REGISTRY
    """
    normalizer_class = NORMALIZER_REGISTRY.get(source_type)

    if not normalizer_class:
        available = ", ".join(sorted(NORMALIZER_REGISTRY.keys())) or "(none registered)"
        raise ValueError(
            f"Unknown source type: '{source_type}'. "
            f"Available normalizers: {available}"
        )

    return normalizer_class(collaborators, config)


def register_normalizer(source_type: str, normalizer_class: type) -> None:
    """Register a new normalizer type.

    Args:
        source_type: Unique identifier for this normalizer type
        normalizer_class: Class implementing SourceNormalizer interface

    Raises:
        TypeError: If normalizer_class doesn't inherit from SourceNormalizer
    """
    if not isinstance(normalizer_class, type) or not issubclass(
        normalizer_class, SourceNormalizer
    ):
        name = getattr(normalizer_class, "__name__", repr(normalizer_class))
        raise TypeError(
            f"Normalizer class must inherit from SourceNormalizer, got {name}"
        )
    NORMALIZER_REGISTRY[source_type] = normalizer_class


__all__ = [
    "create_normalizer",
    "register_normalizer",
    "SourceNormalizer",
    "SourceCollaborators",
    "PlaylistItemSourceNormalizer",
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "NormalizationResult",
    "NORMALIZER_REGISTRY",
    "validate_input_source",
    "validate_output_source",
]
