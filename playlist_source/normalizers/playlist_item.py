"""Normalizer for playlist item sources.

Turns one loosely specified source descriptor into a NormalizedSource with
a canonical ``type``, or rejects it. A descriptor is rejected for exactly
two reasons: it has no ``file``, or no type can be established from the
explicit type, a MIME type, the URL's host classification, or the file
extension. Everything else is normalized best-effort.

Example:
    >>> normalizer = PlaylistItemSourceNormalizer(collaborators)
    >>> result = normalizer.normalize({"file": "a.mp4", "type": "video/mp4"})
    >>> result.source.to_dict()
    {'file': 'a.mp4', 'type': 'mp4', 'default': False, 'mimeType': 'video/mp4'}
"""

from typing import Any, Mapping, override

from aws_lambda_powertools import Logger

from playlist_source.core.config import SERVICE_NAME, resolve_normalizer_config
from playlist_source.core.models import (
    NormalizedSource,
    RawSourceConfig,
    SourceRejection,
    split_wire_fields,
)
from playlist_source.normalizers.base import (
    NormalizationResult,
    SourceNormalizer,
    ValidationResult,
)
from playlist_source.normalizers.collaborators import SourceCollaborators
from playlist_source.normalizers.source_types import canonicalize_type, detect_mime_type
from playlist_source.normalizers.validation import (
    validate_input_source,
    validate_output_source,
)

logger = Logger(service=SERVICE_NAME)


def apply_source_defaults(
    raw_source: Mapping[str, Any], defaults: Mapping[str, Any]
) -> dict[str, Any]:
    """Return a working record of ``defaults`` overlaid with the caller's fields.

    Caller values win; a caller value of None counts as not supplied.
    """
    working = dict(defaults)
    working.update({key: value for key, value in raw_source.items() if value is not None})
    return working


def _coerce_type(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class PlaylistItemSourceNormalizer(SourceNormalizer):
    """Normalizer for the sources of a playlist item.

    Configuration Options:
        type_aliases: Extension/MIME subtype -> canonical type table
        source_defaults: Values a source starts from before its own fields
        include_raw_source: Attach the raw descriptor to the result
        warn_on_unknown_type: Warn when the final type is not a known token
    """

    def __init__(
        self,
        collaborators: SourceCollaborators,
        config: dict[str, Any] | None = None,
    ):
        """Initialize the normalizer.

        Args:
            collaborators: URL predicates and string helpers to delegate to
            config: Inline configuration overrides, merged on top of the
                    defaults by resolve_normalizer_config
        """
        super().__init__(resolve_normalizer_config(config))
        self.collaborators = collaborators

        self._type_aliases: dict[str, str] = self.config["type_aliases"]
        self._source_defaults: dict[str, Any] = self.config["source_defaults"]
        self._include_raw_source: bool = bool(self.config.get("include_raw_source", False))
        self._warn_on_unknown_type: bool = bool(self.config.get("warn_on_unknown_type", True))

    @override
    def get_source_type(self) -> str:
        return "playlist_item"

    @override
    def validate_input(self, raw_source: Any) -> ValidationResult:
        """Validate that the descriptor exists and has a file.

        Args:
            raw_source: Mapping or RawSourceConfig supplied by the caller

        Returns:
            ValidationResult with is_valid=False for a missing file
        """
        return validate_input_source(raw_source)

    @override
    def normalize(self, raw_source: Any) -> NormalizationResult:
        """Normalize a source descriptor.

        Steps, in order:
        1. Reject a missing descriptor or falsy file
        2. Overlay the descriptor on the source defaults
        3. Trim the file
        4. Split a MIME type into mimeType and its subtype
        5. Classify YouTube and RTMP URLs, else fall back to the extension
        6. Reject if no type is known
        7. Map aliases to canonical types
        8. Build the record from the non-empty fields

        Args:
            raw_source: Mapping or RawSourceConfig supplied by the caller

        Returns:
            NormalizationResult with success=True and the source, or
            success=False and the rejection reason
        """
        validation = self.validate_input(raw_source)
        if isinstance(raw_source, (RawSourceConfig, NormalizedSource)):
            raw_source = raw_source.to_dict()
        raw_copy = None
        if self._include_raw_source and isinstance(raw_source, Mapping):
            raw_copy = dict(raw_source)

        if not validation.is_valid:
            return self._reject(SourceRejection.MISSING_FILE, validation, raw_copy)

        for issue in validation.warnings:
            logger.warning(
                "Coercing source field",
                extra={"field": issue.field_path, "detail": issue.message},
            )

        working = apply_source_defaults(raw_source, self._source_defaults)
        values, extras = split_wire_fields(working)

        file = self.collaborators.trim(str(values["file"]))

        source_type = _coerce_type(values.get("type"))
        subtype = detect_mime_type(source_type)
        if subtype is not None:
            logger.debug(
                "Source type is a MIME type",
                extra={"mime_type": source_type, "subtype": subtype},
            )
            values["mime_type"] = source_type
            source_type = subtype

        source_type = self._classify(file, source_type)
        if not source_type:
            validation.add_error(
                field_path="type",
                message="Could not determine source type",
                source_value=file,
            )
            return self._reject(SourceRejection.UNDETERMINED_TYPE, validation, raw_copy, file)

        values["file"] = file
        values["type"] = canonicalize_type(source_type, self._type_aliases)
        values["default"] = bool(values.get("default", False))

        source = NormalizedSource.build(values, extras)
        validation.merge(validate_output_source(source, self._warn_on_unknown_type))

        return NormalizationResult(
            success=True,
            source=source,
            validation=validation,
            raw_source=raw_copy,
        )

    def _classify(self, file: str, source_type: str) -> str:
        """Pick the type by host classification, falling back to the extension.

        YouTube and RTMP URLs override any explicit type. The extension is
        only consulted when no type is known yet.
        """
        if self.collaborators.is_youtube(file):
            return "youtube"
        if self.collaborators.is_rtmp(file):
            return "rtmp"
        if not source_type:
            return self.collaborators.extension(file) or ""
        return source_type

    def _reject(
        self,
        rejection: SourceRejection,
        validation: ValidationResult,
        raw_copy: dict[str, Any] | None,
        file: str | None = None,
    ) -> NormalizationResult:
        logger.debug(
            "Source rejected",
            extra={
                "rejection": rejection.value,
                "file": file,
                "error_count": len(validation.errors),
            },
        )
        return NormalizationResult(
            success=False,
            rejection=rejection,
            validation=validation,
            raw_source=raw_copy,
        )
