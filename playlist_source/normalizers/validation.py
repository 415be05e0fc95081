"""Validation for playlist source normalization.

Input validation is the single pass that decides whether a descriptor can
be normalized at all; it never inspects optional fields beyond flagging
values that will be coerced. Output validation checks the invariants every
NormalizedSource must hold.

Key Functions:
    validate_input_source: Validate a raw descriptor before normalization
    validate_output_source: Validate a NormalizedSource after normalization
"""

from dataclasses import fields
from typing import Any, Mapping

from playlist_source.core.models import NormalizedSource, RawSourceConfig
from playlist_source.normalizers.base import ValidationResult
from playlist_source.normalizers.source_types import is_known_type


def validate_input_source(raw_source: Any) -> ValidationResult:
    """Validate a raw source descriptor before normalization.

    Errors (blocking):
    - descriptor is None or not a mapping
    - ``file`` is missing or falsy

    Warnings (non-blocking):
    - ``default`` is not a bool (it will be coerced with bool())
    - ``type`` is not a string (coerced with str(), or treated as empty
      when falsy)

    Args:
        raw_source: Mapping or RawSourceConfig supplied by the caller

    Returns:
        ValidationResult with is_valid=False if the source must be rejected
    """
    result = ValidationResult(is_valid=True)

    if raw_source is None:
        result.add_error(field_path="root", message="Source is None")
        return result

    # A normalized source may be fed back in
    if isinstance(raw_source, (RawSourceConfig, NormalizedSource)):
        raw_source = raw_source.to_dict()

    if not isinstance(raw_source, Mapping):
        result.add_error(
            field_path="root",
            message=f"Source must be a mapping, got {type(raw_source).__name__}",
            source_value=type(raw_source).__name__,
        )
        return result

    file_value = raw_source.get("file")
    if not file_value:
        result.add_error(
            field_path="file",
            message="Source has no file",
            source_value=file_value,
        )
        return result

    default = raw_source.get("default")
    if default is not None and not isinstance(default, bool):
        result.add_warning(
            field_path="default",
            message=f"default should be a bool, got {type(default).__name__}",
            source_value=default,
        )

    source_type = raw_source.get("type")
    if source_type is not None and not isinstance(source_type, str):
        if source_type:
            message = f"type should be a string, got {type(source_type).__name__}"
        else:
            message = "type is falsy and not a string, treating as empty"
        result.add_warning(field_path="type", message=message, source_value=source_type)

    return result


def validate_output_source(
    source: NormalizedSource, warn_on_unknown_type: bool = True
) -> ValidationResult:
    """Validate a NormalizedSource against its invariants.

    Args:
        source: Normalized source to check
        warn_on_unknown_type: Add a warning when ``type`` is not a known
            canonical token

    Returns:
        ValidationResult with errors for broken invariants and an optional
        warning for an unrecognized type
    """
    result = ValidationResult(is_valid=True)

    if not isinstance(source.type, str) or not source.type:
        result.add_error(
            field_path="type",
            message="Normalized source has no type",
            source_value=source.type,
        )

    if not isinstance(source.default, bool):
        result.add_error(
            field_path="default",
            message="default must be a bool",
            source_value=source.default,
        )

    for f in fields(source):
        if f.name == "extras":
            continue
        if _is_empty_string(getattr(source, f.name)):
            result.add_error(field_path=f.name, message="Field holds an empty string")

    for key, value in source.extras.items():
        if _is_empty_string(value):
            result.add_error(field_path=key, message="Field holds an empty string")

    if warn_on_unknown_type and source.type and not is_known_type(source.type):
        result.add_warning(
            field_path="type",
            message=f"Unrecognized source type '{source.type}'",
            source_value=source.type,
        )

    return result


def _is_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value == ""
