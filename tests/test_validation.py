"""
Unit tests for source validation.
"""

from types import MappingProxyType

from playlist_source.core.models import NormalizedSource, RawSourceConfig
from playlist_source.normalizers.base import ValidationResult, ValidationSeverity
from playlist_source.normalizers.validation import (
    validate_input_source,
    validate_output_source,
)


class TestValidateInputSource:
    """Tests for input validation."""

    def test_valid(self):
        """Test a minimal valid source."""
        result = validate_input_source({"file": "a.mp4"})
        assert result.is_valid
        assert result.issues == []

    def test_none(self):
        """Test that None is an error on the root."""
        result = validate_input_source(None)
        assert not result.is_valid
        assert result.errors[0].field_path == "root"

    def test_not_a_mapping(self):
        """Test that a list is refused."""
        result = validate_input_source(["a.mp4"])
        assert not result.is_valid
        assert result.errors[0].source_value == "list"

    def test_missing_file(self):
        """Test that a missing file is an error."""
        result = validate_input_source({"type": "mp4"})
        assert not result.is_valid
        assert result.errors[0].field_path == "file"

    def test_raw_source_config(self):
        """Test that a RawSourceConfig is validated by its wire shape."""
        assert validate_input_source(RawSourceConfig(file="a.mp4")).is_valid
        assert not validate_input_source(RawSourceConfig(label="HD")).is_valid

    def test_normalized_source(self):
        """Test that a NormalizedSource is validated by its wire shape."""
        assert validate_input_source(NormalizedSource(file="a.mp4", type="mp4")).is_valid
        assert not validate_input_source(NormalizedSource(type="mp4")).is_valid

    def test_non_bool_default_warns(self):
        """Test that a non-bool default is a warning, not an error."""
        result = validate_input_source({"file": "a", "default": 1})
        assert result.is_valid
        assert result.warnings[0].field_path == "default"

    def test_non_string_type_warns(self):
        """Test that a non-string type is a warning."""
        result = validate_input_source({"file": "a", "type": 3})
        assert result.is_valid
        assert result.warnings[0].source_value == 3


class TestValidateOutputSource:
    """Tests for output invariant checks."""

    def test_valid(self):
        """Test a well-formed source."""
        result = validate_output_source(NormalizedSource(file="a.mp4", type="mp4"))
        assert result.is_valid
        assert result.issues == []

    def test_empty_type(self):
        """Test that an empty type breaks the invariant."""
        result = validate_output_source(NormalizedSource(file="a", type=""))
        assert not result.is_valid
        assert "type" in [e.field_path for e in result.errors]

    def test_empty_string_field(self):
        """Test that empty strings are reported, including extras."""
        source = NormalizedSource(
            file="a.mp4", type="mp4", label="", extras=MappingProxyType({"preload": ""})
        )
        result = validate_output_source(source)
        assert sorted(e.field_path for e in result.errors) == ["label", "preload"]

    def test_non_bool_default(self):
        """Test that default must be a bool."""
        result = validate_output_source(NormalizedSource(file="a.mp4", type="mp4", default=1))
        assert [e.field_path for e in result.errors] == ["default"]

    def test_unknown_type(self):
        """Test the unknown-type warning and its switch."""
        source = NormalizedSource(file="a", type="mpegURL")

        assert validate_output_source(source).warnings[0].field_path == "type"
        assert validate_output_source(source, warn_on_unknown_type=False).issues == []


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_merge(self):
        """Test merging keeps issues and invalidity."""
        first = ValidationResult(is_valid=True)
        first.add_warning("default", "coerced")
        second = ValidationResult(is_valid=True)
        second.add_error("type", "missing")

        first.merge(second)

        assert first.is_valid is False
        assert [i.severity for i in first.issues] == [
            ValidationSeverity.WARNING,
            ValidationSeverity.ERROR,
        ]

    def test_to_dict(self):
        """Test serialization counts."""
        result = ValidationResult(is_valid=True)
        result.add_warning("type", "unknown", source_value="mpegURL")

        data = result.to_dict()

        assert data["is_valid"] is True
        assert data["warning_count"] == 1
        assert data["error_count"] == 0
        assert data["issues"][0] == {
            "severity": "warning",
            "field_path": "type",
            "message": "unknown",
            "source_value": "mpegURL",
        }

    def test_to_dict_omits_missing_source_value(self):
        """Test that an issue without a value serializes without the key."""
        result = ValidationResult(is_valid=True)
        result.add_error("root", "Source is None")

        data = result.to_dict()

        assert data["is_valid"] is False
        assert data["issues"] == [
            {"severity": "error", "field_path": "root", "message": "Source is None"}
        ]
