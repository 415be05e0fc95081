"""Base interfaces for playlist source normalizers.

This module defines the abstract base class and result structures shared by
all source normalizers. Normalizers never raise for unusable input; they
report the outcome through a NormalizationResult.

Key Classes:
    SourceNormalizer: Abstract base class for all normalizers
    ValidationResult: Result of input or output validation
    ValidationIssue: Individual validation issue (warning or error)
    NormalizationResult: Complete result of normalization process
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from playlist_source.core.models import NormalizedSource, SourceRejection


class ValidationSeverity(Enum):
    """WARNING leaves the source usable; ERROR rejects it."""

    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationIssue:
    """One problem found in a source descriptor.

    ``field_path`` is the wire key (e.g. "file", "type") or "root" when the
    descriptor itself is unusable.
    """

    severity: ValidationSeverity
    field_path: str
    message: str
    source_value: Any | None = None


@dataclass
class ValidationResult:
    """Issues collected while validating one source.

    ``is_valid`` turns False on the first error and stays False.
    """

    is_valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self._with_severity(ValidationSeverity.WARNING)

    @property
    def errors(self) -> list[ValidationIssue]:
        return self._with_severity(ValidationSeverity.ERROR)

    def add_warning(
        self, field_path: str, message: str, source_value: Any | None = None
    ) -> None:
        """Record a coerced or suspicious field."""
        self.issues.append(
            ValidationIssue(ValidationSeverity.WARNING, field_path, message, source_value)
        )

    def add_error(
        self, field_path: str, message: str, source_value: Any | None = None
    ) -> None:
        """Record a rejecting problem and mark the result invalid."""
        self.issues.append(
            ValidationIssue(ValidationSeverity.ERROR, field_path, message, source_value)
        )
        self.is_valid = False

    def merge(self, other: "ValidationResult") -> None:
        """Append another result's issues to this one."""
        self.issues.extend(other.issues)
        self.is_valid = self.is_valid and other.is_valid

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging or an API response.

        ``source_value`` is only included for issues that carry one.
        """
        issues = []
        for issue in self.issues:
            entry: dict[str, Any] = {
                "severity": issue.severity.value,
                "field_path": issue.field_path,
                "message": issue.message,
            }
            if issue.source_value is not None:
                entry["source_value"] = issue.source_value
            issues.append(entry)
        return {
            "is_valid": self.is_valid,
            "issues": issues,
            "warning_count": len(self.warnings),
            "error_count": len(self.errors),
        }

    def _with_severity(self, severity: ValidationSeverity) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == severity]


@dataclass
class NormalizationResult:
    """Result of the normalization process.

    Attributes:
        success: True if the source is usable
        source: The normalized source (if successful)
        rejection: Why the source was rejected (if not successful)
        validation: Validation result with any warnings or errors
        raw_source: Original descriptor for debugging (if configured)
    """

    success: bool
    source: NormalizedSource | None = None
    rejection: SourceRejection | None = None
    validation: ValidationResult = field(
        default_factory=lambda: ValidationResult(is_valid=True)
    )
    raw_source: Mapping[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        Returns:
            Dictionary representation suitable for logging or an API response
        """
        result: dict[str, Any] = {
            "success": self.success,
            "validation": self.validation.to_dict(),
        }

        if self.source is not None:
            result["source"] = self.source.to_dict()

        if self.rejection is not None:
            result["rejection"] = self.rejection.value

        if self.raw_source is not None:
            result["raw_source"] = dict(self.raw_source)

        return result


class SourceNormalizer(ABC):
    """Abstract base class for playlist source normalizers.

    Example:
        class MyNormalizer(SourceNormalizer):
            def get_source_type(self) -> str:
                return "my_source"

            def validate_input(self, raw_source) -> ValidationResult:
                ...

            def normalize(self, raw_source) -> NormalizationResult:
                ...

    Attributes:
        config: Resolved configuration dictionary
    """

    config: dict[str, Any]

    def __init__(self, config: dict[str, Any] | None = None):
        self.config = config or {}

    @abstractmethod
    def get_source_type(self) -> str:
        """Return the identifier this normalizer is registered under."""

    @abstractmethod
    def validate_input(self, raw_source: Any) -> ValidationResult:
        """Validate a raw source descriptor before normalization.

        Args:
            raw_source: Mapping or RawSourceConfig supplied by the caller

        Returns:
            ValidationResult with is_valid=False if the source must be
            rejected before any field is derived
        """

    @abstractmethod
    def normalize(self, raw_source: Any) -> NormalizationResult:
        """Transform a raw source descriptor into a NormalizedSource.

        Args:
            raw_source: Mapping or RawSourceConfig supplied by the caller

        Returns:
            NormalizationResult with success=True and the source if usable,
            or success=False with the rejection reason
        """

    def get_config_value(self, key: str, default: Any | None = None) -> Any | None:
        """Get a configuration value with optional default."""
        return self.config.get(key, default)
