"""Custom exceptions for playlist source normalization."""


class PlaylistSourceError(Exception):
    """Base exception for playlist source errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class SourceRejectedError(PlaylistSourceError):
    """Exception raised when a source descriptor cannot be used."""

    def __init__(
        self,
        message: str = "Source rejected",
        file: str = None,
        details: str = None,
    ):
        self.file = file
        super().__init__(message, details)


class MissingFileError(SourceRejectedError):
    """Exception raised when a source has no file."""

    def __init__(self, details: str = None):
        super().__init__(message="Source has no file", details=details)


class UndeterminedTypeError(SourceRejectedError):
    """Exception raised when no type can be established for a source."""

    def __init__(self, file: str = None):
        message = "Could not determine source type"
        if file:
            message = f"Could not determine type of source '{file}'"
        super().__init__(message, file=file)


class ConfigurationError(PlaylistSourceError):
    """Exception raised for normalizer configuration errors."""

    def __init__(self, message: str = "Configuration error", details: str = None):
        super().__init__(message, details)
