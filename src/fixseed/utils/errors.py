"""
Custom exceptions for fixseed.

This module defines all custom exceptions used throughout the package
so callers can tell tag, fixture and loader failures apart.
"""

from typing import Any, Optional


class FixseedException(Exception):
    """Base exception for all fixseed-specific errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Tag Resolution Exceptions
# =============================================================================


class TagResolutionError(FixseedException):
    """Base exception for embedded tag resolution errors."""

    pass


class UnsupportedDirectiveError(TagResolutionError):
    """Tag uses a directive other than ENV or REF."""

    def __init__(self, directive: str) -> None:
        """Initialize with directive name."""
        message = f"The directive '{directive}' is not supported"
        super().__init__(message, {"directive": directive})
        self.directive = directive


class MissingEnvironmentVariableError(TagResolutionError):
    """ENV tag names an unset variable and carries no default."""

    def __init__(self, key: str) -> None:
        """Initialize with variable name."""
        message = f"Environment variable '{key}' is not set"
        super().__init__(message, {"key": key})
        self.key = key


class UnresolvedReferenceError(TagResolutionError):
    """REF tag names a label that has not been registered."""

    def __init__(self, key: str) -> None:
        """Initialize with record label."""
        message = f"Failed to identify a record referred by the key '{key}'"
        super().__init__(message, {"key": key})
        self.key = key


# =============================================================================
# Fixture Exceptions
# =============================================================================


class FixtureError(FixseedException):
    """Base exception for fixture file processing."""

    pass


class FixtureNotFoundError(FixtureError):
    """Fixture file is missing or unreadable."""

    def __init__(self, path: str, error: str) -> None:
        """Initialize with path information."""
        message = f"Can't open the fixture file '{path}': {error}"
        super().__init__(message, {"path": path, "error": error})
        self.path = path


class FixtureDecodeError(FixtureError):
    """Substituted text could not be decoded into labeled records."""

    def __init__(self, filename: str, error: str, label: Optional[str] = None) -> None:
        """Initialize with decoding information."""
        message = f"Deserialization failed. Check the file '{filename}': {error}"
        details: dict[str, Any] = {"filename": filename, "error": error}
        if label is not None:
            details["label"] = label
        super().__init__(message, details)
        self.filename = filename
        self.label = label


class RecordInsertionError(FixtureError):
    """Caller-supplied insertion callback failed for a record."""

    def __init__(self, filename: str, label: str, error: str) -> None:
        """Initialize with record information."""
        message = f"Failed to insert record '{label}' from '{filename}': {error}"
        super().__init__(message, {"filename": filename, "label": label, "error": error})
        self.filename = filename
        self.label = label


# =============================================================================
# Record Loader Exceptions
# =============================================================================


class RecordLoaderError(FixseedException):
    """Base exception for single-load record containers."""

    pass


class AlreadyLoadedError(RecordLoaderError):
    """Records have already been loaded into the container."""

    def __init__(self, filename: str) -> None:
        """Initialize with file name."""
        message = f"The records of '{filename}' have been loaded already"
        super().__init__(message, {"filename": filename})


class NotLoadedError(RecordLoaderError):
    """Records were queried before being loaded."""

    def __init__(self, filename: str) -> None:
        """Initialize with file name."""
        message = f"No records of '{filename}' have been loaded yet"
        super().__init__(message, {"filename": filename})


class RecordNotFoundError(RecordLoaderError):
    """No record exists under the requested label."""

    def __init__(self, filename: str, label: str) -> None:
        """Initialize with label information."""
        message = f"{filename}: no record was found referred by the key '{label}'"
        super().__init__(message, {"filename": filename, "label": label})
        self.label = label
