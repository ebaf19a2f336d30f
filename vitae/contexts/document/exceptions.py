"""Custom exceptions for the document context."""

from typing import Optional


class InvalidResumeDataError(ValueError):
    """
    Exception raised when resume JSON is malformed or doesn't match the document shape.

    Attributes:
        message: Error description
        field_path: Dotted path of the offending field (e.g., 'items[2].category'), if known
    """

    def __init__(self, message: str, field_path: Optional[str] = None):
        self.message = message
        self.field_path = field_path

        if field_path:
            message = f"{message} (at {field_path})"
        super().__init__(message)


class DocumentSourceError(Exception):
    """
    Exception raised when the resume document cannot be fetched from its source.

    Attributes:
        message: Error description
        location: Path or URL that was being read
        original_error: The underlying I/O or HTTP error
    """

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.location = location
        self.original_error = original_error

        parts = [message]
        if location:
            parts.append(f"Source: {location}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
