"""Custom exceptions for timecodec."""


class TimecodecError(Exception):
    """Base exception for all timecodec errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ParseError(TimecodecError, ValueError):
    """Raised when text is not a valid RFC 3339 time, date or date-time."""
