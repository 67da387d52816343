"""
Domain errors raised by the column services.

The API layer maps these onto JSON responses; nothing here knows about HTTP.
"""


class DataCanvasError(Exception):
    """Base class for errors that carry a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DataCanvasError):
    """A referenced project or column does not exist."""


class InvalidMergeRequest(DataCanvasError):
    """A merge was requested with fewer than two distinct terms, or on a numeric column."""
