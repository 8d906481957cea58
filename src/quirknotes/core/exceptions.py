"""
Error taxonomy for QuirkNotes.

Services raise these; the API layer turns them into HTTP responses with the
matching status code and an ``{"error": message}`` body.
"""

from fastapi import status


class QuirkNotesError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(QuirkNotesError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class ConflictError(QuirkNotesError):
    """Duplicate unique key."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists."


class AuthenticationError(QuirkNotesError):
    """Missing, invalid or expired token, or bad login credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized."


class NotFoundError(QuirkNotesError):
    """Owner-scoped lookup miss."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class InternalError(QuirkNotesError):
    """Unexpected store or infrastructure failure."""
