"""Pydantic schemas for request and response bodies."""

from .auth import CredentialsRequest, TokenResponse
from .common import ErrorResponse, HealthCheckResponse, MessageResponse
from .notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    "CredentialsRequest",
    "TokenResponse",
    "ErrorResponse",
    "MessageResponse",
    "HealthCheckResponse",
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteCreatedResponse",
    "NoteEnvelope",
    "NoteListEnvelope",
]
