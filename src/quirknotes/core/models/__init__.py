"""
Database models for QuirkNotes.

Models included:
    - User: account with username and password hash
    - Note: owner-scoped text note
"""

from .base import BaseModel
from .note import Note
from .types import ObjectIdType, parse_object_id
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "ObjectIdType",
    "parse_object_id",
]
