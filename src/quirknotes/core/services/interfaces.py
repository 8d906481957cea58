"""
Service interfaces for QuirkNotes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..models.note import Note
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteUpdate


class IAuthService(ABC):
    """Auth service for user management and tokens."""

    @abstractmethod
    async def register(self, username: str, password: str) -> str:
        """Register new user and return a token."""
        pass

    @abstractmethod
    async def login(self, username: str, password: str) -> str:
        """Check credentials and return a token."""
        pass

    @abstractmethod
    def issue_token(self, username: str) -> str:
        """Sign a token for the user."""
        pass

    @abstractmethod
    def verify_token(self, token: str) -> str:
        """Return the username a token was issued to."""
        pass


class INoteService(ABC):
    """Owner-scoped note CRUD."""

    @abstractmethod
    async def create(self, owner: str, title: str, content: str) -> str:
        """Create note, return its id."""
        pass

    @abstractmethod
    async def get(self, owner: str, note_id: str) -> Note:
        """Get one owned note."""
        pass

    @abstractmethod
    async def list_all(self, owner: str) -> List[Note]:
        """List all owned notes."""
        pass

    @abstractmethod
    async def edit(self, owner: str, note_id: str, update: NoteUpdate) -> str:
        """Partially update an owned note."""
        pass

    @abstractmethod
    async def delete(self, owner: str, note_id: str) -> str:
        """Delete an owned note."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
