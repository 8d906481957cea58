"""Note service implementation."""

from typing import List, Optional

from bson import ObjectId
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError, ValidationError
from ..logging import get_logger
from ..models.note import Note
from ..models.types import parse_object_id
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteUpdate
from .interfaces import INoteService

logger = get_logger("services.notes")


class NoteService(INoteService):
    """Note CRUD, always scoped to the authenticated owner.

    ``owner`` is the username returned by ``AuthService.verify_token``. Any
    lookup for a note that exists but belongs to someone else fails with the
    same NotFoundError as a missing note.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def create(self, owner: str, title: Optional[str], content: Optional[str]) -> str:
        """Create new note and return its id."""
        if not title or not content:
            raise ValidationError("Title and content are both required.")

        note = await self.note_repo.create_note(
            {"title": title, "content": content, "owner_username": owner}
        )
        logger.info(f"User {owner} created note {note.id}")
        return str(note.id)

    async def get(self, owner: str, note_id: str) -> Note:
        """Get note by ID."""
        oid = self._parse_id(note_id)
        note = await self.note_repo.get_by_id_and_owner(oid, owner)
        if not note:
            raise NotFoundError("Unable to find note with given ID.")
        return note

    async def list_all(self, owner: str) -> List[Note]:
        """List every note of the owner, empty when there are none."""
        return await self.note_repo.list_by_owner(owner)

    async def edit(self, owner: str, note_id: str, update: NoteUpdate) -> str:
        """Apply the non-empty fields of ``update``."""
        oid = self._parse_id(note_id)
        values = update.changes()
        if not values:
            raise ValidationError("At least title or content are required.")

        matched = await self.note_repo.update_by_id_and_owner(oid, owner, values)
        if matched == 0:
            raise NotFoundError(f"Note with ID {note_id} belonging to the user not found")

        logger.info(f"User {owner} updated note {note_id}", extra={"fields": sorted(values)})
        return f"Document with ID {note_id} properly updated"

    async def delete(self, owner: str, note_id: str) -> str:
        """Delete note."""
        oid = self._parse_id(note_id)
        deleted = await self.note_repo.delete_by_id_and_owner(oid, owner)
        if deleted == 0:
            raise NotFoundError(f"Note with ID {note_id} belonging to the user not found")

        logger.info(f"User {owner} deleted note {note_id}")
        return f"Document with ID {note_id} properly deleted"

    @staticmethod
    def _parse_id(note_id: str) -> ObjectId:
        oid = parse_object_id(note_id)
        if oid is None:
            raise ValidationError("Invalid note ID.")
        return oid
