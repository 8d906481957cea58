"""Note repository for database operations.

Every read and write except insert is filtered by ``(id, owner_username)``
together, so another user's note behaves exactly like a missing one.
"""

from typing import List, Optional

from bson import ObjectId
from sqlalchemy import and_, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import InternalError
from ..logging import get_logger
from ..models.note import Note

logger = get_logger("repositories.note")


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Insert a new note and return it with its assigned id."""
        note = Note(**note_data)
        self.session.add(note)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to insert note: {e}")
            raise InternalError(str(e)) from e
        await self.session.refresh(note)
        return note

    async def get_by_id_and_owner(self, note_id: ObjectId, owner: str) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.owner_username == owner))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise InternalError(str(e)) from e
        return result.scalar_one_or_none()

    async def list_by_owner(self, owner: str) -> List[Note]:
        """All notes of one user in the store's natural order."""
        stmt = select(Note).where(Note.owner_username == owner)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise InternalError(str(e)) from e
        return list(result.scalars().all())

    async def update_by_id_and_owner(self, note_id: ObjectId, owner: str, values: dict) -> int:
        """Apply ``values`` to the owned note; returns the number of matched rows."""
        stmt = (
            update(Note)
            .where(and_(Note.id == note_id, Note.owner_username == owner))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to update note {note_id}: {e}")
            raise InternalError(str(e)) from e
        return result.rowcount or 0

    async def delete_by_id_and_owner(self, note_id: ObjectId, owner: str) -> int:
        """Delete the owned note; returns the number of deleted rows."""
        stmt = (
            delete(Note)
            .where(and_(Note.id == note_id, Note.owner_username == owner))
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to delete note {note_id}: {e}")
            raise InternalError(str(e)) from e
        return result.rowcount or 0
