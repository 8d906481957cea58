"""
Note management schemas.

These schemas define the API contracts for note CRUD operations.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.note import Note


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Groceries", "content": "milk, eggs"}}
    )


class NoteUpdate(BaseModel):
    """Partial note update.

    A field counts as provided only when it is a non-empty string; ``None``
    and ``""`` both leave the stored value alone.
    """

    title: Optional[str] = Field(default=None, description="New note title")
    content: Optional[str] = Field(default=None, description="New note content")

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Groceries (updated)"}})

    def changes(self) -> Dict[str, str]:
        """Column values to apply, keyed by column name."""
        values = {}
        if self.title:
            values["title"] = self.title
        if self.content:
            values["content"] = self.content
        return values


class NoteResponse(BaseModel):
    """A single note as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id", description="Note identifier (24 hex characters)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    username: str = Field(description="Owner's username")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")

    @classmethod
    def from_model(cls, note: Note) -> "NoteResponse":
        return cls(
            id=str(note.id),
            title=note.title,
            content=note.content,
            username=note.owner_username,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class NoteCreatedResponse(BaseModel):
    """Result of posting a note."""

    response: str
    insertedId: str = Field(description="Identifier assigned to the new note")


class NoteEnvelope(BaseModel):
    response: NoteResponse


class NoteListEnvelope(BaseModel):
    response: List[NoteResponse]
