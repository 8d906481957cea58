# Note model for user content
from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Note(BaseModel):
    """A personal text note, visible only to its owner."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # owner reference, fixed at creation
    owner_username: Mapped[str] = mapped_column(
        String(255), ForeignKey("users.username", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("idx_notes_owner_username", "owner_username"),
        Index("idx_notes_id_owner", "id", "owner_username"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_username={self.owner_username})>"
