# Base model for database stuff
from datetime import datetime, timezone

from bson import ObjectId
from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .types import ObjectIdType, new_object_id


class BaseModel(DeclarativeBase):
    """Common base for all models."""

    __abstract__ = True

    # store-assigned ObjectIds everywhere
    id: Mapped[ObjectId] = mapped_column(
        ObjectIdType(),
        primary_key=True,
        default=new_object_id,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
