"""Custom SQLAlchemy types for QuirkNotes models."""

from bson import ObjectId
from bson.errors import InvalidId
from sqlalchemy import String, TypeDecorator


class ObjectIdType(TypeDecorator):
    """
    Store a BSON ObjectId as its 24-character hex string.

    The hex form sorts the same way as the 12 raw bytes, so ordering by this
    column follows the id's embedded creation timestamp.
    """

    impl = String(24)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, ObjectId):
            return str(value)
        # Raises InvalidId for anything that is not a 24-hex string or 12 bytes
        return str(ObjectId(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            return ObjectId(value)
        except (InvalidId, TypeError):
            return value


def new_object_id() -> ObjectId:
    """Fresh identifier for a new row."""
    return ObjectId()


def parse_object_id(value: object) -> ObjectId | None:
    """Return ``value`` as an ObjectId, or None when it is not a valid identifier."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)
