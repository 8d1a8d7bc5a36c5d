"""Model for one key/value entry of the local storage."""

from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime

from .base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StorageEntry(Base):
    """
    A single persisted key/value pair.

    This table is the whole persistence model: session keys and each
    store's serialized state live side by side, keyed by name.

    Fields:
        key: Storage key (e.g. 'userId', 'event-store')
        value: Raw string value
        updated_at: When the value was last written
    """
    __tablename__ = 'storage_entries'

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

