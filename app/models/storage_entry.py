"""
Key/value table standing in for browser local storage.
One row per key; the visitor collection lives under settings.STORAGE_KEY
as a JSON array.
"""

from sqlalchemy import Column, String, DateTime, Text
from app.database import Base


class StorageEntry(Base):
    __tablename__ = "local_storage"

    key = Column(String(200), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<StorageEntry {self.key} ({len(self.value or '')} chars)>"
