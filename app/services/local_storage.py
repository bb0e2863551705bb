# app/services/local_storage.py
"""
Synchronous key/value store with the browser localStorage contract
(get_item / set_item / remove_item), backed by the local_storage table.
Every call opens and closes its own session; writes commit before returning.
"""

from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from app.models.storage_entry import StorageEntry
from app.services.errors import StorageReadError, StorageWriteError
from app.utils.logger import get_logger

logger = get_logger(__name__)


class LocalStorage:
    def __init__(self, session_factory):
        self._session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None if the key is absent. Read failures raise StorageReadError."""
        db = self._session_factory()
        try:
            entry = db.get(StorageEntry, key)
            return entry.value if entry else None
        except SQLAlchemyError as e:
            logger.error(f"[STORAGE] Read failed for key '{key}': {e}")
            raise StorageReadError(str(e)) from e
        finally:
            db.close()

    def set_item(self, key: str, value: str):
        db = self._session_factory()
        try:
            db.merge(StorageEntry(key=key, value=value, updated_at=datetime.now(timezone.utc)))
            db.commit()
            logger.debug(f"[STORAGE] Wrote '{key}' ({len(value)} chars)")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"[STORAGE] Write failed for key '{key}': {e}")
            raise StorageWriteError(str(e)) from e
        finally:
            db.close()

    def remove_item(self, key: str):
        db = self._session_factory()
        try:
            entry = db.get(StorageEntry, key)
            if entry:
                db.delete(entry)
                db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"[STORAGE] Delete failed for key '{key}': {e}")
            raise StorageWriteError(str(e)) from e
        finally:
            db.close()
