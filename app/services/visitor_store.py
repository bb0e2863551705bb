# app/services/visitor_store.py
"""
In-memory visitor collection mirrored to local storage.

  - load() once at startup; absent or corrupt storage yields an empty list
  - add / remove / clear / remove_all rewrite the whole collection before returning
  - order is newest-first
  - a failed write restores the previous in-memory list and raises StorageWriteError
  - each mutation holds the store lock across the change and the write
  - a failed read raises StorageReadError instead of loading an empty list
"""

import json
import threading
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional
from fastapi import Request
from pydantic import TypeAdapter, ValidationError
from app.schemas.visitor import Visitor, VisitorFormData
from app.services.errors import StorageWriteError
from app.utils.logger import get_logger

logger = get_logger(__name__)

_visitor_list = TypeAdapter(list[Visitor])


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class VisitorStore:
    def __init__(self, storage, key: str):
        self._storage = storage
        self._key = key
        self._visitors: list[Visitor] = []
        self._lock = threading.RLock()

    def __len__(self):
        return len(self._visitors)

    @property
    def visitors(self) -> list[Visitor]:
        """Snapshot of the collection, newest first."""
        return list(self._visitors)

    def get(self, visitor_id: str) -> Optional[Visitor]:
        return next((v for v in self._visitors if v.id == visitor_id), None)

    def load(self) -> list[Visitor]:
        """Absent or malformed data gives an empty list; StorageReadError propagates."""
        with self._lock:
            return self._load()

    def _load(self) -> list[Visitor]:
        raw = self._storage.get_item(self._key)
        if not raw:
            self._visitors = []
            return self.visitors
        try:
            self._visitors = _visitor_list.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"[STORE] Stored collection under '{self._key}' is malformed, starting empty: {e}")
            self._visitors = []
        logger.info(f"[STORE] Loaded {len(self._visitors)} visitor(s)")
        return self.visitors

    def save(self):
        payload = json.dumps(
            [v.model_dump(by_alias=True, exclude_none=True) for v in self._visitors],
            ensure_ascii=False,
        )
        self._storage.set_item(self._key, payload)

    def _commit(self, previous: list[Visitor]):
        try:
            self.save()
        except StorageWriteError:
            self._visitors = previous
            raise

    def add(self, form_data: VisitorFormData) -> Visitor:
        visitor = Visitor(
            id=str(uuid.uuid4()),
            full_name=form_data.full_name,
            phone=form_data.phone,
            city=form_data.city,
            service_date=form_data.service_date,
            service_time=form_data.service_time,
            observations=form_data.observations or None,
            created_at=_utc_now_iso(),
        )
        with self._lock:
            previous = self._visitors
            self._visitors = [visitor] + previous
            self._commit(previous)
        logger.info(f"[STORE] Added visitor {visitor.id} ({visitor.full_name})")
        return visitor

    def remove(self, visitor_id: str) -> Optional[Visitor]:
        """Remove by id. No-op (returns None) when the id is unknown."""
        with self._lock:
            removed = self.get(visitor_id)
            if removed is None:
                return None
            previous = self._visitors
            self._visitors = [v for v in previous if v.id != visitor_id]
            self._commit(previous)
        logger.info(f"[STORE] Removed visitor {visitor_id}")
        return removed

    def remove_all(self, ids: Iterable[str]) -> int:
        count = 0
        with self._lock:
            for visitor_id in list(ids):
                if self.remove(visitor_id) is not None:
                    count += 1
        return count

    def clear(self) -> int:
        with self._lock:
            previous = self._visitors
            self._visitors = []
            self._commit(previous)
        logger.info(f"[STORE] Cleared {len(previous)} visitor(s)")
        return len(previous)


def get_store(request: Request) -> VisitorStore:
    """FastAPI dependency - the store built at startup."""
    return request.app.state.visitor_store
