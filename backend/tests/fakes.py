"""In-memory SessionStore for handler-level and concurrency tests."""

import threading
from typing import Dict, List, Optional

from session_catalog.models.session import ConferenceSession


def _copy(record: ConferenceSession) -> ConferenceSession:
    return ConferenceSession(
        id=record.id,
        title=record.title,
        description=record.description,
        speaker_name=record.speaker_name,
        file_upload_url=record.file_upload_url,
    )


class InMemorySessionStore:
    """Same semantics as SqlSessionStore, backed by a dict.

    Each call is atomic on its own; nothing spans calls, matching the
    database store.
    """

    def __init__(self):
        self._rows: Dict[int, ConferenceSession] = {}
        self._next_id = 1
        self._lock = threading.RLock()
        self.calls: List[str] = []

    def insert(self, record: ConferenceSession) -> int:
        with self._lock:
            self.calls.append("insert")
            new_id = self._next_id
            self._next_id += 1
            stored = _copy(record)
            stored.id = new_id
            self._rows[new_id] = stored
            return new_id

    def find_by_id(self, session_id: int) -> Optional[ConferenceSession]:
        with self._lock:
            self.calls.append("find_by_id")
            row = self._rows.get(session_id)
            return _copy(row) if row is not None else None

    def find_paginated(self, offset: int, limit: int) -> List[ConferenceSession]:
        with self._lock:
            self.calls.append("find_paginated")
            ordered = [self._rows[key] for key in sorted(self._rows)]
            return [_copy(row) for row in ordered[offset : offset + limit]]

    def update(self, record: ConferenceSession) -> None:
        with self._lock:
            self.calls.append("update")
            if record.id in self._rows:
                self._rows[record.id] = _copy(record)

    def delete(self, session_id: int) -> None:
        with self._lock:
            self.calls.append("delete")
            self._rows.pop(session_id, None)

    def count_all(self) -> int:
        with self._lock:
            self.calls.append("count_all")
            return len(self._rows)

    @property
    def writes(self) -> List[str]:
        return [call for call in self.calls if call in ("insert", "update", "delete")]
