"""
Session store boundary.

SessionStore is the contract the request handlers depend on. SqlSessionStore
implements it with parameterized SQL against the `sessions` table; rows are
mapped to ConferenceSession by row_to_session.

Database errors are not caught here. They propagate to the caller and are
reported as internal errors by the application.
"""

from typing import Any, List, Optional, Protocol

from sqlalchemy import text
from sqlmodel import Session

from session_catalog.models.session import ConferenceSession

_COLUMNS = "id, title, description, speaker_name, file_upload_url"


class SessionStore(Protocol):
    def insert(self, record: ConferenceSession) -> int:
        """Persist a new session and return its assigned id."""
        ...

    def find_by_id(self, session_id: int) -> Optional[ConferenceSession]: ...

    def find_paginated(self, offset: int, limit: int) -> List[ConferenceSession]:
        """Sessions ordered by ascending id, starting at offset, at most limit."""
        ...

    def update(self, record: ConferenceSession) -> None:
        """Replace the row matching record.id; no-op if it does not exist."""
        ...

    def delete(self, session_id: int) -> None: ...

    def count_all(self) -> int: ...


def row_to_session(row: Any) -> ConferenceSession:
    """Map a `sessions` row to the entity"""
    data = row._mapping
    return ConferenceSession(
        id=data["id"],
        title=data["title"],
        description=data["description"],
        speaker_name=data["speaker_name"],
        file_upload_url=data["file_upload_url"],
    )


def _record_params(record: ConferenceSession) -> dict:
    return {
        "title": record.title,
        "description": record.description,
        "speaker_name": record.speaker_name,
        "file_upload_url": record.file_upload_url,
    }


class SqlSessionStore:
    def __init__(self, session: Session):
        self.session = session

    def _is_postgres(self) -> bool:
        return self.session.get_bind().dialect.name == "postgresql"

    def insert(self, record: ConferenceSession) -> int:
        sql = (
            "INSERT INTO sessions (title, description, speaker_name, file_upload_url) "
            "VALUES (:title, :description, :speaker_name, :file_upload_url)"
        )
        if self._is_postgres():
            result = self.session.execute(text(sql + " RETURNING id"), _record_params(record))
            new_id = result.scalar_one()
        else:
            result = self.session.execute(text(sql), _record_params(record))
            new_id = result.lastrowid
        self.session.commit()
        return int(new_id)

    def find_by_id(self, session_id: int) -> Optional[ConferenceSession]:
        row = self.session.execute(
            text(f"SELECT {_COLUMNS} FROM sessions WHERE id = :id"), {"id": session_id}
        ).first()
        return row_to_session(row) if row is not None else None

    def find_paginated(self, offset: int, limit: int) -> List[ConferenceSession]:
        rows = self.session.execute(
            text(f"SELECT {_COLUMNS} FROM sessions ORDER BY id LIMIT :limit OFFSET :offset"),
            {"offset": offset, "limit": limit},
        ).all()
        return [row_to_session(row) for row in rows]

    def update(self, record: ConferenceSession) -> None:
        params = _record_params(record)
        params["id"] = record.id
        self.session.execute(
            text(
                "UPDATE sessions SET title = :title, description = :description, "
                "speaker_name = :speaker_name, file_upload_url = :file_upload_url "
                "WHERE id = :id"
            ),
            params,
        )
        self.session.commit()

    def delete(self, session_id: int) -> None:
        self.session.execute(text("DELETE FROM sessions WHERE id = :id"), {"id": session_id})
        self.session.commit()

    def count_all(self) -> int:
        count = self.session.execute(text("SELECT COUNT(*) FROM sessions")).scalar_one()
        return int(count)
