from typing import Optional

from sqlmodel import Field, SQLModel


class ConferenceSession(SQLModel, table=True):
    __tablename__ = "sessions"
    # Ids are never reused, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    speaker_name: Optional[str] = None
    file_upload_url: Optional[str] = None
