from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from session_catalog.models.session import ConferenceSession


class SessionPayload(BaseModel):
    """Request body for create and update.

    title is optional here so that a missing title reaches
    validate_session_payload and is reported as a 400 like an empty one.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    speaker_name: Optional[str] = Field(default=None, alias="speakerName")
    file_upload_url: Optional[str] = Field(default=None, alias="fileUploadUrl")

    def to_record(self) -> ConferenceSession:
        return ConferenceSession(
            id=self.id,
            title=self.title,
            description=self.description,
            speaker_name=self.speaker_name,
            file_upload_url=self.file_upload_url,
        )


class SessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    description: Optional[str] = None
    speaker_name: Optional[str] = Field(default=None, alias="speakerName")
    file_upload_url: Optional[str] = Field(default=None, alias="fileUploadUrl")


class SessionCreated(BaseModel):
    id: int
