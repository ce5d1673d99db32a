"""File DTOs for uploads and stored file references."""

from datetime import datetime
from pydantic import BaseModel
from zapzup_manager.domain.entities.stored_file import StoredFile


class FileUpload(BaseModel):
    """Binary upload as received from the caller (e.g. a group icon)."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class FileDTO(BaseModel):
    id: str
    name: str
    content_type: str
    size_bytes: int
    created_at: datetime

    @classmethod
    def from_entity(cls, file: StoredFile) -> "FileDTO":
        return cls(
            id=file.id.value,
            name=file.name,
            content_type=file.content_type,
            size_bytes=file.size_bytes,
            created_at=file.created_at,
        )
