"""
StoredFile Entity - Metadata of a file persisted by the file store.

Chats reference a StoredFile as their icon; the bytes live on disk.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from zapzup_manager.domain.value_objects.file_id import FileId


@dataclass
class StoredFile:
    id: FileId
    name: str
    content_type: str
    size_bytes: int
    storage_path: str
    created_at: datetime

    @classmethod
    def create(
        cls, name: str, content_type: str, size_bytes: int, storage_path: str
    ) -> StoredFile:
        return cls(
            id=FileId.generate(),
            name=name,
            content_type=content_type,
            size_bytes=size_bytes,
            storage_path=storage_path,
            created_at=datetime.now(timezone.utc),
        )
