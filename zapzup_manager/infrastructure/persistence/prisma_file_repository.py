"""
Prisma File Repository - Implements FileRepository port.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from zapzup_manager.domain.entities.stored_file import StoredFile
from zapzup_manager.domain.ports.repositories import FileRepository
from zapzup_manager.domain.value_objects.file_id import FileId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import StoredFile as PrismaStoredFile


def file_to_entity(record: PrismaStoredFile) -> StoredFile:
    """Map Prisma record to domain entity. Shared with the chat repository."""
    return StoredFile(
        id=FileId(record.id),
        name=record.name,
        content_type=record.content_type,
        size_bytes=record.size_bytes,
        storage_path=record.storage_path,
        created_at=record.created_at,
    )


class PrismaFileRepository(FileRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def save(self, file: StoredFile) -> None:
        await self._prisma.storedfile.create(
            data={
                "id": file.id.value,
                "name": file.name,
                "content_type": file.content_type,
                "size_bytes": file.size_bytes,
                "storage_path": file.storage_path,
                "created_at": file.created_at,
            }
        )

    async def delete(self, file_id: FileId) -> None:
        # delete_many does not raise when the row was never written
        await self._prisma.storedfile.delete_many(where={"id": file_id.value})
