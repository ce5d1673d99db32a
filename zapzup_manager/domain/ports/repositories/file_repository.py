"""
File Repository Port - Interface for stored file metadata.
Implementation: zapzup_manager/infrastructure/persistence/prisma_file_repository.py
"""

from abc import ABC, abstractmethod
from zapzup_manager.domain.entities.stored_file import StoredFile
from zapzup_manager.domain.value_objects.file_id import FileId


class FileRepository(ABC):
    @abstractmethod
    async def save(self, file: StoredFile) -> None: ...

    @abstractmethod
    async def delete(self, file_id: FileId) -> None:
        """Delete the metadata row. Missing rows are ignored."""
        ...
