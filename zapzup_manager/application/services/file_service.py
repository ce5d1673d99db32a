"""
FileService - Coordinates disk storage and the file registry.

Storing an upload is split in two so callers can defer the registry write
until the rest of their unit of work has been validated:

1. store_file(): validate content type and size, write the bytes through the
   FileStorage port, return an unregistered StoredFile (None without upload)
2. register_file(): record metadata through FileRepository
3. discard_file(): undo both steps if the caller's unit of work fails
"""

import logging
from typing import Optional

from zapzup_manager.application.dto.file import FileUpload
from zapzup_manager.config.settings import Config
from zapzup_manager.domain.entities.stored_file import StoredFile
from zapzup_manager.domain.exceptions import DomainValidationError
from zapzup_manager.domain.ports.file_storage import FileStorage
from zapzup_manager.domain.ports.repositories import FileRepository

logger = logging.getLogger(__name__)


class FileService:
    CATEGORY_ICONS = "icons"

    def __init__(
        self,
        file_storage: FileStorage,
        file_repository: FileRepository,
        max_size_mb: Optional[float] = None,
        allowed_types: Optional[list[str]] = None,
    ):
        self._file_storage = file_storage
        self._file_repository = file_repository
        self._max_bytes = int((max_size_mb or Config.MAX_ICON_MB) * 1024 * 1024)
        self._allowed_types = allowed_types or Config.ALLOWED_ICON_TYPES

    def store_file(self, upload: Optional[FileUpload]) -> Optional[StoredFile]:
        if upload is None:
            return None

        self._validate(upload)

        storage_path = self._file_storage.save_file(
            upload.content, self.CATEGORY_ICONS, upload.filename
        )
        return StoredFile.create(
            name=upload.filename,
            content_type=upload.content_type,
            size_bytes=upload.size_bytes,
            storage_path=storage_path,
        )

    async def register_file(self, stored: StoredFile) -> None:
        await self._file_repository.save(stored)
        logger.info(
            f"[FileService] Stored {stored.name} as {stored.id.value} "
            f"({stored.size_bytes} bytes)"
        )

    async def discard_file(self, stored: StoredFile) -> None:
        """Remove the registry row (if any) and the bytes of a stored file."""
        await self._file_repository.delete(stored.id)
        self._file_storage.delete_file(stored.storage_path)
        logger.info(f"[FileService] Discarded {stored.id.value}")

    def _validate(self, upload: FileUpload) -> None:
        if upload.content_type not in self._allowed_types:
            raise DomainValidationError(
                f"Unsupported file type: {upload.content_type}"
            )
        if upload.size_bytes == 0:
            raise DomainValidationError("Uploaded file is empty")
        if upload.size_bytes > self._max_bytes:
            raise DomainValidationError(
                f"File too large: {upload.size_bytes} bytes (max {self._max_bytes})"
            )
