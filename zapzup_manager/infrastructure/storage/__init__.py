"""Storage Layer - File system operations."""

from zapzup_manager.infrastructure.storage.file_storage_service import (
    FileStorageService,
)

__all__ = ["FileStorageService"]
