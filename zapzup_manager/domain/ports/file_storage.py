"""
File Storage Port - Interface for raw file bytes.
Implementation: zapzup_manager/infrastructure/storage/file_storage_service.py
"""

from abc import ABC, abstractmethod


class FileStorage(ABC):
    @abstractmethod
    def save_file(self, content: bytes, category: str, filename: str) -> str:
        """Persist bytes and return the storage path."""
        ...

    @abstractmethod
    def delete_file(self, file_path: str) -> bool: ...
