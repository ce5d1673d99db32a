"""
FileStorageService - Pure disk I/O operations.

This service handles all file system operations:
- Save files to disk
- Delete files from disk

This is a SYNC service - no database, no async.
For database operations, use FileRepository.
For coordinated operations (disk + DB), use FileService in application layer.
"""

import os
import logging
from datetime import datetime
from typing import Optional

from werkzeug.utils import secure_filename

from zapzup_manager.config.settings import Config
from zapzup_manager.domain.ports.file_storage import FileStorage

logger = logging.getLogger(__name__)


class FileStorageService(FileStorage):
    """
    Disk-backed implementation of the FileStorage port.

    Directory structure: {upload_base}/{category}/{timestamp}_{filename}
    """

    def __init__(self, upload_base: Optional[str] = None):
        self.upload_base = upload_base or Config.UPLOAD_BASE

    def save_file(
        self,
        content: bytes,
        category: str,
        filename: str,
        make_unique: bool = True,
    ) -> str:
        """
        Save file content to disk.

        Args:
            content: File content as bytes
            category: Sub-directory under upload_base (created if missing)
            filename: Original filename
            make_unique: If True, prepend timestamp to make filename unique

        Returns:
            Absolute path to saved file
        """
        directory = os.path.abspath(os.path.join(self.upload_base, category))
        os.makedirs(directory, exist_ok=True)

        safe_filename = self._sanitize_filename(filename)
        if make_unique:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S%f")
            safe_filename = f"{timestamp}_{safe_filename}"

        file_path = os.path.join(directory, safe_filename)

        with open(file_path, "wb") as f:
            f.write(content)

        logger.debug(f"[FileStorage] Saved file: {file_path} ({len(content)} bytes)")
        return file_path

    def delete_file(self, file_path: str) -> bool:
        """
        Delete file from disk.

        Returns:
            True if deleted, False if file didn't exist
        """
        if not os.path.exists(file_path):
            logger.warning(f"[FileStorage] File not found for deletion: {file_path}")
            return False

        os.remove(file_path)
        logger.debug(f"[FileStorage] Deleted file: {file_path}")
        return True

    def _sanitize_filename(self, filename: str) -> str:
        safe = secure_filename(filename)
        if not safe:
            safe = "unnamed_file"
        return safe
