"""
PORTS - Interfaces the application depends on, implemented by infrastructure.
"""

from zapzup_manager.domain.ports.file_storage import FileStorage
from zapzup_manager.domain.ports.notifier import ChatNotifier
from zapzup_manager.domain.ports.repositories import (
    ChatRepository,
    UserRepository,
    FileRepository,
)

__all__ = [
    "FileStorage",
    "ChatNotifier",
    "ChatRepository",
    "UserRepository",
    "FileRepository",
]
