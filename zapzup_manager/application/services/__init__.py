"""Application services - orchestration across repositories and adapters."""

from zapzup_manager.application.services.user_service import UserService
from zapzup_manager.application.services.file_service import FileService
from zapzup_manager.application.services.chat_service import ChatService, chat_topic

__all__ = [
    "UserService",
    "FileService",
    "ChatService",
    "chat_topic",
]
