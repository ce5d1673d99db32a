"""
Chat Repository Port - Interface for chat aggregate persistence.
Implementation: zapzup_manager/infrastructure/persistence/prisma_chat_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from zapzup_manager.domain.entities.chat import Chat
from zapzup_manager.domain.value_objects.chat_id import ChatId
from zapzup_manager.domain.value_objects.user_id import UserId


class ChatRepository(ABC):
    @abstractmethod
    async def get_by_id(self, chat_id: ChatId) -> Optional[Chat]: ...

    @abstractmethod
    async def get_all_by_user_id(self, user_id: UserId) -> list[Chat]:
        """Chats the user belongs to, most recent message first."""
        ...

    @abstractmethod
    async def save(self, chat: Chat) -> Chat: ...
