"""
Chat Notifier Port - Interface for pushing payloads to per-user topics.
Implementation: zapzup_manager/infrastructure/messaging/redis_chat_notifier.py

Publishing is fire-and-forget: callers get no delivery guarantee.
"""

from abc import ABC, abstractmethod
from typing import Any


class ChatNotifier(ABC):
    @abstractmethod
    async def publish(self, topic: str, payload: Any) -> None: ...
