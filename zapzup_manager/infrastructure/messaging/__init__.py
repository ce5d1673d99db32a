"""Messaging Layer - Redis client and pub/sub chat notifier."""

from zapzup_manager.infrastructure.messaging.redis_client import (
    create_redis_client,
    close_redis_client,
)
from zapzup_manager.infrastructure.messaging.redis_chat_notifier import (
    RedisChatNotifier,
)

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "RedisChatNotifier",
]
