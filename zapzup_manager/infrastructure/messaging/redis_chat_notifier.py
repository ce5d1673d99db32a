"""
Redis Chat Notifier - Implements ChatNotifier over Redis pub/sub.

Each topic (e.g. "/topic/chats/{user_id}") is used verbatim as the Redis
channel name. A websocket gateway subscribed to those channels relays the
JSON payload to connected clients.

Payload serialization:
- pydantic models (ChatDTO, lists of them) → JSON via pydantic_core.to_json
- datetimes are emitted as ISO 8601 strings
"""

import logging
from typing import Any

from pydantic_core import to_json
from redis.asyncio import Redis

from zapzup_manager.domain.ports.notifier import ChatNotifier

logger = logging.getLogger(__name__)


class RedisChatNotifier(ChatNotifier):
    _redis: Redis

    def __init__(self, redis: Redis):
        self._redis = redis

    async def publish(self, topic: str, payload: Any) -> None:
        message = to_json(payload).decode("utf-8")
        receivers = await self._redis.publish(topic, message)
        logger.debug(
            f"[Notifier] Published {len(message)} bytes to {topic} "
            f"({receivers} subscribers)"
        )
