"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma repositories)
- storage/: File system operations (FileStorageService)
- messaging/: Redis pub/sub notifier (RedisChatNotifier)

persistence/ is wired by the DI container, which owns the Prisma client.
"""

from zapzup_manager.infrastructure.storage import FileStorageService
from zapzup_manager.infrastructure.messaging import (
    create_redis_client,
    RedisChatNotifier,
)

__all__ = [
    "FileStorageService",
    "create_redis_client",
    "RedisChatNotifier",
]
