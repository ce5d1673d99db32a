"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
Prisma types are imported for type checking only; a client generated with
`prisma generate` is needed once the DI container connects one.
"""

from zapzup_manager.infrastructure.persistence.prisma_chat_repository import (
    PrismaChatRepository,
)
from zapzup_manager.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)
from zapzup_manager.infrastructure.persistence.prisma_file_repository import (
    PrismaFileRepository,
)

__all__ = [
    "PrismaChatRepository",
    "PrismaUserRepository",
    "PrismaFileRepository",
]
