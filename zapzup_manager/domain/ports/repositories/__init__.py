"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application needs
- Does NOT specify implementation (Prisma, SQLAlchemy, etc.)

Infrastructure layer provides implementations.
"""

from zapzup_manager.domain.ports.repositories.chat_repository import ChatRepository
from zapzup_manager.domain.ports.repositories.user_repository import UserRepository
from zapzup_manager.domain.ports.repositories.file_repository import FileRepository

__all__ = [
    "ChatRepository",
    "UserRepository",
    "FileRepository",
]
