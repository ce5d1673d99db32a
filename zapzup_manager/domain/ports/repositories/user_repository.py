"""
User Repository Port - Interface for user persistence.
Implementation: zapzup_manager/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from zapzup_manager.domain.entities.user import User
from zapzup_manager.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    async def list_all(self, limit: int = 100) -> list[User]: ...

    @abstractmethod
    async def save(self, user: User) -> None: ...
