"""
Prisma User Repository - Implements UserRepository port.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from zapzup_manager.domain.entities.user import User
from zapzup_manager.domain.ports.repositories import UserRepository
from zapzup_manager.domain.value_objects.user_id import UserId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import User as PrismaUser


def user_to_entity(record: PrismaUser) -> User:
    """Map Prisma record to domain entity. Shared with the chat repository."""
    return User(
        id=UserId(record.id),
        name=record.name,
        username=record.username,
        email=record.email,
        password_hash=record.password_hash,
        created_at=record.created_at,
        updated_at=record.updated_at,
        deleted_at=record.deleted_at,
    )


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return user_to_entity(record) if record else None

    async def get_by_username(self, username: str) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"username": username})
        return user_to_entity(record) if record else None

    async def get_by_email(self, email: str) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"email": email})
        return user_to_entity(record) if record else None

    async def list_all(self, limit: int = 100) -> list[User]:
        records = await self._prisma.user.find_many(
            where={"deleted_at": None},
            order={"created_at": "asc"},
            take=limit,
        )
        return [user_to_entity(record) for record in records]

    async def save(self, user: User) -> None:
        """Save (create or update) user."""
        await self._prisma.user.upsert(
            where={"id": user.id.value},
            data={
                "create": {
                    "id": user.id.value,
                    "name": user.name,
                    "username": user.username,
                    "email": user.email,
                    "password_hash": user.password_hash,
                    "created_at": user.created_at,
                    "updated_at": user.updated_at,
                    "deleted_at": user.deleted_at,
                },
                "update": {
                    "name": user.name,
                    "username": user.username,
                    "email": user.email,
                    "password_hash": user.password_hash,
                    "updated_at": user.updated_at,
                    "deleted_at": user.deleted_at,
                },
            },
        )
