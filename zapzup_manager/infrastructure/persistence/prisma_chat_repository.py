"""
Prisma Chat Repository - Implements ChatRepository port.

Mapping:
- Prisma model fields: id, name, description, created_by, status, icon,
  users, member_ids, last_message_sent_at, created_at, updated_at, deleted_at
- Members come back from the relation unordered; member_ids holds the
  creation order and is used to rebuild Chat.users
- Members are written once, on create; updates only touch mutable fields
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional
from zapzup_manager.domain.entities.chat import Chat, ChatStatus
from zapzup_manager.domain.ports.repositories import ChatRepository
from zapzup_manager.domain.value_objects.chat_id import ChatId
from zapzup_manager.domain.value_objects.user_id import UserId
from zapzup_manager.infrastructure.persistence.prisma_file_repository import (
    file_to_entity,
)
from zapzup_manager.infrastructure.persistence.prisma_user_repository import (
    user_to_entity,
)

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Chat as PrismaChat

_INCLUDE: Dict[str, Any] = {"users": True, "icon": True}


class PrismaChatRepository(ChatRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaChat) -> Chat:
        """Map Prisma record to domain entity."""
        position = {member_id: i for i, member_id in enumerate(record.member_ids)}
        users = sorted(
            record.users or [],
            key=lambda user: position.get(user.id, len(position)),
        )
        return Chat(
            id=ChatId(record.id),
            created_by=record.created_by,
            users=[user_to_entity(user) for user in users],
            created_at=record.created_at,
            updated_at=record.updated_at,
            name=record.name,
            description=record.description,
            status=ChatStatus(record.status),
            icon=file_to_entity(record.icon) if record.icon else None,
            last_message_sent_at=record.last_message_sent_at,
            deleted_at=record.deleted_at,
        )

    async def get_by_id(self, chat_id: ChatId) -> Optional[Chat]:
        record = await self._prisma.chat.find_unique(
            where={"id": chat_id.value}, include=_INCLUDE
        )
        return self._to_entity(record) if record else None

    async def get_all_by_user_id(self, user_id: UserId) -> list[Chat]:
        """Chats of the user ordered by last_message_sent_at desc, never-used last."""
        records = await self._prisma.chat.find_many(
            where={
                "users": {"some": {"id": user_id.value}},
                "deleted_at": None,
            },
            order={"last_message_sent_at": "desc"},
            include=_INCLUDE,
        )
        chats = [self._to_entity(record) for record in records]
        # Postgres sorts NULLs first on DESC; stable sort moves them to the end
        chats.sort(key=lambda chat: chat.last_message_sent_at is None)
        return chats

    async def save(self, chat: Chat) -> Chat:
        """Save (create or update) chat and return the stored aggregate."""
        create: Dict[str, Any] = {
            "id": chat.id.value,
            "name": chat.name,
            "description": chat.description,
            "created_by": chat.created_by,
            "status": chat.status.value,
            "users": {"connect": [{"id": uid.value} for uid in chat.member_ids]},
            "member_ids": [uid.value for uid in chat.member_ids],
            "last_message_sent_at": chat.last_message_sent_at,
            "created_at": chat.created_at,
            "updated_at": chat.updated_at,
            "deleted_at": chat.deleted_at,
        }
        if chat.icon:
            create["icon"] = {"connect": {"id": chat.icon.id.value}}

        record = await self._prisma.chat.upsert(
            where={"id": chat.id.value},
            data={
                "create": create,
                "update": {
                    "name": chat.name,
                    "description": chat.description,
                    "status": chat.status.value,
                    "last_message_sent_at": chat.last_message_sent_at,
                    "updated_at": chat.updated_at,
                    "deleted_at": chat.deleted_at,
                },
            },
            include=_INCLUDE,
        )
        return self._to_entity(record)
