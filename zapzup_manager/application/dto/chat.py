"""Chat DTOs - transport representation of a chat aggregate."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from zapzup_manager.application.dto.file import FileDTO
from zapzup_manager.application.dto.user import UserDTO
from zapzup_manager.domain.entities.chat import Chat, ChatStatus


class ChatDTO(BaseModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    created_by: str
    status: ChatStatus
    icon: Optional[FileDTO] = None
    members: list[UserDTO]
    last_message_sent_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, chat: Chat) -> "ChatDTO":
        return cls(
            id=chat.id.value,
            name=chat.name,
            description=chat.description,
            created_by=chat.created_by,
            status=chat.status,
            icon=FileDTO.from_entity(chat.icon) if chat.icon else None,
            members=[UserDTO.from_entity(user) for user in chat.users],
            last_message_sent_at=chat.last_message_sent_at,
            created_at=chat.created_at,
            updated_at=chat.updated_at,
            deleted_at=chat.deleted_at,
        )


def to_dto_list(chats: list[Chat]) -> list[ChatDTO]:
    return [ChatDTO.from_entity(chat) for chat in chats]
