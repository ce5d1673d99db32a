"""Chat request/response models and their mappers."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from zapzup_manager.application.commands.chats import (
    CreateGroupChatCommand,
    CreatePrivateChatCommand,
    CreateSingleChatCommand,
)
from zapzup_manager.application.dto.chat import ChatDTO
from zapzup_manager.domain.entities.chat import ChatStatus
from zapzup_manager.domain.value_objects.user_id import UserId
from zapzup_manager.presentation.schemas.user import UserResponse, to_response


class CreatePrivateChatRequest(BaseModel):
    creator_user_id: str
    member_id: str

    def to_domain(self) -> CreatePrivateChatCommand:
        return CreatePrivateChatCommand(
            creator_user_id=UserId(self.creator_user_id),
            member_id=UserId(self.member_id),
        )

    def to_single_chat(self) -> CreateSingleChatCommand:
        return CreateSingleChatCommand(
            creator_user_id=UserId(self.creator_user_id),
            member_id=UserId(self.member_id),
        )


class CreateGroupChatRequest(BaseModel):
    name: str
    description: Optional[str] = None
    creator_user_id: str
    members: list[str] = Field(default_factory=list)

    def to_domain(self) -> CreateGroupChatCommand:
        return CreateGroupChatCommand(
            name=self.name,
            description=self.description,
            creator_user_id=UserId(self.creator_user_id),
            member_ids=tuple(UserId(member) for member in self.members),
        )


class ChatIconResponse(BaseModel):
    id: str
    name: str
    content_type: str


class ChatResponse(BaseModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    created_by: str
    status: ChatStatus
    icon: Optional[ChatIconResponse] = None
    members: list[UserResponse]
    last_message_sent_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


def to_chat_response(chat: ChatDTO) -> ChatResponse:
    return ChatResponse(
        id=chat.id,
        name=chat.name,
        description=chat.description,
        created_by=chat.created_by,
        status=chat.status,
        icon=(
            ChatIconResponse(
                id=chat.icon.id, name=chat.icon.name, content_type=chat.icon.content_type
            )
            if chat.icon
            else None
        ),
        members=[to_response(member) for member in chat.members],
        last_message_sent_at=chat.last_message_sent_at,
        created_at=chat.created_at,
        updated_at=chat.updated_at,
        deleted_at=chat.deleted_at,
    )


def to_chat_response_list(chats: list[ChatDTO]) -> list[ChatResponse]:
    return [to_chat_response(chat) for chat in chats]
