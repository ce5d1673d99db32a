"""
Chat creation commands.

Each command is an immutable input descriptor consumed by ChatService.
Ids arrive as value objects so malformed input fails before any lookup.
"""

from dataclasses import dataclass, field
from typing import Optional
from zapzup_manager.application.common.interfaces import Command
from zapzup_manager.application.dto.chat import ChatDTO
from zapzup_manager.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CreatePrivateChatCommand(Command[ChatDTO]):
    creator_user_id: UserId
    member_id: UserId


@dataclass(frozen=True)
class CreateSingleChatCommand(Command[ChatDTO]):
    creator_user_id: UserId
    member_id: UserId


@dataclass(frozen=True)
class CreateGroupChatCommand(Command[ChatDTO]):
    creator_user_id: UserId
    name: str
    description: Optional[str] = None
    member_ids: tuple[UserId, ...] = field(default_factory=tuple)
