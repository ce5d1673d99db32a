"""
Chat Entity - A private or group conversation between users.

The chat aggregate owns its ordered member list. Members are fixed at
creation time; afterwards only the status and last-message timestamp change.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from zapzup_manager.domain.entities.stored_file import StoredFile
from zapzup_manager.domain.entities.user import User
from zapzup_manager.domain.exceptions.duplicated_id import DuplicatedIdError
from zapzup_manager.domain.value_objects.chat_id import ChatId
from zapzup_manager.domain.value_objects.user_id import UserId


class ChatStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    ARCHIVED = "ARCHIVED"


@dataclass
class Chat:
    # Required fields (no defaults) - must come first
    id: ChatId
    created_by: str  # creator's username
    users: list[User]
    created_at: datetime
    updated_at: datetime
    # Optional fields (with defaults) - must come last
    name: Optional[str] = None
    description: Optional[str] = None
    status: ChatStatus = ChatStatus.INACTIVE
    icon: Optional[StoredFile] = None
    last_message_sent_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        seen: set[str] = set()
        for user in self.users:
            if user.id.value in seen:
                raise DuplicatedIdError(user.id.value)
            seen.add(user.id.value)

    @classmethod
    def create(
        cls,
        created_by: str,
        users: list[User],
        name: Optional[str] = None,
        description: Optional[str] = None,
        status: ChatStatus = ChatStatus.INACTIVE,
        icon: Optional[StoredFile] = None,
    ) -> Chat:
        """Factory method to create a new Chat with a generated ID and timestamps."""
        now = datetime.now(timezone.utc)
        return cls(
            id=ChatId.generate(),
            created_by=created_by,
            users=list(users),
            created_at=now,
            updated_at=now,
            name=name,
            description=description,
            status=status,
            icon=icon,
        )

    @property
    def member_ids(self) -> list[UserId]:
        return [user.id for user in self.users]

    def has_member(self, user_id: UserId) -> bool:
        return any(user.id == user_id for user in self.users)

    def register_message_sent(self) -> None:
        """Refresh the last message timestamp and reactivate the chat."""
        now = datetime.now(timezone.utc)
        self.last_message_sent_at = now
        self.status = ChatStatus.ACTIVE
        self.updated_at = now
