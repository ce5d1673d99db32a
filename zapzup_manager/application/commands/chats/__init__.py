"""Chat commands."""

from .create_chat import (
    CreatePrivateChatCommand,
    CreateSingleChatCommand,
    CreateGroupChatCommand,
)

__all__ = [
    "CreatePrivateChatCommand",
    "CreateSingleChatCommand",
    "CreateGroupChatCommand",
]
