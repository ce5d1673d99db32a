"""Request/response models exposed to transport adapters."""

from zapzup_manager.presentation.schemas.user import (
    CreateUserRequest,
    CreateUserResponse,
    UserResponse,
    to_create_user_response,
    to_response,
    to_response_list,
)
from zapzup_manager.presentation.schemas.chat import (
    CreatePrivateChatRequest,
    CreateGroupChatRequest,
    ChatResponse,
    to_chat_response,
    to_chat_response_list,
)

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "UserResponse",
    "to_create_user_response",
    "to_response",
    "to_response_list",
    "CreatePrivateChatRequest",
    "CreateGroupChatRequest",
    "ChatResponse",
    "to_chat_response",
    "to_chat_response_list",
]
