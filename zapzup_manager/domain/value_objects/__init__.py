"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from zapzup_manager.domain.value_objects.user_id import UserId
from zapzup_manager.domain.value_objects.chat_id import ChatId
from zapzup_manager.domain.value_objects.file_id import FileId

__all__ = [
    "UserId",
    "ChatId",
    "FileId",
]
