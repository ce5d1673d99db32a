"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from zapzup_manager.domain.entities.chat import Chat, ChatStatus
from zapzup_manager.domain.entities.stored_file import StoredFile
from zapzup_manager.domain.entities.user import User

__all__ = [
    "Chat",
    "ChatStatus",
    "StoredFile",
    "User",
]
