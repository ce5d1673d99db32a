"""
ChatId Value Object - Identity of a chat aggregate.
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class ChatId:
    value: str  # chat_id, presented as UUID string

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("ChatId cannot be empty")

    @classmethod
    def generate(cls) -> "ChatId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
