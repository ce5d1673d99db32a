"""
FileId Value Object - Identifier of a stored file.
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class FileId:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("FileId cannot be empty")

    @classmethod
    def generate(cls) -> "FileId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
