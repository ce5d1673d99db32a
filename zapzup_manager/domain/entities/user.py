"""
User Entity - A registered chat user.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4
from zapzup_manager.domain.value_objects.user_id import UserId


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    name: str
    username: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime
    # Optional fields (with defaults) - must come last
    deleted_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.email or "@" not in self.email:
            raise ValueError(f"Invalid user email: {self.email}")

    @classmethod
    def create(
        cls, name: str, username: str, email: str, password_hash: str
    ) -> User:
        """Factory method to create a new User with a generated ID and timestamps."""
        now = datetime.now(timezone.utc)
        return cls(
            id=UserId(str(uuid4())),
            name=name,
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
