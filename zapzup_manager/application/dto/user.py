"""User DTOs - transport representation of a user."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from zapzup_manager.domain.entities.user import User


class UserDTO(BaseModel):
    id: str
    name: str
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id.value,
            name=user.name,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
            deleted_at=user.deleted_at,
        )
