"""
User request/response models and their mappers.

Transport ↔ application mapping only; no business rules here.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from zapzup_manager.application.commands.users import CreateUserCommand
from zapzup_manager.application.dto.user import UserDTO


class CreateUserRequest(BaseModel):
    name: str
    username: str
    email: str
    password: str

    def to_domain(self) -> CreateUserCommand:
        return CreateUserCommand(
            name=self.name,
            username=self.username,
            email=self.email,
            password=self.password,
        )


class CreateUserResponse(BaseModel):
    id: str
    name: str
    username: str
    email: str
    created_at: datetime


class UserResponse(BaseModel):
    id: str
    name: str
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


def to_create_user_response(user: UserDTO) -> CreateUserResponse:
    return CreateUserResponse(
        id=user.id,
        name=user.name,
        username=user.username,
        email=user.email,
        created_at=user.created_at,
    )


def to_response(user: UserDTO) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        username=user.username,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
        deleted_at=user.deleted_at,
    )


def to_response_list(users: list[UserDTO]) -> list[UserResponse]:
    return [to_response(user) for user in users]
