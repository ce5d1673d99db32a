"""
UserService - User lookup used by the chat workflows.

Returns the User entity, since chats aggregate users; GetUserHandler maps it
to UserDTO for callers outside the application layer.
"""

from zapzup_manager.domain.entities.user import User
from zapzup_manager.domain.exceptions import UserNotFoundError
from zapzup_manager.domain.ports.repositories import UserRepository
from zapzup_manager.domain.value_objects.user_id import UserId


class UserService:
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def get_user_by_id(self, user_id: UserId) -> User:
        user = await self._user_repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id.value)
        return user
