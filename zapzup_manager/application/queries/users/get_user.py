"""Get User Query."""

from dataclasses import dataclass
from zapzup_manager.application.common.interfaces import Query, QueryHandler
from zapzup_manager.application.dto.user import UserDTO
from zapzup_manager.application.services.user_service import UserService
from zapzup_manager.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetUserQuery(Query[UserDTO]):
    user_id: UserId


class GetUserHandler(QueryHandler[UserDTO]):
    def __init__(self, user_service: UserService):
        self._user_service = user_service

    async def execute(self, query: GetUserQuery) -> UserDTO:
        user = await self._user_service.get_user_by_id(query.user_id)
        return UserDTO.from_entity(user)
