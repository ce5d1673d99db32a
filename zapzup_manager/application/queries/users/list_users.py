"""List Users Query."""

from dataclasses import dataclass
from zapzup_manager.application.common.interfaces import Query, QueryHandler
from zapzup_manager.application.dto.user import UserDTO
from zapzup_manager.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class ListUsersQuery(Query[list[UserDTO]]):
    limit: int = 100


class ListUsersHandler(QueryHandler[list[UserDTO]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> list[UserDTO]:
        users = await self._user_repository.list_all(query.limit)
        return [UserDTO.from_entity(user) for user in users]
