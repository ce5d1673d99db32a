"""User-related queries."""

from zapzup_manager.application.queries.users.get_user import (
    GetUserQuery,
    GetUserHandler,
)
from zapzup_manager.application.queries.users.list_users import (
    ListUsersQuery,
    ListUsersHandler,
)

__all__ = [
    "GetUserQuery",
    "GetUserHandler",
    "ListUsersQuery",
    "ListUsersHandler",
]
