"""Create User Command."""

from dataclasses import dataclass
from logging import getLogger
from werkzeug.security import generate_password_hash
from zapzup_manager.application.common.interfaces import Command, CommandHandler
from zapzup_manager.application.dto.user import UserDTO
from zapzup_manager.domain.entities.user import User
from zapzup_manager.domain.exceptions import DomainValidationError
from zapzup_manager.domain.ports.repositories import UserRepository

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateUserCommand(Command[UserDTO]):
    name: str
    username: str
    email: str
    password: str


class CreateUserHandler(CommandHandler[UserDTO]):
    _user_repository: UserRepository

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: CreateUserCommand) -> UserDTO:
        if not command.password:
            raise DomainValidationError("Password cannot be empty")
        if await self._user_repository.get_by_username(command.username):
            raise DomainValidationError(
                f"Username {command.username} is already taken"
            )
        if await self._user_repository.get_by_email(command.email):
            raise DomainValidationError(f"Email {command.email} is already in use")

        try:
            user = User.create(
                name=command.name,
                username=command.username,
                email=command.email,
                password_hash=generate_password_hash(command.password),
            )
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        await self._user_repository.save(user)
        logger.info(f"[Users] Created user {user.id.value} ({user.username})")
        return UserDTO.from_entity(user)
