"""
Dishka DI Container Setup.

- Registers all dependencies (clients, repositories, services, handlers)
- Maps abstract ports to concrete implementations
- Manages lifecycle (APP = singleton, REQUEST = per unit of work)

Flow:
  Container → PrismaChatRepository ─┐
            → UserService ──────────┼→ ChatService
            → FileService ──────────┤
            → RedisChatNotifier ────┘
"""

from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma
from redis.asyncio import Redis

from zapzup_manager.application.commands.users import CreateUserHandler
from zapzup_manager.application.queries.users import GetUserHandler, ListUsersHandler
from zapzup_manager.application.services import ChatService, FileService, UserService
from zapzup_manager.config.logging_config import setup_logging
from zapzup_manager.config.settings import Config, effective_log_level, get_config
from zapzup_manager.domain.ports import (
    ChatNotifier,
    ChatRepository,
    FileRepository,
    FileStorage,
    UserRepository,
)
from zapzup_manager.infrastructure.messaging import (
    RedisChatNotifier,
    close_redis_client,
    create_redis_client,
)
from zapzup_manager.infrastructure.persistence import (
    PrismaChatRepository,
    PrismaFileRepository,
    PrismaUserRepository,
)
from zapzup_manager.infrastructure.storage import FileStorageService


class AppProvider(Provider):
    """Application dependency provider, bound to one config class."""

    def __init__(self, app_config: type[Config] = Config):
        super().__init__()
        self._config = app_config

    # ==================== CLIENTS ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """Prisma client, connected once and disconnected on container close."""
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client(self._config.REDIS_URL)
        yield client
        await close_redis_client(client)

    # ==================== ADAPTERS ====================

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorage:
        return FileStorageService(upload_base=self._config.UPLOAD_BASE)

    @provide(scope=Scope.APP)
    def get_notifier(self, redis: Redis) -> ChatNotifier:
        return RedisChatNotifier(redis)

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_chat_repository(self, prisma: Prisma) -> ChatRepository:
        return PrismaChatRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_file_repository(self, prisma: Prisma) -> FileRepository:
        return PrismaFileRepository(prisma)

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_file_service(
        self, file_storage: FileStorage, file_repository: FileRepository
    ) -> FileService:
        return FileService(
            file_storage,
            file_repository,
            max_size_mb=self._config.MAX_ICON_MB,
            allowed_types=self._config.ALLOWED_ICON_TYPES,
        )

    @provide(scope=Scope.REQUEST)
    def get_chat_service(
        self,
        chat_repository: ChatRepository,
        user_service: UserService,
        file_service: FileService,
        notifier: ChatNotifier,
    ) -> ChatService:
        return ChatService(
            chat_repository=chat_repository,
            user_service=user_service,
            file_service=file_service,
            notifier=notifier,
            topic_prefix=self._config.CHAT_TOPIC_PREFIX,
        )

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_user_handler(
        self, user_repository: UserRepository
    ) -> CreateUserHandler:
        return CreateUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_user_handler(self, user_service: UserService) -> GetUserHandler:
        return GetUserHandler(user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(
        self, user_repository: UserRepository
    ) -> ListUsersHandler:
        return ListUsersHandler(user_repository)


def create_container(env: Optional[str] = None) -> AsyncContainer:
    """
    Create and configure the DI container. Call this ONCE at startup.

    The config class is picked by get_config(env), falling back to APP_ENV.

    Usage:
        container = create_container()
        async with request_scope(container) as request_container:
            chat_service = await request_container.get(ChatService)
            chat = await chat_service.create_private_chat(command)
        await container.close()
    """
    app_config = get_config(env)
    setup_logging(
        effective_log_level(app_config), app_config.LOG_PATH, app_config.LOG_FORMAT
    )
    return make_async_container(AppProvider(app_config))
