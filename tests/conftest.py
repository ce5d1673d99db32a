"""
Shared fixtures: in-memory implementations of the domain ports.

The fakes honour the same contracts as the Prisma/Redis adapters so the
application layer can be exercised without a database or broker.
"""

from datetime import datetime, timezone
from typing import Any, Optional

import pytest

from zapzup_manager.application.services import ChatService, FileService, UserService
from zapzup_manager.domain.entities import Chat, StoredFile, User
from zapzup_manager.domain.ports import (
    ChatNotifier,
    ChatRepository,
    FileRepository,
    UserRepository,
)
from zapzup_manager.domain.value_objects import ChatId, FileId, UserId
from zapzup_manager.infrastructure.storage import FileStorageService


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.users: dict[str, User] = {}

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self.users.get(user_id.value)

    async def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def list_all(self, limit: int = 100) -> list[User]:
        return list(self.users.values())[:limit]

    async def save(self, user: User) -> None:
        self.users[user.id.value] = user


class InMemoryChatRepository(ChatRepository):
    def __init__(self):
        self.chats: dict[str, Chat] = {}
        self.save_calls = 0

    async def get_by_id(self, chat_id: ChatId) -> Optional[Chat]:
        return self.chats.get(chat_id.value)

    async def get_all_by_user_id(self, user_id: UserId) -> list[Chat]:
        chats = [c for c in self.chats.values() if c.has_member(user_id)]
        chats.sort(
            key=lambda c: c.last_message_sent_at
            or datetime.min.replace(tzinfo=timezone.utc),
            reverse=True,
        )
        return chats

    async def save(self, chat: Chat) -> Chat:
        self.save_calls += 1
        self.chats[chat.id.value] = chat
        return chat


class InMemoryFileRepository(FileRepository):
    def __init__(self):
        self.files: dict[str, StoredFile] = {}

    async def save(self, file: StoredFile) -> None:
        self.files[file.id.value] = file

    async def delete(self, file_id: FileId) -> None:
        self.files.pop(file_id.value, None)


class RecordingNotifier(ChatNotifier):
    def __init__(self, failing_topics: Optional[set[str]] = None):
        self.published: list[tuple[str, Any]] = []
        self.failing_topics = failing_topics or set()

    async def publish(self, topic: str, payload: Any) -> None:
        if topic in self.failing_topics:
            raise ConnectionError(f"broker unavailable for {topic}")
        self.published.append((topic, payload))


def make_user(user_id: str, username: str) -> User:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return User(
        id=UserId(user_id),
        name=username.capitalize(),
        username=username,
        email=f"{username}@zapzup.dev",
        password_hash="hashed",
        created_at=now,
        updated_at=now,
    )


@pytest.fixture()
def user_repository():
    repo = InMemoryUserRepository()
    for user_id, username in (("u1", "alice"), ("u2", "bob"), ("u3", "carol")):
        repo.users[user_id] = make_user(user_id, username)
    return repo


@pytest.fixture()
def chat_repository():
    return InMemoryChatRepository()


@pytest.fixture()
def file_repository():
    return InMemoryFileRepository()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def file_storage(tmp_path):
    return FileStorageService(upload_base=str(tmp_path / "uploads"))


@pytest.fixture()
def file_service(file_storage, file_repository):
    return FileService(
        file_storage,
        file_repository,
        max_size_mb=1,
        allowed_types=["image/png", "image/jpeg"],
    )


@pytest.fixture()
def chat_service(chat_repository, user_repository, file_service, notifier):
    return ChatService(
        chat_repository=chat_repository,
        user_service=UserService(user_repository),
        file_service=file_service,
        notifier=notifier,
        topic_prefix="/topic/chats",
    )
