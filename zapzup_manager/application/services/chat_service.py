"""
ChatService - Chat creation and chat-list notifications.

Operations:
- create_private_chat: two-member chat, stays INACTIVE until the first message
- create_single_chat: two-member chat, ACTIVE immediately
- create_group_chat: named chat with optional icon and any number of members
- find_by_id / update_last_message_sent
- send_to_users_chats_ordered_by_last_message_sent: fan-out of every member's
  chat list to that member's topic

Every creation validates and resolves all members before any repository
write, so a failed lookup or duplicate id leaves nothing behind. A group icon
is written to disk first, registered only once the members are valid, and
discarded again (bytes and registry row) if the call fails afterwards.
Member uniqueness is checked in memory per call; two concurrent calls creating
the same chat are not serialized here.
"""

import logging
from typing import Optional

from zapzup_manager.application.commands.chats import (
    CreateGroupChatCommand,
    CreatePrivateChatCommand,
    CreateSingleChatCommand,
)
from zapzup_manager.application.dto.chat import ChatDTO, to_dto_list
from zapzup_manager.application.dto.file import FileUpload
from zapzup_manager.application.services.file_service import FileService
from zapzup_manager.application.services.user_service import UserService
from zapzup_manager.config.settings import Config
from zapzup_manager.domain.entities.chat import Chat, ChatStatus
from zapzup_manager.domain.entities.user import User
from zapzup_manager.domain.exceptions import ChatNotFoundError, DuplicatedIdError
from zapzup_manager.domain.ports.notifier import ChatNotifier
from zapzup_manager.domain.ports.repositories import ChatRepository
from zapzup_manager.domain.value_objects.chat_id import ChatId
from zapzup_manager.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


def chat_topic(user_id: UserId, prefix: Optional[str] = None) -> str:
    """Topic a user listens on for chat list updates."""
    prefix = (prefix or Config.CHAT_TOPIC_PREFIX).rstrip("/")
    return f"{prefix}/{user_id.value}"


class ChatService:
    def __init__(
        self,
        chat_repository: ChatRepository,
        user_service: UserService,
        file_service: FileService,
        notifier: ChatNotifier,
        topic_prefix: Optional[str] = None,
    ):
        self._chat_repository = chat_repository
        self._user_service = user_service
        self._file_service = file_service
        self._notifier = notifier
        self._topic_prefix = topic_prefix

    # ==================== CREATION ====================

    async def create_private_chat(self, command: CreatePrivateChatCommand) -> ChatDTO:
        return await self._create_two_member_chat(
            command.creator_user_id, command.member_id, ChatStatus.INACTIVE
        )

    async def create_single_chat(self, command: CreateSingleChatCommand) -> ChatDTO:
        return await self._create_two_member_chat(
            command.creator_user_id, command.member_id, ChatStatus.ACTIVE
        )

    async def create_group_chat(
        self, command: CreateGroupChatCommand, icon: Optional[FileUpload] = None
    ) -> ChatDTO:
        stored_icon = self._file_service.store_file(icon)

        try:
            creator = await self._resolve_user(command.creator_user_id)
            members: list[User] = [creator]

            for member_id in command.member_ids:
                member = await self._resolve_user(member_id)
                self._check_not_duplicated(members, member.id)
                members.append(member)

            if stored_icon:
                await self._file_service.register_file(stored_icon)

            chat = Chat.create(
                name=command.name,
                description=command.description,
                created_by=creator.username,
                status=ChatStatus.ACTIVE,
                icon=stored_icon,
                users=members,
            )
            return await self._save_chat(chat)
        except Exception:
            # The icon only outlives a successfully saved chat
            if stored_icon:
                await self._file_service.discard_file(stored_icon)
            raise

    async def _create_two_member_chat(
        self, creator_user_id: UserId, member_id: UserId, status: ChatStatus
    ) -> ChatDTO:
        if creator_user_id == member_id:
            raise DuplicatedIdError(member_id.value)

        creator = await self._resolve_user(creator_user_id)
        member = await self._resolve_user(member_id)

        chat = Chat.create(
            created_by=creator.username,
            users=[creator, member],
            status=status,
        )
        return await self._save_chat(chat)

    # ==================== READS / UPDATES ====================

    async def find_by_id(self, chat_id: ChatId) -> ChatDTO:
        return ChatDTO.from_entity(await self._get_chat(chat_id))

    async def update_last_message_sent(self, chat_id: ChatId) -> None:
        chat = await self._get_chat(chat_id)
        chat.register_message_sent()
        await self._chat_repository.save(chat)

    # ==================== NOTIFICATIONS ====================

    async def send_to_users_chats_ordered_by_last_message_sent(
        self, chat_id: ChatId
    ) -> None:
        chat = await self._get_chat(chat_id)

        for user_id in chat.member_ids:
            chats = await self._chat_repository.get_all_by_user_id(user_id)
            topic = chat_topic(user_id, self._topic_prefix)
            try:
                await self._notifier.publish(topic, to_dto_list(chats))
            except Exception as e:
                logger.warning(f"[ChatService] Failed to notify {topic}: {e}")

    # ==================== HELPERS ====================

    async def _get_chat(self, chat_id: ChatId) -> Chat:
        chat = await self._chat_repository.get_by_id(chat_id)
        if not chat:
            raise ChatNotFoundError(chat_id.value)
        return chat

    async def _resolve_user(self, user_id: UserId) -> User:
        return await self._user_service.get_user_by_id(user_id)

    @staticmethod
    def _check_not_duplicated(members: list[User], candidate_id: UserId) -> None:
        if any(member.id == candidate_id for member in members):
            raise DuplicatedIdError(candidate_id.value)

    async def _save_chat(self, chat: Chat) -> ChatDTO:
        saved = await self._chat_repository.save(chat)
        logger.info(
            f"[ChatService] Created chat {saved.id.value} by {saved.created_by} "
            f"with {len(saved.users)} members"
        )
        return ChatDTO.from_entity(saved)
