"""
Tests for chat request/response mapping.
"""

from datetime import datetime, timezone

from zapzup_manager.application.commands.chats import (
    CreateGroupChatCommand,
    CreatePrivateChatCommand,
    CreateSingleChatCommand,
)
from zapzup_manager.application.dto import ChatDTO, FileDTO, UserDTO
from zapzup_manager.domain.entities import ChatStatus
from zapzup_manager.domain.value_objects import UserId
from zapzup_manager.presentation.schemas import (
    CreateGroupChatRequest,
    CreatePrivateChatRequest,
    to_chat_response,
    to_chat_response_list,
)

STAMP = datetime(2024, 2, 1, tzinfo=timezone.utc)


def test_group_request_to_command_keeps_member_order():
    request = CreateGroupChatRequest(
        name="Team", creator_user_id="u1", members=["u3", "u2"]
    )

    assert request.to_domain() == CreateGroupChatCommand(
        creator_user_id=UserId("u1"),
        name="Team",
        description=None,
        member_ids=(UserId("u3"), UserId("u2")),
    )


def test_private_request_to_commands():
    request = CreatePrivateChatRequest(creator_user_id="u1", member_id="u2")

    assert request.to_domain() == CreatePrivateChatCommand(UserId("u1"), UserId("u2"))
    assert request.to_single_chat() == CreateSingleChatCommand(
        UserId("u1"), UserId("u2")
    )


def test_chat_response_projects_all_fields():
    member = UserDTO(
        id="u1",
        name="Alice",
        username="alice",
        email="alice@zapzup.dev",
        created_at=STAMP,
        updated_at=STAMP,
    )
    icon = FileDTO(
        id="f1", name="icon.png", content_type="image/png", size_bytes=3, created_at=STAMP
    )
    chat = ChatDTO(
        id="c1",
        name="Team",
        description="desc",
        created_by="alice",
        status=ChatStatus.ACTIVE,
        icon=icon,
        members=[member],
        created_at=STAMP,
        updated_at=STAMP,
    )

    response = to_chat_response(chat)

    assert response.id == "c1"
    assert response.icon.id == "f1"
    assert response.members[0].username == "alice"
    assert response.last_message_sent_at is None
    assert set(response.model_dump()) == {
        "id",
        "name",
        "description",
        "created_by",
        "status",
        "icon",
        "members",
        "last_message_sent_at",
        "created_at",
        "updated_at",
        "deleted_at",
    }
    assert to_chat_response_list([chat]) == [response]
