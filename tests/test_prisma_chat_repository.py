"""
Tests for PrismaChatRepository using a mocked Prisma client.
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from zapzup_manager.domain.entities import Chat, ChatStatus
from zapzup_manager.domain.value_objects import ChatId, UserId
from zapzup_manager.infrastructure.persistence import PrismaChatRepository

from conftest import make_user

STAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _user_record(user_id, username):
    return SimpleNamespace(
        id=user_id,
        name=username.capitalize(),
        username=username,
        email=f"{username}@zapzup.dev",
        password_hash="hashed",
        created_at=STAMP,
        updated_at=STAMP,
        deleted_at=None,
    )


def _chat_record(chat_id, users, member_ids, last_message_sent_at=None):
    return SimpleNamespace(
        id=chat_id,
        name=None,
        description=None,
        created_by="alice",
        status="ACTIVE",
        icon=None,
        users=users,
        member_ids=member_ids,
        last_message_sent_at=last_message_sent_at,
        created_at=STAMP,
        updated_at=STAMP,
        deleted_at=None,
    )


@pytest.fixture()
def prisma():
    client = MagicMock()
    client.chat.find_unique = AsyncMock()
    client.chat.find_many = AsyncMock()
    client.chat.upsert = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_members_are_rebuilt_in_creation_order(prisma):
    prisma.chat.find_unique.return_value = _chat_record(
        "c1",
        users=[
            _user_record("u3", "carol"),
            _user_record("u1", "alice"),
            _user_record("u2", "bob"),
        ],
        member_ids=["u1", "u2", "u3"],
    )

    chat = await PrismaChatRepository(prisma).get_by_id(ChatId("c1"))

    assert [u.id.value for u in chat.users] == ["u1", "u2", "u3"]
    assert chat.status == ChatStatus.ACTIVE
    assert chat.icon is None
    assert prisma.chat.find_unique.await_args.kwargs["where"] == {"id": "c1"}


@pytest.mark.asyncio
async def test_missing_chat_is_none(prisma):
    prisma.chat.find_unique.return_value = None

    assert await PrismaChatRepository(prisma).get_by_id(ChatId("nope")) is None


@pytest.mark.asyncio
async def test_chats_without_messages_come_last(prisma):
    alice = _user_record("u1", "alice")
    # Postgres returns NULLs first for a DESC order
    prisma.chat.find_many.return_value = [
        _chat_record("never", [alice], ["u1"]),
        _chat_record("newest", [alice], ["u1"], datetime(2024, 5, 2, tzinfo=timezone.utc)),
        _chat_record("older", [alice], ["u1"], datetime(2024, 5, 1, tzinfo=timezone.utc)),
    ]

    chats = await PrismaChatRepository(prisma).get_all_by_user_id(UserId("u1"))

    assert [c.id.value for c in chats] == ["newest", "older", "never"]
    kwargs = prisma.chat.find_many.await_args.kwargs
    assert kwargs["where"] == {"users": {"some": {"id": "u1"}}, "deleted_at": None}
    assert kwargs["order"] == {"last_message_sent_at": "desc"}


@pytest.mark.asyncio
async def test_save_connects_members_once_in_order(prisma):
    chat = Chat.create(
        created_by="bob",
        users=[make_user("u2", "bob"), make_user("u1", "alice")],
        status=ChatStatus.INACTIVE,
    )
    prisma.chat.upsert.return_value = _chat_record(
        chat.id.value,
        users=[_user_record("u1", "alice"), _user_record("u2", "bob")],
        member_ids=["u2", "u1"],
    )

    saved = await PrismaChatRepository(prisma).save(chat)

    data = prisma.chat.upsert.await_args.kwargs["data"]
    assert data["create"]["member_ids"] == ["u2", "u1"]
    assert data["create"]["users"] == {"connect": [{"id": "u2"}, {"id": "u1"}]}
    assert "icon" not in data["create"]
    assert "users" not in data["update"]
    assert [u.id.value for u in saved.users] == ["u2", "u1"]
