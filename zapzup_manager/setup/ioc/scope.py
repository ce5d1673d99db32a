"""
Request scope helper.

Opens a dishka REQUEST scope and binds a correlation id to it, so every log
line written while the scope is open carries the same id.

Usage:
    async with request_scope(container) as request_container:
        chat_service = await request_container.get(ChatService)
        await chat_service.create_private_chat(command)
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from dishka import AsyncContainer

from zapzup_manager.config.logging_config import correlation_id_var


@asynccontextmanager
async def request_scope(
    container: AsyncContainer, correlation_id: Optional[str] = None
) -> AsyncIterator[AsyncContainer]:
    token = correlation_id_var.set(correlation_id or uuid.uuid4().hex)
    try:
        async with container() as request_container:
            yield request_container
    finally:
        correlation_id_var.reset(token)
