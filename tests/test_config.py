"""
Tests for config selection and the correlation id bound to a request scope.
"""

import logging

import pytest
from dishka import Provider, Scope, make_async_container, provide

from zapzup_manager.application.services import UserService
from zapzup_manager.config.logging_config import (
    NO_CORRELATION_ID,
    CorrelationIdFilter,
    correlation_id_var,
)
from zapzup_manager.config.settings import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    effective_log_level,
    get_config,
)
from zapzup_manager.domain.value_objects import UserId
from zapzup_manager.setup.ioc import request_scope


class InMemoryProvider(Provider):
    def __init__(self, user_repository):
        super().__init__()
        self._user_repository = user_repository

    @provide(scope=Scope.REQUEST)
    def get_user_service(self) -> UserService:
        return UserService(self._user_repository)


def test_get_config_by_name():
    assert get_config("testing") is TestingConfig
    assert get_config("production") is ProductionConfig
    assert get_config("unknown") is DevelopmentConfig


def test_get_config_reads_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")

    assert get_config() is ProductionConfig


def test_debug_config_forces_debug_logging():
    assert effective_log_level(DevelopmentConfig) == "DEBUG"

    class QuietConfig(ProductionConfig):
        DEBUG = False
        LOG_LEVEL = "WARNING"

    assert effective_log_level(QuietConfig) == "WARNING"


@pytest.mark.asyncio
async def test_request_scope_binds_correlation_id(user_repository):
    container = make_async_container(InMemoryProvider(user_repository))

    async with request_scope(container, "req-42") as request_container:
        record = logging.makeLogRecord({"msg": "inside"})
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "req-42"

        service = await request_container.get(UserService)
        user = await service.get_user_by_id(UserId("u1"))
        assert user.username == "alice"

    assert correlation_id_var.get() == NO_CORRELATION_ID
    await container.close()


@pytest.mark.asyncio
async def test_request_scope_generates_correlation_id(user_repository):
    container = make_async_container(InMemoryProvider(user_repository))

    async with request_scope(container):
        first = correlation_id_var.get()
    async with request_scope(container):
        second = correlation_id_var.get()

    assert first != NO_CORRELATION_ID
    assert len(first) == 32
    assert first != second
    await container.close()
