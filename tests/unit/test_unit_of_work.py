"""Unit tests for the PostgreSQL unit of work factory."""

from unittest.mock import AsyncMock

import psycopg
import pytest
from psycopg_pool import PoolTimeout

from rolestore.domain.exceptions import NotFound, StoreError
from rolestore.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from rolestore.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)


class _ConnectionContext:
    def __init__(self, conn, error: Exception | None) -> None:
        self._conn = conn
        self._error = error

    async def __aenter__(self):
        if self._error:
            raise self._error
        return self._conn

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        return False


class _FakePool:
    """Stands in for AsyncConnectionPool.connection()."""

    def __init__(self, conn=None, error: Exception | None = None) -> None:
        self.conn = conn or AsyncMock()
        self._error = error

    def connection(self) -> _ConnectionContext:
        return _ConnectionContext(self.conn, self._error)


@pytest.mark.asyncio
async def test_commit_on_success() -> None:
    pool = _FakePool()
    factory = create_uow_factory(pool)

    async with factory() as uow:
        assert isinstance(uow.roles, PostgresRoleRepository)

    pool.conn.commit.assert_awaited_once()
    pool.conn.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_checkout_timeout_becomes_store_error() -> None:
    factory = create_uow_factory(_FakePool(error=PoolTimeout("couldn't get a connection")))

    with pytest.raises(StoreError) as exc_info:
        async with factory():
            pass

    assert isinstance(exc_info.value.__cause__, PoolTimeout)


@pytest.mark.asyncio
async def test_query_error_becomes_store_error_and_rolls_back() -> None:
    pool = _FakePool()
    pool.conn.execute.side_effect = psycopg.errors.UniqueViolation("duplicate key")
    factory = create_uow_factory(pool)

    with pytest.raises(StoreError, match="duplicate key") as exc_info:
        async with factory() as uow:
            await uow.roles.list_all()

    assert isinstance(exc_info.value.__cause__, psycopg.errors.UniqueViolation)
    pool.conn.rollback.assert_awaited()
    pool.conn.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_domain_errors_pass_through_unwrapped() -> None:
    pool = _FakePool()
    factory = create_uow_factory(pool)

    with pytest.raises(NotFound):
        async with factory():
            raise NotFound("Role", "x")

    pool.conn.rollback.assert_awaited()


@pytest.mark.asyncio
async def test_ping_runs_select_one() -> None:
    pool = _FakePool()
    cur = AsyncMock()
    cur.fetchone.return_value = (1,)
    pool.conn.execute.return_value = cur
    factory = create_uow_factory(pool)

    async with factory() as uow:
        assert await uow.ping() is True

    pool.conn.execute.assert_awaited_with("SELECT 1")
