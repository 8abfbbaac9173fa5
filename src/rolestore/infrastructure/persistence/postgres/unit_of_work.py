"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
import structlog
from psycopg_pool import AsyncConnectionPool

from rolestore.domain.exceptions import StoreError
from rolestore.infrastructure.persistence.postgres.person_repository import (
    PostgresPersonRepository,
)
from rolestore.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from rolestore.infrastructure.persistence.postgres.team_repository import (
    PostgresTeamRepository,
)

logger = structlog.get_logger(__name__)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._roles = PostgresRoleRepository(self._conn)
        self._people = PostgresPersonRepository(self._conn)
        self._teams = PostgresTeamRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def people(self) -> PostgresPersonRepository:
        return self._people

    @property
    def teams(self) -> PostgresTeamRepository:
        return self._teams

    async def ping(self) -> bool:
        """Run SELECT 1 on this unit of work's connection."""
        cur = await self._conn.execute("SELECT 1")
        r = await cur.fetchone()
        return bool(r and r[0] == 1)

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    psycopg errors, including PoolTimeout on checkout, leave the factory as
    StoreError with the original exception chained.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with PostgresUnitOfWork(pool) as uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            logger.error(
                "database_error",
                error_type=type(e).__name__,
                sqlstate=getattr(e, "sqlstate", None),
                error=str(e),
            )
            raise StoreError(str(e) or type(e).__name__) from e

    return factory
