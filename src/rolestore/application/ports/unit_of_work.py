"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from rolestore.application.ports.repositories import (
    PersonRepository,
    RoleRepository,
    TeamRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - one connection, one transaction, repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def people(self) -> PersonRepository: ...

    @property
    def teams(self) -> TeamRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
