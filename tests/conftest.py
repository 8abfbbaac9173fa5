"""Pytest fixtures for Role Store tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from rolestore.application.lookups import PersonLookup, TeamLookup
from rolestore.application.role_store import RoleStore
from rolestore.domain.entities import NewRole, Person, Role, Team
from rolestore.interfaces.graphql import GraphQLContext

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository. Dict order stands in for storage order."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}
        self.locked: list[UUID] = []

    async def create(self, role: Role) -> Role:
        self._by_id[role.id] = role
        return role

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def first_for_person(self, person_id: UUID) -> Role | None:
        for r in self._by_id.values():
            if r.person_id == person_id:
                return r
        return None

    async def list_all(self) -> list[Role]:
        return list(self._by_id.values())

    async def list_by_team(self, team_id: UUID) -> list[Role]:
        return [r for r in self._by_id.values() if r.team_id == team_id]

    async def list_by_person(self, person_id: UUID) -> list[Role]:
        return [r for r in self._by_id.values() if r.person_id == person_id]

    async def update(self, role: Role, updated_at: datetime) -> Role | None:
        stored = self._by_id.get(role.id)
        if stored is None:
            return None
        updated = replace(
            role,
            created_at=stored.created_at,
            updated_at=max(updated_at, stored.created_at),
        )
        self._by_id[role.id] = updated
        return updated

    async def lock_person(self, person_id: UUID) -> None:
        self.locked.append(person_id)

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role


class FakePersonRepository:
    """In-memory person lookup."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Person] = {}

    async def get_by_id(self, person_id: UUID) -> Person | None:
        return self._by_id.get(person_id)

    def add_person(self, person: Person) -> None:
        self._by_id[person.id] = person


class FakeTeamRepository:
    """In-memory team lookup."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Team] = {}

    async def get_by_id(self, team_id: UUID) -> Team | None:
        return self._by_id.get(team_id)

    def add_team(self, team: Team) -> None:
        self._by_id[team.id] = team


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.people = FakePersonRepository()
        self.teams = FakeTeamRepository()
        self.commits = 0
        self.rollbacks = 0

    async def ping(self) -> bool:
        return True

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call, committing like the real one."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        try:
            yield uow
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return _factory


class FakeClock:
    """Deterministic clock; advance() moves it forward."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def make_new_role(**overrides) -> NewRole:
    """NewRole with sensible defaults."""
    values = {
        "person_id": uuid4(),
        "team_id": uuid4(),
        "title_en": "Engineer",
        "title_fr": "Ingénieur",
        "effort": 1.0,
        "active": True,
        "start_datestamp": datetime(2023, 1, 1, tzinfo=UTC),
        "end_date": None,
    }
    values.update(overrides)
    return NewRole(**values)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(uow_factory, clock) -> RoleStore:
    """RoleStore over the in-memory UnitOfWork."""
    return RoleStore(uow_factory, clock=clock)


@pytest.fixture
def graphql_context(store, uow_factory) -> GraphQLContext:
    """Resolver context over the in-memory UnitOfWork."""
    return GraphQLContext(
        store=store,
        people=PersonLookup(uow_factory),
        teams=TeamLookup(uow_factory),
        date_format=DATE_FORMAT,
    )
