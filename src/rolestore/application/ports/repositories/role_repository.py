"""Role repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from rolestore.domain.entities import Role


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def create(self, role: Role) -> Role: ...

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def first_for_person(self, person_id: UUID) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def list_by_team(self, team_id: UUID) -> list[Role]: ...

    async def list_by_person(self, person_id: UUID) -> list[Role]: ...

    async def update(self, role: Role, updated_at: datetime) -> Role | None: ...

    async def lock_person(self, person_id: UUID) -> None: ...
