"""Team repository port."""

from typing import Protocol
from uuid import UUID

from rolestore.domain.entities import Team


class TeamRepository(Protocol):
    """Port for team lookups."""

    async def get_by_id(self, team_id: UUID) -> Team | None: ...
