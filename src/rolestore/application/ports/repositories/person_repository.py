"""Person repository port."""

from typing import Protocol
from uuid import UUID

from rolestore.domain.entities import Person


class PersonRepository(Protocol):
    """Port for person lookups."""

    async def get_by_id(self, person_id: UUID) -> Person | None: ...
