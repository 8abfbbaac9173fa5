"""Person entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Person:
    """Person - owned by the people module, read-only here."""

    id: UUID
    given_name: str
    family_name: str
    email: str | None = None
