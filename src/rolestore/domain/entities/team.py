"""Team entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Team:
    """Team - owned by the teams module, read-only here."""

    id: UUID
    name_en: str
    name_fr: str
