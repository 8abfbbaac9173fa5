"""Domain entities."""

from rolestore.domain.entities.person import Person
from rolestore.domain.entities.role import NewRole, Role
from rolestore.domain.entities.team import Team

__all__ = [
    "NewRole",
    "Person",
    "Role",
    "Team",
]
