"""Repository ports."""

from rolestore.application.ports.repositories.person_repository import PersonRepository
from rolestore.application.ports.repositories.role_repository import RoleRepository
from rolestore.application.ports.repositories.team_repository import TeamRepository

__all__ = [
    "PersonRepository",
    "RoleRepository",
    "TeamRepository",
]
