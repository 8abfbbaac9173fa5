"""Person and team lookups used by the role field resolvers."""

from uuid import UUID

from rolestore.application.ports import UnitOfWorkFactory
from rolestore.domain.entities import Person, Team
from rolestore.domain.exceptions import NotFound


class PersonLookup:
    """Resolve a person by id."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def get_by_id(self, person_id: UUID) -> Person:
        async with self._uow_factory() as uow:
            person = await uow.people.get_by_id(person_id)
        if person is None:
            raise NotFound("Person", person_id)
        return person


class TeamLookup:
    """Resolve a team by id."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def get_by_id(self, team_id: UUID) -> Team:
        async with self._uow_factory() as uow:
            team = await uow.teams.get_by_id(team_id)
        if team is None:
            raise NotFound("Team", team_id)
        return team
