"""Role store - persistence operations for roles.

Every operation runs in its own unit of work: one pooled connection, one
transaction. Connection and query failures arrive as StoreError from the
unit of work factory; NotFound is raised here for single-row lookups.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID, uuid4

import structlog

from rolestore.application.ports import UnitOfWorkFactory
from rolestore.domain.entities import NewRole, Role
from rolestore.domain.exceptions import NotFound

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class RoleStore:
    """Create, look up and update roles."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def create(self, new_role: NewRole) -> Role:
        """Insert a role with a fresh id and timestamps."""
        async with self._uow_factory() as uow:
            role = await uow.roles.create(new_role.to_role(uuid4(), self._clock()))
        logger.info(
            "role_created",
            role_id=str(role.id),
            person_id=str(role.person_id),
            team_id=str(role.team_id),
        )
        return role

    async def get_or_create(self, new_role: NewRole) -> Role:
        """Return the first role of new_role.person_id, creating it if none exists.

        An existing role is returned as stored; the other fields of new_role
        are not applied to it. The lookup and insert share one transaction
        holding an advisory lock on the person, so concurrent callers for the
        same person never both insert.
        """
        async with self._uow_factory() as uow:
            await uow.roles.lock_person(new_role.person_id)
            existing = await uow.roles.first_for_person(new_role.person_id)
            if existing is not None:
                logger.debug(
                    "role_found_for_person",
                    role_id=str(existing.id),
                    person_id=str(new_role.person_id),
                )
                return existing
            role = await uow.roles.create(new_role.to_role(uuid4(), self._clock()))
        logger.info(
            "role_created",
            role_id=str(role.id),
            person_id=str(role.person_id),
            team_id=str(role.team_id),
        )
        return role

    async def find_all(self) -> list[Role]:
        async with self._uow_factory() as uow:
            return await uow.roles.list_all()

    async def get_by_id(self, role_id: UUID) -> Role:
        """Get role by id. Raises NotFound."""
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
        if role is None:
            raise NotFound("Role", role_id)
        return role

    async def get_by_team_id(self, team_id: UUID) -> list[Role]:
        async with self._uow_factory() as uow:
            return await uow.roles.list_by_team(team_id)

    async def get_by_person_id(self, person_id: UUID) -> list[Role]:
        async with self._uow_factory() as uow:
            return await uow.roles.list_by_person(person_id)

    async def update(self, role: Role) -> Role:
        """Replace the mutable fields of role.id and return the stored row.

        id and created_at are never written; updated_at is set by the store.
        """
        async with self._uow_factory() as uow:
            updated = await uow.roles.update(role, self._clock())
            if updated is None:
                raise NotFound("Role", role.id)
        logger.info("role_updated", role_id=str(updated.id))
        return updated
