"""Root query and mutation types."""

from dataclasses import replace
from uuid import UUID

import strawberry
import structlog
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

from rolestore.domain.exceptions import RoleStoreError, StoreError
from rolestore.interfaces.graphql.types import RoleInput, RoleType

logger = structlog.get_logger(__name__)


@strawberry.type
class Query:
    @strawberry.field(description="Every role, in storage order.")
    async def roles(self, info: Info) -> list[RoleType]:
        roles = await info.context.store.find_all()
        return [RoleType(role=r) for r in roles]

    @strawberry.field
    async def role(self, info: Info, id: UUID) -> RoleType:
        return RoleType(role=await info.context.store.get_by_id(id))

    @strawberry.field
    async def roles_by_team(self, info: Info, team_id: UUID) -> list[RoleType]:
        roles = await info.context.store.get_by_team_id(team_id)
        return [RoleType(role=r) for r in roles]

    @strawberry.field
    async def roles_by_person(self, info: Info, person_id: UUID) -> list[RoleType]:
        roles = await info.context.store.get_by_person_id(person_id)
        return [RoleType(role=r) for r in roles]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_role(self, info: Info, input: RoleInput) -> RoleType:
        role = await info.context.store.create(input.to_new_role())
        return RoleType(role=role)

    @strawberry.mutation(
        description="Return the person's existing role unchanged, or create one from input."
    )
    async def get_or_create_role(self, info: Info, input: RoleInput) -> RoleType:
        role = await info.context.store.get_or_create(input.to_new_role())
        return RoleType(role=role)

    @strawberry.mutation(description="Replace every mutable field of a role.")
    async def update_role(self, info: Info, id: UUID, input: RoleInput) -> RoleType:
        store = info.context.store
        current = await store.get_by_id(id)
        new = input.to_new_role()
        role = await store.update(
            replace(
                current,
                person_id=new.person_id,
                team_id=new.team_id,
                title_en=new.title_en,
                title_fr=new.title_fr,
                effort=new.effort,
                active=new.active,
                start_datestamp=new.start_datestamp,
                end_date=new.end_date,
            )
        )
        return RoleType(role=role)


class RoleSchema(strawberry.Schema):
    """Schema that logs expected domain errors quietly."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, RoleStoreError) and not isinstance(original, StoreError):
                logger.info("graphql_domain_error", error=str(original), path=error.path)
            else:
                logger.error(
                    "graphql_error",
                    error=error.message,
                    path=error.path,
                    exc_info=original,
                )


def create_schema() -> strawberry.Schema:
    """Build the roles schema."""
    return RoleSchema(query=Query, mutation=Mutation)
