"""GraphQL object and input types."""

import math
from datetime import datetime
from uuid import UUID

import strawberry
from strawberry.types import Info

from rolestore.domain.entities import NewRole, Person, Role, Team
from rolestore.domain.exceptions import ValidationError
from rolestore.interfaces.graphql.formatting import (
    format_active,
    format_end_date,
    format_timestamp,
)


@strawberry.type(name="Person")
class PersonType:
    id: UUID
    given_name: str
    family_name: str
    email: str | None

    @classmethod
    def from_entity(cls, person: Person) -> "PersonType":
        return cls(
            id=person.id,
            given_name=person.given_name,
            family_name=person.family_name,
            email=person.email,
        )


@strawberry.type(name="Team")
class TeamType:
    id: UUID
    english_name: str
    french_name: str

    @classmethod
    def from_entity(cls, team: Team) -> "TeamType":
        return cls(id=team.id, english_name=team.name_en, french_name=team.name_fr)


@strawberry.type(name="Role", description="A person's role on a team.")
class RoleType:
    role: strawberry.Private[Role]

    @strawberry.field
    def id(self) -> UUID:
        return self.role.id

    @strawberry.field
    async def person(self, info: Info) -> PersonType:
        person = await info.context.people.get_by_id(self.role.person_id)
        return PersonType.from_entity(person)

    @strawberry.field
    async def team(self, info: Info) -> TeamType:
        team = await info.context.teams.get_by_id(self.role.team_id)
        return TeamType.from_entity(team)

    @strawberry.field
    def english_title(self) -> str:
        return self.role.title_en

    @strawberry.field
    def french_title(self) -> str:
        return self.role.title_fr

    @strawberry.field
    def effort(self) -> float:
        return self.role.effort

    @strawberry.field(description='"Active" or "INACTIVE".')
    def active(self) -> str:
        return format_active(self.role.active)

    @strawberry.field
    def start_date(self, info: Info) -> str:
        return format_timestamp(self.role.start_datestamp, info.context.date_format)

    @strawberry.field(description='Formatted end date, or "Still Active".')
    def end_date(self, info: Info) -> str:
        return format_end_date(self.role.end_date, info.context.date_format)

    @strawberry.field
    def created_at(self, info: Info) -> str:
        return format_timestamp(self.role.created_at, info.context.date_format)

    @strawberry.field
    def updated_at(self, info: Info) -> str:
        return format_timestamp(self.role.updated_at, info.context.date_format)


@strawberry.input(name="RoleInput")
class RoleInput:
    person_id: UUID
    team_id: UUID
    title_en: str
    title_fr: str
    effort: float
    active: bool
    start_datestamp: datetime
    end_date: datetime | None = None

    def to_new_role(self) -> NewRole:
        """Validated insert payload. Raises ValidationError."""
        if not math.isfinite(self.effort) or self.effort < 0:
            raise ValidationError(f"effort must be a non-negative number, got {self.effort}")
        return NewRole(
            person_id=self.person_id,
            team_id=self.team_id,
            title_en=self.title_en,
            title_fr=self.title_fr,
            effort=self.effort,
            active=self.active,
            start_datestamp=self.start_datestamp,
            end_date=self.end_date,
        )
