"""Role entity - links a person to a team."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Role:
    """Role held by a person on a team, with effort and active period."""

    id: UUID
    person_id: UUID
    team_id: UUID
    title_en: str
    title_fr: str
    effort: float
    active: bool
    start_datestamp: datetime
    end_date: datetime | None
    created_at: datetime
    updated_at: datetime


@dataclass
class NewRole:
    """Insert payload for a role. id and timestamps are set by the store."""

    person_id: UUID
    team_id: UUID
    title_en: str
    title_fr: str
    effort: float
    active: bool
    start_datestamp: datetime
    end_date: datetime | None = None

    def to_role(self, role_id: UUID, now: datetime) -> Role:
        return Role(
            id=role_id,
            person_id=self.person_id,
            team_id=self.team_id,
            title_en=self.title_en,
            title_fr=self.title_fr,
            effort=self.effort,
            active=self.active,
            start_datestamp=self.start_datestamp,
            end_date=self.end_date,
            created_at=now,
            updated_at=now,
        )
