"""Per-schema resolver context."""

from dataclasses import dataclass

from rolestore.application.lookups import PersonLookup, TeamLookup
from rolestore.application.role_store import RoleStore


@dataclass
class GraphQLContext:
    """Dependencies handed to every resolver through info.context."""

    store: RoleStore
    people: PersonLookup
    teams: TeamLookup
    date_format: str
