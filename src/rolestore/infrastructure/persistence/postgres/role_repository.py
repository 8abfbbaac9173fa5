"""PostgreSQL role repository implementation."""

from collections.abc import Sequence
from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from rolestore.domain.entities import Role

_COLUMNS = (
    "id, person_id, team_id, title_en, title_fr, effort, active, "
    "start_datestamp, end_date, created_at, updated_at"
)


def _row_to_role(r: Sequence) -> Role:
    return Role(
        id=r[0],
        person_id=r[1],
        team_id=r[2],
        title_en=r[3],
        title_fr=r[4],
        effort=float(r[5]),
        active=r[6],
        start_datestamp=r[7],
        end_date=r[8],
        created_at=r[9],
        updated_at=r[10],
    )


class PostgresRoleRepository:
    """Role repository implementation over the roles table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, role: Role) -> Role:
        """Insert role and return the stored row."""
        cur = await self._conn.execute(
            f"INSERT INTO roles ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s) "
            f"RETURNING {_COLUMNS}",
            (
                role.id,
                role.person_id,
                role.team_id,
                role.title_en,
                role.title_fr,
                role.effort,
                role.active,
                role.start_datestamp,
                role.end_date,
                role.created_at,
                role.updated_at,
            ),
        )
        r = await cur.fetchone()
        return _row_to_role(r)

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM roles WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)

    async def first_for_person(self, person_id: UUID) -> Role | None:
        """Get the first role stored for a person."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM roles WHERE person_id = %s LIMIT 1",
            (person_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)

    async def list_all(self) -> list[Role]:
        """List all roles in storage order."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM roles")
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def list_by_team(self, team_id: UUID) -> list[Role]:
        """List roles on a team."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM roles WHERE team_id = %s",
            (team_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def list_by_person(self, person_id: UUID) -> list[Role]:
        """List roles held by a person."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM roles WHERE person_id = %s",
            (person_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_role(r) for r in rows]

    async def update(self, role: Role, updated_at: datetime) -> Role | None:
        """Replace the mutable fields of a role. None when no row has role.id."""
        cur = await self._conn.execute(
            "UPDATE roles SET person_id=%s, team_id=%s, title_en=%s, title_fr=%s, "
            "effort=%s, active=%s, start_datestamp=%s, end_date=%s, "
            "updated_at=GREATEST(%s, created_at) "
            f"WHERE id=%s RETURNING {_COLUMNS}",
            (
                role.person_id,
                role.team_id,
                role.title_en,
                role.title_fr,
                role.effort,
                role.active,
                role.start_datestamp,
                role.end_date,
                updated_at,
                role.id,
            ),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_role(r)

    async def lock_person(self, person_id: UUID) -> None:
        """Take a transaction-scoped advisory lock keyed on person_id."""
        await self._conn.execute(
            "SELECT pg_advisory_xact_lock(hashtextextended(%s::text, 0))",
            (str(person_id),),
        )
