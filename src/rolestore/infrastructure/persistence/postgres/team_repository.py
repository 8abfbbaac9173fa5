"""PostgreSQL team lookup."""

from uuid import UUID

from psycopg import AsyncConnection

from rolestore.domain.entities import Team


class PostgresTeamRepository:
    """Read-only access to the teams table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, team_id: UUID) -> Team | None:
        """Get team by id."""
        cur = await self._conn.execute(
            "SELECT id, name_en, name_fr FROM teams WHERE id = %s",
            (team_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Team(id=r[0], name_en=r[1], name_fr=r[2])
