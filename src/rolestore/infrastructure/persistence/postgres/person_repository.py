"""PostgreSQL person lookup."""

from uuid import UUID

from psycopg import AsyncConnection

from rolestore.domain.entities import Person


class PostgresPersonRepository:
    """Read-only access to the people table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, person_id: UUID) -> Person | None:
        """Get person by id."""
        cur = await self._conn.execute(
            "SELECT id, given_name, family_name, email FROM people WHERE id = %s",
            (person_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Person(id=r[0], given_name=r[1], family_name=r[2], email=r[3])
