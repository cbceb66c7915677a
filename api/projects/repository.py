"""
Project persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db, ids

# Columns a patch may touch; keys are interpolated into the SET clause.
UPDATABLE_COLUMNS = ("name", "description")


async def list_projects() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, description
        FROM projects
        ORDER BY id
        """
    )


async def get_project(project_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, name, description
        FROM projects
        WHERE id = $1
        """,
        project_id,
    )


async def project_exists(project_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM projects
        WHERE id = $1
        LIMIT 1
        """,
        project_id,
    )
    return row is not None


async def create_project(*, name: str, description: str) -> dict[str, Any]:
    """
    Insert a project under the next sequential id and return the new row.
    """
    pool = db.pool()
    async with pool.acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            await ids.lock_table(conn, "projects")
            new_id = await ids.next_id(conn, "projects")
            row = await conn.fetchrow(
                """
                INSERT INTO projects (id, name, description)
                VALUES ($1, $2, $3)
                RETURNING id, name, description
                """,
                new_id,
                name,
                description,
            )
    if row is None:
        raise RuntimeError("Failed to insert project.")
    return dict(row)


async def update_project(project_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply a patch. Returns the updated row, or None when no row has `project_id`.
    """
    columns = [column for column in UPDATABLE_COLUMNS if column in changes]
    if not columns:
        raise ValueError("update_project called without updatable columns.")

    assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(columns, start=2))
    return await db.fetch_one(
        f"""
        UPDATE projects
        SET {assignments}
        WHERE id = $1
        RETURNING id, name, description
        """,
        project_id,
        *(changes[column] for column in columns),
    )


async def delete_project(project_id: int) -> int:
    """
    Delete a project and densely renumber the remaining ones.

    Reports follow the renumbering through the foreign key (ON UPDATE
    CASCADE); reports of the deleted project get a NULL project_id.
    Returns the number of deleted rows.
    """
    pool = db.pool()
    async with pool.acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            # The FK cascade writes to reports, so take its lock first.
            await ids.lock_table(conn, "reports")
            await ids.lock_table(conn, "projects")
            deleted = await conn.fetch(
                """
                DELETE FROM projects
                WHERE id = $1
                RETURNING id
                """,
                project_id,
            )
            if deleted:
                await ids.renumber(conn, "projects")
    return len(deleted)
