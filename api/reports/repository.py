"""
Report persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db, ids

UPDATABLE_COLUMNS = ("text", "project_id")


async def list_reports() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, text, project_id
        FROM reports
        ORDER BY id
        """
    )


async def get_report(report_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, text, project_id
        FROM reports
        WHERE id = $1
        """,
        report_id,
    )


async def list_reports_by_project(project_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, text, project_id
        FROM reports
        WHERE project_id = $1
        ORDER BY id
        """,
        project_id,
    )


async def create_report(*, text: str, project_id: int) -> dict[str, Any] | None:
    """
    Insert a report under the next sequential id.

    Returns None (and inserts nothing) when the project does not exist. The
    reports lock is taken before the project row is key-share locked, the same
    order `delete_project` uses.
    """
    pool = db.pool()
    async with pool.acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            await ids.lock_table(conn, "reports")
            project = await conn.fetchrow(
                """
                SELECT id
                FROM projects
                WHERE id = $1
                FOR KEY SHARE
                """,
                project_id,
            )
            if project is None:
                return None

            new_id = await ids.next_id(conn, "reports")
            row = await conn.fetchrow(
                """
                INSERT INTO reports (id, text, project_id)
                VALUES ($1, $2, $3)
                RETURNING id, text, project_id
                """,
                new_id,
                text,
                project_id,
            )
    if row is None:
        raise RuntimeError("Failed to insert report.")
    return dict(row)


async def update_report(report_id: int, changes: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply a patch. Returns the updated row, or None when no row has `report_id`.
    """
    columns = [column for column in UPDATABLE_COLUMNS if column in changes]
    if not columns:
        raise ValueError("update_report called without updatable columns.")

    assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(columns, start=2))
    return await db.fetch_one(
        f"""
        UPDATE reports
        SET {assignments}
        WHERE id = $1
        RETURNING id, text, project_id
        """,
        report_id,
        *(changes[column] for column in columns),
    )


async def delete_report(report_id: int) -> int:
    """
    Delete a report and densely renumber the remaining ones.
    Returns the number of deleted rows.
    """
    pool = db.pool()
    async with pool.acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            await ids.lock_table(conn, "reports")
            deleted = await conn.fetch(
                """
                DELETE FROM reports
                WHERE id = $1
                RETURNING id
                """,
                report_id,
            )
            if deleted:
                await ids.renumber(conn, "reports")
    return len(deleted)
