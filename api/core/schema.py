"""
Table bootstrap.

Idempotent DDL run once at startup when `DB_INIT_SCHEMA` is enabled. This is
not a migration system: it only creates what is missing.
"""

from __future__ import annotations

import logging

from . import db

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS projects (
    id integer PRIMARY KEY,
    name text NOT NULL,
    description text NOT NULL DEFAULT '',
    created_at timestamptz NOT NULL DEFAULT now()
);

CREATE TABLE IF NOT EXISTS reports (
    id integer PRIMARY KEY,
    text text NOT NULL,
    project_id integer REFERENCES projects (id) ON UPDATE CASCADE ON DELETE SET NULL,
    created_at timestamptz NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS reports_project_id_idx ON reports (project_id);
"""


async def ensure_schema() -> None:
    # Without arguments asyncpg sends this as one simple query, so the
    # statements run together.
    await db.execute(SCHEMA_SQL)
    logger.info("schema_ready tables=projects,reports")
