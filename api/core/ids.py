"""
Sequential id allocation and dense renumbering.

Ids of `projects` and `reports` are kept as the dense sequence 1..N. Both
helpers take an open connection and must run inside a transaction that holds
the table lock (see `lock_table`), otherwise concurrent writers can observe or
allocate the same numbers. Transactions that touch both tables lock
`reports` before `projects`.
"""

from __future__ import annotations

from collections.abc import Iterable

import asyncpg

# Ids are stored in `integer` columns.
MIN_ID = -2_147_483_648
MAX_ID = 2_147_483_647

# Table names are interpolated into SQL, so only these are accepted.
_TABLES = frozenset({"projects", "reports"})


def _checked(table: str) -> str:
    if table not in _TABLES:
        raise ValueError(f"Unknown table: {table!r}")
    return table


def dense_renumbering(ids: Iterable[int]) -> list[tuple[int, int]]:
    """
    Return the (old_id, new_id) moves that make `ids` the sequence 1..N.

    Moves are listed in ascending old-id order and rows already in place are
    skipped. Applying them in that order never collides: each row moves down
    and every lower number has been settled before it.
    """
    moves: list[tuple[int, int]] = []
    for new_id, old_id in enumerate(sorted(ids), start=1):
        if old_id != new_id:
            moves.append((old_id, new_id))
    return moves


async def lock_table(conn: asyncpg.Connection, table: str) -> None:
    # Blocks concurrent writers, still allows plain reads.
    await conn.execute(f"LOCK TABLE {_checked(table)} IN SHARE ROW EXCLUSIVE MODE")


async def next_id(conn: asyncpg.Connection, table: str) -> int:
    row = await conn.fetchrow(f"SELECT COALESCE(MAX(id), 0) + 1 AS next_id FROM {_checked(table)}")
    return int(row["next_id"])


async def renumber(conn: asyncpg.Connection, table: str) -> int:
    """
    Densely renumber `table`. Returns the number of rows that moved.
    """
    table = _checked(table)
    rows = await conn.fetch(f"SELECT id FROM {table} ORDER BY id")
    moves = dense_renumbering(int(r["id"]) for r in rows)
    if moves:
        # executemany runs the statements in list order.
        await conn.executemany(f"UPDATE {table} SET id = $2 WHERE id = $1", moves)
    return len(moves)
