"""Dialect-aware statements — INSERT ... ON CONFLICT DO NOTHING for PostgreSQL and SQLite.

Invariants:
    - The returned statement affects zero rows when the primary key already exists,
      so result.rowcount tells "newly inserted" apart from "already there"

Design Decisions:
    - Dialect picked from the session's bind at call time: production runs asyncpg,
      tests run aiosqlite, and both support ON CONFLICT DO NOTHING natively
    - Any other dialect is a deployment error, raised as DatabaseError
"""

from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from request_board.core.errors import DatabaseError

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def insert_if_absent(db: AsyncSession, model: type, **values: Any):
    """Build an insert for `model` that silently skips primary-key conflicts."""
    dialect = db.get_bind().dialect.name
    insert = _INSERTS.get(dialect)
    if insert is None:
        raise DatabaseError(f"dialect {dialect} has no ON CONFLICT support", "insert")
    return insert(model).values(**values).on_conflict_do_nothing()
