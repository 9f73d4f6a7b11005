"""Database Infrastructure — SQLAlchemy Base and dialect-aware statement helpers.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
