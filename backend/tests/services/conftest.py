"""Service test fixtures — async DB, seeded users/requests, fake gateway, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so notification background tasks write to the test DB
    - RecordingGateway captures notify_* calls for ledger tests

Design Decisions:
    - SQLite in-memory: fast, no external dependency; ON CONFLICT DO NOTHING and
      ON DELETE CASCADE behave as on PostgreSQL once PRAGMA foreign_keys is on
"""

import itertools
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from request_board.db.base import Base
from request_board.infrastructure.database import (
    get_db, DatabaseSessionManager, enable_sqlite_foreign_keys,
)
from request_board.models.help_request import HelpRequest
from request_board.models.user import User
from request_board.models.user_session import UserSession
import request_board.infrastructure.database as db_module
from request_board.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def make_user(test_db):
    """Factory: insert a user (optionally with a bearer token) and return it."""
    counter = itertools.count(1)

    async def _make(name: str | None = None, token: str | None = None) -> User:
        n = next(counter)
        user = User(
            id=uuid4(),
            name=name or f"Student {n}",
            handle=f"student{n}",
            college_name="University of Wisconsin",
            college_domain="wisc.edu",
        )
        test_db.add(user)
        if token:
            test_db.add(UserSession(token=token, user_id=user.id))
        await test_db.commit()
        return user

    return _make


@pytest.fixture
def seed_request(test_db):
    """Factory: insert a request row directly, with an explicit created_at if given."""

    async def _seed(
        creator: User,
        created_at: datetime | None = None,
        title: str = "Need a hand",
        commit: bool = True,
    ) -> HelpRequest:
        request = HelpRequest(
            id=uuid4(),
            creator_id=creator.id,
            title=title,
            description="Details inside",
            location="Madison",
            city="Madison",
            is_remote=False,
            tags=[],
            urgency="low",
            created_at=created_at or datetime.now(timezone.utc),
        )
        test_db.add(request)
        if commit:
            await test_db.commit()
        return request

    return _seed


@pytest.fixture
def count_rows(test_db):
    """Count rows of a model, optionally filtered."""

    async def _count(model, *where) -> int:
        query = select(func.count()).select_from(model)
        for clause in where:
            query = query.where(clause)
        return int(await test_db.scalar(query))

    return _count


class RecordingGateway:
    """NotificationGateway fake: records events, optionally fails."""

    def __init__(self):
        self.offered: list[dict] = []
        self.withdrawn: list[dict] = []
        self.fail = False

    async def notify_help_offered(self, **event) -> None:
        if self.fail:
            raise RuntimeError("notification backend down")
        self.offered.append(event)

    async def notify_help_withdrawn(self, **event) -> None:
        if self.fail:
            raise RuntimeError("notification backend down")
        self.withdrawn.append(event)


@pytest.fixture
def gateway():
    return RecordingGateway()


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Patch db_manager for background tasks that use it directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
