"""User Directory — resolves bearer tokens to board identities.

Invariants:
    - Unknown or expired tokens resolve to None (never raise)
    - Only {id, is_admin} leaves this module; the core never sees tokens

Design Decisions:
    - Token lookup against user_sessions: the auth collaborator issues the rows,
      this module only reads them
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from request_board.core.domain_types import AuthenticatedUser, UserId
from request_board.models.user import User
from request_board.models.user_session import UserSession

logger = logging.getLogger(__name__)


def _is_expired(expires_at: datetime | None, now: datetime) -> bool:
    if expires_at is None:
        return False
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at <= now


class DatabaseUserDirectory:
    """UserDirectory backed by the users and user_sessions tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve_user(self, token: str) -> AuthenticatedUser | None:
        result = await self.db.execute(
            select(User.id, User.is_admin, UserSession.expires_at)
            .join(UserSession, UserSession.user_id == User.id)
            .where(UserSession.token == token),
        )
        row = result.first()
        if row is None:
            return None
        if _is_expired(row.expires_at, datetime.now(timezone.utc)):
            logger.debug("Expired session token presented")
            return None
        return AuthenticatedUser(id=UserId(row.id), is_admin=bool(row.is_admin))
