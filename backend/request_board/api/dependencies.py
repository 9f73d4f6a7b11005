"""API Dependencies — identity resolution and collaborator wiring for board routes.

Invariants:
    - Mutating routes depend on get_current_user: missing token → 401 "Missing session token",
      unresolvable token → 401 "Invalid session"
    - Read routes depend on get_optional_user: any token problem degrades to anonymous
    - Only an already-resolved AuthenticatedUser reaches the core

Design Decisions:
    - Directory and gateway provided through dependencies so tests swap them with
      app.dependency_overrides
"""

from fastapi import BackgroundTasks, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from request_board.config import get_settings
from request_board.core.domain_types import AuthenticatedUser
from request_board.core.errors import AuthenticationError
from request_board.core.gateway_protocols import NotificationGateway, UserDirectory
from request_board.infrastructure.database import get_db
from request_board.infrastructure.notification_gateway import BackgroundNotificationGateway
from request_board.infrastructure.user_directory import DatabaseUserDirectory
from request_board.services.help_offer_ledger import HelpOfferLedger
from request_board.services.like_ledger import LikeLedger
from request_board.services.request_store import RequestStore


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        return None
    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


def get_user_directory(db: AsyncSession = Depends(get_db)) -> UserDirectory:
    return DatabaseUserDirectory(db)


def get_notification_gateway(
    background_tasks: BackgroundTasks,
) -> NotificationGateway:
    return BackgroundNotificationGateway(background_tasks)


async def get_optional_user(
    authorization: str | None = Header(None),
    directory: UserDirectory = Depends(get_user_directory),
) -> AuthenticatedUser | None:
    token = bearer_token(authorization)
    if not token:
        return None
    return await directory.resolve_user(token)


async def get_current_user(
    authorization: str | None = Header(None),
    directory: UserDirectory = Depends(get_user_directory),
) -> AuthenticatedUser:
    token = bearer_token(authorization)
    if not token:
        raise AuthenticationError("Missing session token")
    user = await directory.resolve_user(token)
    if not user:
        raise AuthenticationError("Invalid session")
    return user


def get_request_store(db: AsyncSession = Depends(get_db)) -> RequestStore:
    settings = get_settings()
    return RequestStore(
        db,
        prune_threshold=settings.board_prune_threshold,
        retention_days=settings.board_retention_days,
        default_limit=settings.board_default_limit,
    )


def get_like_ledger(db: AsyncSession = Depends(get_db)) -> LikeLedger:
    return LikeLedger(db)


def get_help_offer_ledger(
    db: AsyncSession = Depends(get_db),
    notifications: NotificationGateway = Depends(get_notification_gateway),
) -> HelpOfferLedger:
    return HelpOfferLedger(db, notifications)
