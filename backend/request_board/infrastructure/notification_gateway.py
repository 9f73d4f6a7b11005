"""Notification Gateway — best-effort inbox writes for help-offer events.

Invariants:
    - notify_* never raise and never block the caller: work is queued as a FastAPI
      background task that runs after the response is sent
    - Background tasks open their own DB session (the request session is closed by then)
    - "help offered" writes one request_help row for the creator; skipped when
      recipient == actor
    - "help withdrawn" deletes matching request_help rows; deleting nothing is fine

Design Decisions:
    - BackgroundTasks over a queue/worker: fire-and-forget with no extra process
      (no retry, no dead-letter queue: a lost notification is acceptable)
    - HelpNotificationWriter takes a session so it can be tested without the gateway
"""

import logging

from fastapi import BackgroundTasks
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from request_board.core.domain_types import NotificationType, RequestId, UserId
from request_board.core.notification_preview import build_help_preview
from request_board.models.notification import Notification

logger = logging.getLogger(__name__)


class HelpNotificationWriter:
    """Persists request_help notifications."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def record_offered(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        request_id: RequestId,
        title: str,
        description: str,
    ) -> bool:
        """Insert the inbox row. Returns False when skipped (self-notification)."""
        if recipient_id == actor_id:
            return False
        self.db.add(Notification(
            user_id=recipient_id,
            actor_id=actor_id,
            type=NotificationType.REQUEST_HELP.value,
            message_id=request_id,
            message_preview=build_help_preview(title, description),
            context_id=request_id,
        ))
        await self.db.commit()
        return True

    async def clear_offered(
        self, recipient_id: UserId, actor_id: UserId, request_id: RequestId,
    ) -> int:
        """Delete the inbox rows for this (recipient, actor, request). Returns rows removed."""
        result = await self.db.execute(
            delete(Notification)
            .where(Notification.user_id == recipient_id)
            .where(Notification.actor_id == actor_id)
            .where(Notification.type == NotificationType.REQUEST_HELP.value)
            .where(Notification.context_id == request_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        return result.rowcount


async def _record_in_background(**event) -> None:
    """Background task: write the help-offered notification with its own session."""
    from request_board.infrastructure import database

    if not database.db_manager:
        logger.error("Cannot record notification: database not initialized")
        return
    try:
        async with database.db_manager.session() as db:
            await HelpNotificationWriter(db).record_offered(**event)
    except Exception as e:
        logger.error(
            f"Help-offered notification dropped: {e}",
            extra={"request_id": event.get("request_id")},
        )


async def _clear_in_background(**event) -> None:
    """Background task: remove help-offered notifications with its own session."""
    from request_board.infrastructure import database

    if not database.db_manager:
        logger.error("Cannot clear notification: database not initialized")
        return
    try:
        async with database.db_manager.session() as db:
            await HelpNotificationWriter(db).clear_offered(**event)
    except Exception as e:
        logger.error(
            f"Help-withdrawn notification dropped: {e}",
            extra={"request_id": event.get("request_id")},
        )


class BackgroundNotificationGateway:
    """NotificationGateway that defers every write to a FastAPI background task."""

    def __init__(self, background_tasks: BackgroundTasks):
        self._tasks = background_tasks

    async def notify_help_offered(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        request_id: RequestId,
        title: str,
        description: str,
    ) -> None:
        self._tasks.add_task(
            _record_in_background,
            recipient_id=recipient_id, actor_id=actor_id,
            request_id=request_id, title=title, description=description,
        )

    async def notify_help_withdrawn(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        request_id: RequestId,
    ) -> None:
        self._tasks.add_task(
            _clear_in_background,
            recipient_id=recipient_id, actor_id=actor_id, request_id=request_id,
        )
