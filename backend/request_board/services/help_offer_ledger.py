"""Help Offer Ledger — idempotent help offers paired with creator notifications.

Invariants:
    - Self-help is rejected before any write or notification
    - A repeat offer inserts nothing and sends no second notification
    - withdraw deletes unconditionally and always dispatches "help withdrawn",
      even when no offer row existed (the gateway handles that idempotently)
    - Notification failures are logged and swallowed: the offer/withdrawal still succeeds

Design Decisions:
    - Gateway injected as a Protocol (core/gateway_protocols.py): tests pass a recording fake,
      the API passes a background-task gateway
    - Dispatch happens after commit, so a notification never refers to a rolled-back offer
"""

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from request_board.core.domain_types import RequestId, UserId
from request_board.core.errors import BadRequestError
from request_board.core.gateway_protocols import NotificationGateway
from request_board.db.statements import insert_if_absent
from request_board.models.request_help_offer import RequestHelpOffer
from request_board.services.request_store import get_request_or_404

logger = logging.getLogger(__name__)


class HelpOfferLedger:
    """Owns the request_help_offers table."""

    def __init__(self, db: AsyncSession, notifications: NotificationGateway):
        self.db = db
        self.notifications = notifications

    async def offer(self, request_id: RequestId, helper_id: UserId) -> None:
        """Record that helper offers to help; notify the creator on first offer only."""
        request = await get_request_or_404(self.db, request_id)
        if request.creator_id == helper_id:
            raise BadRequestError("You cannot help your own request")

        result = await self.db.execute(insert_if_absent(
            self.db, RequestHelpOffer,
            request_id=request_id, helper_id=helper_id,
        ))
        await self.db.commit()
        if result.rowcount == 0:
            logger.debug(
                f"Repeat help offer on {request_id} ignored",
                extra={"request_id": request_id, "user_id": helper_id},
            )
            return

        logger.info(
            f"Help offered on {request_id}",
            extra={"request_id": request_id, "user_id": helper_id},
        )
        try:
            await self.notifications.notify_help_offered(
                recipient_id=UserId(request.creator_id),
                actor_id=helper_id,
                request_id=RequestId(request.id),
                title=request.title,
                description=request.description,
            )
        except Exception as e:
            logger.warning(
                f"Help-offered notification failed for {request_id}: {e}",
                extra={"request_id": request_id},
            )

    async def withdraw(self, request_id: RequestId, helper_id: UserId) -> None:
        """Remove helper's offer (no-op if absent) and notify the creator."""
        request = await get_request_or_404(self.db, request_id)

        await self.db.execute(
            delete(RequestHelpOffer)
            .where(RequestHelpOffer.request_id == request_id)
            .where(RequestHelpOffer.helper_id == helper_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()

        logger.info(
            f"Help withdrawn on {request_id}",
            extra={"request_id": request_id, "user_id": helper_id},
        )
        try:
            await self.notifications.notify_help_withdrawn(
                recipient_id=UserId(request.creator_id),
                actor_id=helper_id,
                request_id=RequestId(request.id),
            )
        except Exception as e:
            logger.warning(
                f"Help-withdrawn notification failed for {request_id}: {e}",
                extra={"request_id": request_id},
            )
