"""Like Ledger — toggle-style likes on board requests.

Invariants:
    - toggle flips membership: delete the (request, user) row if present, else insert it
    - Delete-then-insert runs in one transaction; the insert skips PK conflicts, so two
      racing toggles never surface a duplicate-key error
    - likeCount is re-read after the commit (may lag `liked` under concurrent writers)
    - Toggling on a missing request raises ResourceNotFoundError

Design Decisions:
    - No explicit like/unlike: callers can only flip, never request a state
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from request_board.core.domain_types import RequestId, UserId
from request_board.db.statements import insert_if_absent
from request_board.models.request_like import RequestLike
from request_board.schemas.request import LikeToggleResult
from request_board.services.request_store import get_request_or_404

logger = logging.getLogger(__name__)


class LikeLedger:
    """Owns the request_likes table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def count(self, request_id: RequestId) -> int:
        total = await self.db.scalar(
            select(func.count())
            .select_from(RequestLike)
            .where(RequestLike.request_id == request_id),
        )
        return int(total or 0)

    async def toggle(self, request_id: RequestId, user_id: UserId) -> LikeToggleResult:
        """Flip the user's like on a request and return the fresh count."""
        await get_request_or_404(self.db, request_id)

        removed = await self.db.execute(
            delete(RequestLike)
            .where(RequestLike.request_id == request_id)
            .where(RequestLike.user_id == user_id)
            .execution_options(synchronize_session=False),
        )
        liked = removed.rowcount == 0
        if liked:
            await self.db.execute(insert_if_absent(
                self.db, RequestLike, request_id=request_id, user_id=user_id,
            ))
        await self.db.commit()

        like_count = await self.count(request_id)
        logger.debug(
            f"Like toggled on {request_id}: liked={liked} count={like_count}",
            extra={"request_id": request_id, "user_id": user_id},
        )
        return LikeToggleResult(like_count=like_count, liked=liked)
