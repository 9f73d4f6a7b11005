"""Retention Sweeper — load-triggered pruning of stale requests, run inline on board reads.

Invariants:
    - sweep() returns True whenever the board is over capacity, whether or not any row
      was old enough to delete (the flag means "high volume", not "deleted something")
    - Deletion is a single bulk DELETE; likes and help offers go with it via ON DELETE CASCADE
    - No batching, no dry-run, no background timer

Design Decisions:
    - Policy (threshold, cutoff) lives in core/retention.py; this class only does the IO
    - synchronize_session=False: the sweep never needs in-session objects refreshed
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from request_board.core.retention import (
    PRUNE_THRESHOLD, RETENTION_DAYS, is_over_capacity, retention_cutoff,
)
from request_board.models.help_request import HelpRequest

logger = logging.getLogger(__name__)


class RetentionSweeper:
    """Deletes requests older than the retention window once the board is over threshold."""

    def __init__(
        self,
        db: AsyncSession,
        threshold: int = PRUNE_THRESHOLD,
        retention_days: int = RETENTION_DAYS,
    ):
        self.db = db
        self.threshold = threshold
        self.retention_days = retention_days

    async def sweep(self) -> bool:
        """Prune if over capacity. Returns the autoPruneActive flag."""
        total = await self.db.scalar(
            select(func.count()).select_from(HelpRequest),
        )
        if not is_over_capacity(total or 0, self.threshold):
            return False

        cutoff = retention_cutoff(datetime.now(timezone.utc), self.retention_days)
        result = await self.db.execute(
            delete(HelpRequest)
            .where(HelpRequest.created_at < cutoff)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()

        if result.rowcount:
            logger.info(
                f"Pruned {result.rowcount} stale request(s) (board size {total})",
                extra={"pruned": result.rowcount},
            )
        return True
