"""Retention Policy — decides when the board is over capacity and what counts as stale.

Invariants:
    - Pruning triggers strictly above PRUNE_THRESHOLD (100 requests → no prune, 101 → prune)
    - Stale means created_at strictly older than now - RETENTION_DAYS
    - Both functions are pure; the shell supplies counts and the clock

Design Decisions:
    - Load-triggered, not scheduled: the only signal is the current row count
"""

from datetime import datetime, timedelta

PRUNE_THRESHOLD: int = 100
RETENTION_DAYS: int = 14


def is_over_capacity(total: int, threshold: int = PRUNE_THRESHOLD) -> bool:
    """True when the board holds more requests than the threshold."""
    return total > threshold


def retention_cutoff(now: datetime, retention_days: int = RETENTION_DAYS) -> datetime:
    """Requests created before this instant are eligible for pruning."""
    return now - timedelta(days=retention_days)
