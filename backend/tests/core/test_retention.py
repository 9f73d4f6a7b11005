"""Retention Policy — verifies the capacity boundary and the cutoff instant."""

from datetime import datetime, timedelta, timezone

from request_board.core.retention import (
    PRUNE_THRESHOLD, RETENTION_DAYS, is_over_capacity, retention_cutoff,
)


def test_defaults():
    assert PRUNE_THRESHOLD == 100
    assert RETENTION_DAYS == 14


def test_capacity_boundary_is_strict():
    assert is_over_capacity(100) is False
    assert is_over_capacity(101) is True
    assert is_over_capacity(0) is False


def test_custom_threshold():
    assert is_over_capacity(3, threshold=2) is True


def test_cutoff_is_retention_days_back():
    now = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
    assert retention_cutoff(now) == now - timedelta(days=14)
    assert retention_cutoff(now, 2) == datetime(2024, 3, 13, 12, 0, tzinfo=timezone.utc)
