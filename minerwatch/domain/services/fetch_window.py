"""Computation of the time range requested on each poll."""

from __future__ import annotations

from typing import Optional

from minerwatch.shared.consts import (
    DEFAULT_RETENTION_WINDOW_SECONDS,
    MILLISECONDS_PER_SECOND,
)

RETENTION_WINDOW_MS = DEFAULT_RETENTION_WINDOW_SECONDS * MILLISECONDS_PER_SECOND


def compute_fetch_start(
    cursor: Optional[int],
    now: int,
    retention_window_ms: int = RETENTION_WINDOW_MS,
) -> int:
    """
    Return the start timestamp for the next history request.

    Resumes one millisecond past the cursor so the last merged point is not
    delivered again, but never reaches further back than one retention
    window, which bounds the request size after a long disconnect.

    Args:
        cursor: Timestamp of the newest merged point, or None if nothing
            has been merged yet.
        now: Current time in epoch milliseconds.
        retention_window_ms: Length of the retention window.

    Returns:
        Start timestamp in epoch milliseconds.
    """
    one_window_ago = now - retention_window_ms
    if cursor is None:
        return one_window_ago
    return max(cursor + 1, one_window_ago)


def eviction_cutoff(now: int, retention_window_ms: int = RETENTION_WINDOW_MS) -> int:
    """Oldest timestamp still kept in the buffer at time ``now``."""
    return now - retention_window_ms
