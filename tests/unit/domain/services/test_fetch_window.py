from __future__ import annotations

import pytest

from minerwatch.domain.services.fetch_window import (
    RETENTION_WINDOW_MS,
    compute_fetch_start,
    eviction_cutoff,
)


def test_retention_window_is_one_hour() -> None:
    assert RETENTION_WINDOW_MS == 3_600_000


def test_no_cursor_starts_one_window_ago() -> None:
    now = 10_000_000
    assert compute_fetch_start(None, now) == now - RETENTION_WINDOW_MS


def test_resume_one_past_cursor_within_window() -> None:
    now = 1010 + 3_000_000
    assert compute_fetch_start(1010, now) == 1011


def test_cursor_older_than_window_is_capped() -> None:
    now = 1010 + 4_000_000
    assert compute_fetch_start(1010, now) == now - 3_600_000


@pytest.mark.parametrize(
    "cursor,now",
    [(0, 3_600_000), (5_000, 3_605_000), (1_700_000_000_000, 1_700_000_005_000)],
)
def test_start_never_before_window_and_never_at_cursor(cursor: int, now: int) -> None:
    start = compute_fetch_start(cursor, now)
    assert start >= now - RETENTION_WINDOW_MS
    assert start > cursor


def test_custom_retention_window() -> None:
    assert compute_fetch_start(None, 10_000, retention_window_ms=1_000) == 9_000
    assert eviction_cutoff(10_000, retention_window_ms=1_000) == 9_000
