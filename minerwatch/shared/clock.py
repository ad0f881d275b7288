"""Wall-clock helpers expressed in epoch milliseconds."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], int]


def now_ms() -> int:
    """Return the current UTC time as integer milliseconds since epoch."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)
