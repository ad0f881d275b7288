"""Domain entity for a single response of the device's system info API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from minerwatch.domain.entities.history import HistoryFragment


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """System info payload with the history fragment split out."""

    payload: Dict[str, Any] = field(default_factory=dict)
    history: Optional[HistoryFragment] = None
