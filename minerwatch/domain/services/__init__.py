from .fetch_window import RETENTION_WINDOW_MS, compute_fetch_start, eviction_cutoff
from .units import convert_hashrate

__all__ = [
    "RETENTION_WINDOW_MS",
    "compute_fetch_start",
    "convert_hashrate",
    "eviction_cutoff",
]
