"""Unit conversions for values reported by the device."""

# The device reports GH/s multiplied by 100 and truncated to an int.
GIGA = 1e9
DEVICE_HASHRATE_SCALE = 100.0


def convert_hashrate(raw: float) -> float:
    """Convert a raw device hashrate sample to H/s."""
    return raw * GIGA / DEVICE_HASHRATE_SCALE
