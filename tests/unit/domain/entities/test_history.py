from __future__ import annotations

import math

import pytest

from minerwatch.domain.entities.errors import InvalidFragmentError
from minerwatch.domain.entities.history import HistoryFragment
from minerwatch.domain.services.units import convert_hashrate


def test_to_points_converts_offsets_and_units(first_fragment) -> None:
    points = first_fragment.to_points()

    assert [p.timestamp for p in points] == [1000, 1005, 1010]
    assert [p.hashrate_10m for p in points] == pytest.approx(
        [1e9 / 100, 2e9 / 100, 3e9 / 100], abs=1e-6
    )
    assert all(p.hashrate_1h == pytest.approx(1e7) for p in points)


def test_latest_timestamp_is_absolute(first_fragment) -> None:
    assert first_fragment.latest_timestamp == 1010


def test_latest_timestamp_uses_max_offset() -> None:
    fragment = HistoryFragment(
        timestamp_base=500,
        timestamps=[30, 10, 20],
        hashrate_10m=[1, 1, 1],
        hashrate_1h=[1, 1, 1],
        hashrate_1d=[1, 1, 1],
    )
    assert fragment.latest_timestamp == 530


def test_empty_fragment() -> None:
    fragment = HistoryFragment(timestamp_base=1000)
    assert fragment.is_empty
    assert len(fragment) == 0
    assert fragment.latest_timestamp is None
    assert fragment.to_points() == []


def test_mismatched_lengths_are_rejected() -> None:
    with pytest.raises(InvalidFragmentError) as exc_info:
        HistoryFragment(
            timestamp_base=0,
            timestamps=[0, 5, 10],
            hashrate_10m=[1, 2],
            hashrate_1h=[1, 1, 1],
            hashrate_1d=[1, 1, 1],
        )
    assert exc_info.value.details["lengths"]["hashrate_10m"] == 2


@pytest.mark.parametrize("raw", [0, 1, 51234, 123456789, 0.5])
def test_convert_hashrate_exact(raw: float) -> None:
    assert math.isclose(convert_hashrate(raw), raw * 1e9 / 100, abs_tol=1e-6)
