"""Root pytest configuration for all tests.

Shared fixtures building synthetic DEM images in memory (see tests/dem_bytes.py).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.dem_bytes import dem_file


@pytest.fixture
def small_profiles() -> list[list[int]]:
    """Three columns of five samples each, including negative elevations."""
    return [
        [100, 101, 102, 103, 104],
        [-5, 0, 5, 10, 15],
        [2000, 1999, 1998, 1997, 1996],
    ]


@pytest.fixture
def small_dem(small_profiles: list[list[int]]) -> bytes:
    return dem_file(small_profiles)


@pytest.fixture
def small_dem_path(tmp_path: Path, small_dem: bytes) -> Path:
    p = tmp_path / "small.dem"
    p.write_bytes(small_dem)
    return p
