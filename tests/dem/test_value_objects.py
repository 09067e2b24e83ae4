"""Tests for DEM value object invariants."""

from __future__ import annotations

import math

import numpy as np
import pytest
from pydantic import ValidationError

from domain.dem.value_objects import (
    DecodedFile,
    ElevationProfile,
    HeaderInfo,
    ProfileStatus,
)


def make_header(columns: int = 2) -> HeaderInfo:
    return HeaderInfo(file_name="ELEV1", description="", rows=3, columns=columns)


# ===========================================================================
# HeaderInfo
# ===========================================================================
def test_header_dimensions():
    assert make_header(2).dimensions == (3, 2)


def test_header_negative_columns_rejected():
    with pytest.raises(ValidationError):
        HeaderInfo(file_name="x", rows=1, columns=-1)


def test_header_is_frozen():
    header = make_header()
    with pytest.raises(ValidationError):
        header.rows = 10


# ===========================================================================
# ElevationProfile
# ===========================================================================
def test_profile_complete():
    p = ElevationProfile(column_index=1, declared_sample_count=3, samples=(1, 2, 3))
    assert p.status is ProfileStatus.COMPLETE
    assert not p.stopped_early


def test_profile_more_samples_than_declared_rejected():
    with pytest.raises(ValidationError):
        ElevationProfile(column_index=1, declared_sample_count=1, samples=(1, 2))


def test_profile_short_must_not_claim_complete():
    with pytest.raises(ValidationError):
        ElevationProfile(column_index=1, declared_sample_count=3, samples=(1,))


def test_profile_full_must_not_claim_stopped():
    with pytest.raises(ValidationError):
        ElevationProfile(
            column_index=1,
            declared_sample_count=1,
            samples=(1,),
            status=ProfileStatus.PARSE_STOPPED,
        )


def test_profile_partial_is_stopped_early():
    p = ElevationProfile(
        column_index=1,
        declared_sample_count=3,
        samples=(1,),
        status=ProfileStatus.PARSE_STOPPED,
    )
    assert p.stopped_early


def test_profile_sample_out_of_int32_rejected():
    with pytest.raises(ValidationError):
        ElevationProfile(column_index=1, declared_sample_count=1, samples=(2**31,))


def test_profile_as_array_is_readonly_int32():
    p = ElevationProfile(column_index=1, declared_sample_count=2, samples=(-4, 9))
    arr = p.as_array()
    assert arr.dtype == np.int32
    assert arr.tolist() == [-4, 9]
    with pytest.raises(ValueError):
        arr[0] = 1


# ===========================================================================
# DecodedFile
# ===========================================================================
def test_decoded_file_profile_count_must_match_columns():
    p = ElevationProfile(column_index=1, declared_sample_count=0)
    with pytest.raises(ValidationError):
        DecodedFile(header=make_header(2), profiles=(p,))


def test_elevation_matrix_pads_with_nan():
    profiles = (
        ElevationProfile(column_index=1, declared_sample_count=3, samples=(1, 2, 3)),
        ElevationProfile(
            column_index=2,
            declared_sample_count=3,
            samples=(7,),
            status=ProfileStatus.PARSE_STOPPED,
        ),
    )
    decoded = DecodedFile(header=make_header(2), profiles=profiles)

    grid = decoded.elevation_matrix()
    assert grid.shape == (3, 2)
    assert grid.dtype == np.float32
    assert grid[:, 0].tolist() == [1.0, 2.0, 3.0]
    assert grid[0, 1] == 7.0
    assert math.isnan(grid[1, 1]) and math.isnan(grid[2, 1])
    assert not grid.flags.writeable
    assert decoded.truncated_profiles() == (profiles[1],)


def test_elevation_matrix_empty_file():
    decoded = DecodedFile(header=make_header(0))
    assert decoded.elevation_matrix().shape == (0, 0)
