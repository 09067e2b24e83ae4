"""DEM Bounded Context - Value Objects.

Immutable data structures produced by the DEM decoders.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.dem.layout import SAMPLE_MAX, SAMPLE_MIN


class HeaderInfo(BaseModel):
    """File-level header of a DEM (Value Object).

    Invariants:
        HI-1: columns >= 0 (number of profile records that follow)
    """

    file_name: str
    description: str = ""  # Empty when the header field is all spaces
    rows: int
    columns: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def dimensions(self) -> tuple[int, int]:
        """Return (rows, columns)."""
        return (self.rows, self.columns)


class ProfileStatus(str, Enum):
    """How decoding of a profile record ended."""

    COMPLETE = "complete"  # All declared samples decoded
    PARSE_STOPPED = "parse_stopped"  # A sample field did not parse
    BLOCKS_EXHAUSTED = "blocks_exhausted"  # Record span ran out of sample slots


class ElevationProfile(BaseModel):
    """Elevation samples of one raster column (Value Object).

    Invariants:
        EP-1: len(samples) <= declared_sample_count
        EP-2: status == COMPLETE iff len(samples) == declared_sample_count
        EP-3: every sample fits in a signed 32-bit integer
    """

    column_index: int
    declared_sample_count: int = Field(ge=0)
    samples: tuple[int, ...] = ()
    status: ProfileStatus = ProfileStatus.COMPLETE

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_samples(self) -> "ElevationProfile":
        n = len(self.samples)
        # EP-1
        if n > self.declared_sample_count:
            raise ValueError(
                f"Profile holds {n} samples but declares {self.declared_sample_count}"
            )
        # EP-2
        complete = n == self.declared_sample_count
        if complete != (self.status is ProfileStatus.COMPLETE):
            raise ValueError(
                f"status={self.status.value} inconsistent with "
                f"{n}/{self.declared_sample_count} samples"
            )
        # EP-3
        for z in self.samples:
            if not SAMPLE_MIN <= z <= SAMPLE_MAX:
                raise ValueError(f"Sample {z} outside signed 32-bit range")
        return self

    @property
    def stopped_early(self) -> bool:
        """True if fewer samples were decoded than the record declares."""
        return self.status is not ProfileStatus.COMPLETE

    def as_array(self) -> NDArray[np.int32]:
        """Return samples as a read-only int32 array."""
        arr = np.array(self.samples, dtype=np.int32)
        arr.flags.writeable = False
        return arr


class DecodedFile(BaseModel):
    """Header plus one profile per column, in decode order (Value Object).

    Invariants:
        DF-1: len(profiles) == header.columns
    """

    header: HeaderInfo
    profiles: tuple[ElevationProfile, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_profiles(self) -> "DecodedFile":
        # DF-1
        if len(self.profiles) != self.header.columns:
            raise ValueError(
                f"Expected {self.header.columns} profiles, got {len(self.profiles)}"
            )
        return self

    def truncated_profiles(self) -> tuple[ElevationProfile, ...]:
        """Return profiles that stopped before their declared sample count."""
        return tuple(p for p in self.profiles if p.stopped_early)

    def elevation_matrix(self) -> NDArray[np.float32]:
        """Return a read-only (max_samples x columns) float32 grid.

        Column j holds profile j's samples from the top; cells beyond a
        profile's length are NaN (NoData).
        """
        height = max((len(p.samples) for p in self.profiles), default=0)
        grid = np.full((height, len(self.profiles)), np.nan, dtype=np.float32)
        for j, profile in enumerate(self.profiles):
            if profile.samples:
                grid[: len(profile.samples), j] = profile.samples
        grid.flags.writeable = False
        return grid
