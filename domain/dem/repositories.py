"""Domain Port(s) for DEM I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from .value_objects import DecodedFile


@runtime_checkable
class DEMRepository(Protocol):
    """Port for obtaining decoded DEMs from external sources.

    Implementations live in infrastructure (e.g., the USGS DEM file adapter).
    """

    def load_dem(self, file_path: Path | str) -> DecodedFile:
        """Load a DEM file and return its decoded header and profiles."""
        ...
