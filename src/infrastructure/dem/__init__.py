"""Infrastructure adapters for the DEM bounded context.

This module provides the infrastructure layer implementations for DEM
operations: loading USGS DEM files from disk and rendering text reports.
"""

from .file_adapter import UsgsDemFileAdapter
from .report import format_report

__all__ = ["UsgsDemFileAdapter", "format_report"]
