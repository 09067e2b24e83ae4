"""DEM Bounded Context - Physical Layout Constants.

Byte offsets and widths of the USGS DEM interchange layout. These are format
constants: decoders read them directly and callers cannot override them.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Physical blocks
# ---------------------------------------------------------------------------
BLOCK_WIDTH = 1024  # Unit of bulk reads; every record starts on a block boundary

# ---------------------------------------------------------------------------
# Header (logical record A, first physical block)
# ---------------------------------------------------------------------------
FILE_NAME_WIDTH = 40
DESCRIPTION_WIDTH = 40
DIMENSIONS_OFFSET = 853  # rows, columns
FIRST_RECORD_OFFSET = 1024

# ---------------------------------------------------------------------------
# Profile records (logical record B, type A profiles only)
# ---------------------------------------------------------------------------
RECORD_HEADER_WIDTH = 146  # Preamble region at the start of every record
SAMPLE_WIDTH = 6  # One signed decimal elevation per field
SAMPLES_FIRST_BLOCK = 146
SAMPLES_NEXT_BLOCK = 170
PADDING_FIRST_BLOCK = 2
PADDING_NEXT_BLOCK = 4

# Signed 32-bit sample range
SAMPLE_MIN = -(2**31)
SAMPLE_MAX = 2**31 - 1
