"""USGS DEM file adapter for DEMRepository.

Implements loading of DEM interchange files from disk, returning a domain
DecodedFile Value Object.

Lifecycle (to avoid resource leaks):
1) Validate the path and pre-flight the file size against the budget
2) Open the file in binary mode with a context manager
3) Decode the header and every profile record (domain decoders)
4) Exit the context to release the file handle
5) Return DecodedFile
"""

from __future__ import annotations

import logging
from pathlib import Path

from domain.dem.decoders import ColumnMismatchCallback, decode_dem
from domain.dem.errors import InsufficientMemoryError, TruncatedInputError
from domain.dem.layout import FIRST_RECORD_OFFSET
from domain.dem.value_objects import DecodedFile

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


class UsgsDemFileAdapter:
    """Infrastructure adapter for loading USGS DEM files.

    Parameters
    ----------
    max_bytes: int | None
        Optional budget for the file size. Files larger than this raise
        InsufficientMemoryError before anything is read.
    on_column_mismatch: ColumnMismatchCallback | None
        Optional diagnostic callback passed through to decode_dem.
    """

    def __init__(
        self,
        max_bytes: int | None = None,
        on_column_mismatch: ColumnMismatchCallback | None = None,
    ) -> None:
        self.max_bytes = max_bytes
        self.on_column_mismatch = on_column_mismatch

    def load_dem(self, file_path: Path | str) -> DecodedFile:
        """Load a DEM file and return its decoded header and profiles."""
        path = Path(file_path)

        # Check existence first to ensure missing files surface as FileNotFoundError
        if not path.exists():
            raise FileNotFoundError(str(path))

        try:
            st = path.stat()
        except OSError as e:
            # Log only filename, errno, and strerror to avoid leaking absolute paths
            logger.error(
                "Failed to stat %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise

        if st.st_size == 0:
            raise TruncatedInputError(FIRST_RECORD_OFFSET, 0, "header (empty file)")
        if self.max_bytes is not None and st.st_size > self.max_bytes:
            raise InsufficientMemoryError(
                f"File size {st.st_size}B exceeds memory budget {self.max_bytes}B"
            )

        try:
            with path.open("rb") as fh:
                decoded = decode_dem(fh, on_column_mismatch=self.on_column_mismatch)
        except PermissionError as e:
            # Re-raise with filename only to avoid leaking full path in logs
            raise PermissionError(path.name) from e
        except MemoryError as e:
            raise InsufficientMemoryError("Insufficient memory to decode DEM") from e

        truncated = len(decoded.truncated_profiles())
        if truncated:
            logger.warning(
                "DEM %s: %d of %d profiles stopped early",
                path.name,
                truncated,
                len(decoded.profiles),
            )
        logger.info(
            "DEM %s: Loaded %dx%d (%d profiles)",
            path.name,
            decoded.header.rows,
            decoded.header.columns,
            len(decoded.profiles),
        )
        return decoded
