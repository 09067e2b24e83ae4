"""DEM Bounded Context - Error Hierarchy.

Custom exceptions for DEM decoding. Fatal conditions are raised; a sample
field that fails to parse is not an error and is reported through
``ElevationProfile.status`` instead.
"""

from __future__ import annotations


class DEMError(Exception):
    """Base error for DEM operations."""


class TruncatedInputError(DEMError):
    """Fewer bytes were available than a fixed-width read requires.

    Attributes:
        expected: Number of bytes the read required
        available: Number of bytes actually available
    """

    def __init__(self, expected: int, available: int, what: str = "field") -> None:
        self.expected = expected
        self.available = available
        super().__init__(
            f"Truncated input reading {what}: expected {expected} bytes, "
            f"got {available}"
        )


class MalformedHeaderError(DEMError):
    """Header dimension field does not hold two integers."""


class MalformedRecordError(DEMError):
    """Profile record preamble is unparseable or inconsistent."""


class InsufficientMemoryError(DEMError):
    """File exceeds the configured memory budget."""
