"""DEM Bounded Context - Byte Cursor.

A thin wrapper over a seekable binary source. Decoders advance it with
committing reads and inspect ahead of it with non-committing peeks, so no
decoder ever has to remember and restore a position itself.
"""

from __future__ import annotations

import io
from typing import BinaryIO

from domain.dem.errors import TruncatedInputError


class ByteCursor:
    """Position into a seekable byte source.

    Parameters
    ----------
    source: bytes | BinaryIO
        Raw bytes (wrapped in ``io.BytesIO``) or an open binary file object.
        File objects must support ``seek`` and ``tell``.
    """

    def __init__(self, source: bytes | bytearray | memoryview | BinaryIO) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        if not source.seekable():
            raise ValueError("DEM source must be seekable")
        self._stream = source

    def tell(self) -> int:
        return self._stream.tell()

    def seek(self, offset: int) -> None:
        """Move to an absolute offset (may lie past the end of the source)."""
        self._stream.seek(offset, io.SEEK_SET)

    def remaining(self) -> int:
        """Number of bytes between the cursor and the end of the source."""
        here = self._stream.tell()
        end = self._stream.seek(0, io.SEEK_END)
        self._stream.seek(here, io.SEEK_SET)
        return max(0, end - here)

    def peek(self, size: int, offset: int | None = None) -> bytes:
        """Return up to ``size`` bytes without moving the cursor.

        Reads from ``offset`` if given, otherwise from the current position.
        May return fewer bytes (or none) near the end of the source.
        """
        here = self._stream.tell()
        try:
            if offset is not None:
                self._stream.seek(offset, io.SEEK_SET)
            return self._stream.read(size)
        finally:
            self._stream.seek(here, io.SEEK_SET)

    def read_exact(self, size: int, what: str = "field") -> bytes:
        """Read and commit exactly ``size`` bytes.

        Raises:
            TruncatedInputError: If fewer than ``size`` bytes are available
        """
        # Size is checked before reading so a bogus length never reaches read()
        available = self.remaining()
        if size > available:
            raise TruncatedInputError(size, available, what)
        data = self._stream.read(size)
        if len(data) < size:
            raise TruncatedInputError(size, len(data), what)
        return data
