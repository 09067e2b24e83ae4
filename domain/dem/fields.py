"""DEM Bounded Context - Field Readers.

Text-level primitives shared by the header and record decoders:

- read_fixed_field: fixed-width text field with leading spaces trimmed
- scan_int / scan_ints: whitespace-delimited signed decimal integers
- parse_sample: leading-integer parse of one fixed-width sample field
"""

from __future__ import annotations

import re

from domain.dem.cursor import ByteCursor

# Whitespace skipped before an integer token (matches C-locale isspace)
_WHITESPACE = b" \t\n\r\v\f"
_INT_TOKEN = re.compile(rb"[+-]?\d+")


def read_fixed_field(cursor: ByteCursor, width: int) -> str:
    """Read ``width`` bytes and strip leading spaces.

    Only leading ASCII spaces (0x20) are removed; trailing spaces are kept,
    so ``b"  abc  "`` decodes to ``"abc  "``. An all-space field decodes to
    an empty string.

    Raises:
        TruncatedInputError: If fewer than ``width`` bytes are available
    """
    raw = cursor.read_exact(width, what=f"{width}-byte field")
    return raw.lstrip(b" ").decode("ascii", errors="replace")


def scan_int(data: bytes, pos: int = 0) -> tuple[int, int]:
    """Parse one integer token from ``data`` starting at ``pos``.

    Skips any run of whitespace, then consumes an optional sign followed by
    a run of decimal digits.

    Returns:
        Tuple of (value, position just after the token)

    Raises:
        ValueError: If no integer token starts after the whitespace
    """
    n = len(data)
    while pos < n and data[pos] in _WHITESPACE:
        pos += 1
    match = _INT_TOKEN.match(data, pos)
    if match is None:
        raise ValueError(f"No integer token at offset {pos}")
    return int(match.group()), match.end()


def scan_ints(data: bytes, count: int, pos: int = 0) -> tuple[list[int], int]:
    """Parse ``count`` consecutive integer tokens (see scan_int)."""
    values: list[int] = []
    for _ in range(count):
        value, pos = scan_int(data, pos)
        values.append(value)
    return values, pos


def parse_sample(field: bytes) -> int | None:
    """Parse a sample field by its leading integer; None if there is none.

    Trailing bytes after the digits are ignored (``b"  12ab"`` -> 12).
    """
    try:
        value, _ = scan_int(field)
    except ValueError:
        return None
    return value
