"""DEM Bounded Context - Decoders.

Pure decoding logic over a ByteCursor. NO filesystem access - opening files
is implemented by the infrastructure adapter under
`src/infrastructure/dem/file_adapter.py`.

Layout of a type A profile record spanning ``n`` physical blocks:

    block 0:   146-byte preamble | 146 samples x 6 bytes | 2 bytes padding
    block k>0:                     170 samples x 6 bytes | 4 bytes padding
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import BinaryIO

from pydantic import ValidationError

from domain.dem.cursor import ByteCursor
from domain.dem.errors import (
    MalformedHeaderError,
    MalformedRecordError,
    TruncatedInputError,
)
from domain.dem.fields import parse_sample, read_fixed_field, scan_ints
from domain.dem.layout import (
    BLOCK_WIDTH,
    DESCRIPTION_WIDTH,
    DIMENSIONS_OFFSET,
    FILE_NAME_WIDTH,
    FIRST_RECORD_OFFSET,
    PADDING_FIRST_BLOCK,
    PADDING_NEXT_BLOCK,
    RECORD_HEADER_WIDTH,
    SAMPLE_WIDTH,
    SAMPLES_FIRST_BLOCK,
    SAMPLES_NEXT_BLOCK,
)
from domain.dem.value_objects import (
    DecodedFile,
    ElevationProfile,
    HeaderInfo,
    ProfileStatus,
)

logger = logging.getLogger(__name__)

# Called with (expected_column, declared_column) when a record's column id
# does not match its position in the file
ColumnMismatchCallback = Callable[[int, int], None]


def _as_cursor(source: ByteCursor | bytes | BinaryIO) -> ByteCursor:
    if isinstance(source, ByteCursor):
        return source
    return ByteCursor(source)


# ---------------------------------------------------------------------------
# Block Arithmetic
# ---------------------------------------------------------------------------
def block_count(sample_count: int) -> int:
    """Number of physical blocks read for a record of ``sample_count`` samples.

    ceil(sample_count * SAMPLE_WIDTH / BLOCK_WIDTH), never less than one
    block. The preamble is not included in the byte count, so records whose
    samples overflow the first block's quota can come up short; those decode
    as BLOCKS_EXHAUSTED.
    """
    if sample_count < 0:
        raise ValueError(f"sample_count must be >= 0, got {sample_count}")
    return max(1, -(-sample_count * SAMPLE_WIDTH // BLOCK_WIDTH))


def block_capacity(blocks: int) -> int:
    """Number of sample slots available in ``blocks`` physical blocks."""
    if blocks <= 0:
        return 0
    return SAMPLES_FIRST_BLOCK + SAMPLES_NEXT_BLOCK * (blocks - 1)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
def decode_header(source: ByteCursor | bytes | BinaryIO) -> HeaderInfo:
    """Decode the file header and leave the cursor at the first record.

    Reads the file name and description from offsets 0 and 40, the
    dimensions from offset 853, then positions the cursor at offset 1024
    regardless of what else the header holds.

    Raises:
        TruncatedInputError: If the name/description fields are short
        MalformedHeaderError: If the dimensions are not two integers, or
            columns is negative
    """
    cursor = _as_cursor(source)

    file_name = read_fixed_field(cursor, FILE_NAME_WIDTH)
    description = read_fixed_field(cursor, DESCRIPTION_WIDTH)

    # Dimensions are parsed from a bounded view; the cursor is only moved once
    dims_view = cursor.peek(
        FIRST_RECORD_OFFSET - DIMENSIONS_OFFSET, offset=DIMENSIONS_OFFSET
    )
    try:
        (rows, columns), _ = scan_ints(dims_view, 2)
    except ValueError as e:
        raise MalformedHeaderError(
            f"Dimension field at offset {DIMENSIONS_OFFSET} is not two integers"
        ) from e

    try:
        info = HeaderInfo(
            file_name=file_name, description=description, rows=rows, columns=columns
        )
    except ValidationError as e:
        raise MalformedHeaderError(f"Invalid header dimensions: {e}") from e

    cursor.seek(FIRST_RECORD_OFFSET)

    logger.debug(
        "DEM header: name=%r rows=%d columns=%d", info.file_name, rows, columns
    )
    return info


# ---------------------------------------------------------------------------
# Profile Record
# ---------------------------------------------------------------------------
def _read_preamble(cursor: ByteCursor) -> tuple[int, int]:
    """Peek the record preamble; return (column_id, sample_count)."""
    view = cursor.peek(RECORD_HEADER_WIDTH)
    if not view:
        raise TruncatedInputError(RECORD_HEADER_WIDTH, 0, "record preamble")
    try:
        # row id and profile type tag are not needed
        (_row, column_id, sample_count, _profile_type), _ = scan_ints(view, 4)
    except ValueError as e:
        if len(view) < RECORD_HEADER_WIDTH:
            raise TruncatedInputError(
                RECORD_HEADER_WIDTH, len(view), "record preamble"
            ) from e
        raise MalformedRecordError(
            f"Unparseable record preamble at offset {cursor.tell()}"
        ) from e

    if sample_count < 0:
        raise MalformedRecordError(
            f"Record for column {column_id} declares {sample_count} samples"
        )
    return column_id, sample_count


def _extract_samples(
    body: bytes, blocks: int, sample_count: int
) -> tuple[list[int], ProfileStatus]:
    """Walk the record body block by block, collecting samples."""
    samples: list[int] = []
    remaining = sample_count
    pos = 0

    for block in range(blocks):
        quota = SAMPLES_NEXT_BLOCK if block else SAMPLES_FIRST_BLOCK
        for _ in range(quota):
            if remaining == 0:
                return samples, ProfileStatus.COMPLETE
            z = parse_sample(body[pos : pos + SAMPLE_WIDTH])
            pos += SAMPLE_WIDTH
            if z is None:
                return samples, ProfileStatus.PARSE_STOPPED
            samples.append(z)
            remaining -= 1
        pos += PADDING_NEXT_BLOCK if block else PADDING_FIRST_BLOCK

    if remaining == 0:
        return samples, ProfileStatus.COMPLETE
    return samples, ProfileStatus.BLOCKS_EXHAUSTED


def decode_profile(source: ByteCursor | bytes | BinaryIO) -> ElevationProfile:
    """Decode one type A profile record starting at the cursor.

    Two phases: the preamble is parsed from a non-committing peek to learn
    the sample count, then the whole record span (a whole number of
    1024-byte blocks) is read in a single committing read and decoded from
    memory. The cursor ends on the block boundary after the record.

    A sample field that does not parse ends the record early; the samples
    before it are kept and the profile is marked PARSE_STOPPED.

    Raises:
        TruncatedInputError: If the record span is not fully available
        MalformedRecordError: If the preamble cannot be parsed
    """
    cursor = _as_cursor(source)
    start = cursor.tell()

    column_id, sample_count = _read_preamble(cursor)
    blocks = block_count(sample_count)

    buf = cursor.read_exact(
        blocks * BLOCK_WIDTH, what=f"record for column {column_id}"
    )
    samples, status = _extract_samples(buf[RECORD_HEADER_WIDTH:], blocks, sample_count)

    logger.debug(
        "Record @%d: column=%d declared=%d blocks=%d decoded=%d status=%s",
        start,
        column_id,
        sample_count,
        blocks,
        len(samples),
        status.value,
    )
    return ElevationProfile(
        column_index=column_id,
        declared_sample_count=sample_count,
        samples=tuple(samples),
        status=status,
    )


# ---------------------------------------------------------------------------
# Main Service: decode_dem
# ---------------------------------------------------------------------------
def decode_dem(
    source: ByteCursor | bytes | BinaryIO,
    on_column_mismatch: ColumnMismatchCallback | None = None,
) -> DecodedFile:
    """Decode a complete DEM: the header, then exactly ``columns`` records.

    Column ids are not enforced. A record whose column id differs from its
    1-based position is logged and, if given, reported to
    ``on_column_mismatch(expected, actual)``.

    Args:
        source: Seekable binary file object, raw bytes, or a ByteCursor
        on_column_mismatch: Optional diagnostic callback

    Returns:
        DecodedFile with one ElevationProfile per header column

    Raises:
        TruncatedInputError: If the header or any record is short
        MalformedHeaderError: If the header dimensions are unparseable
        MalformedRecordError: If a record preamble is unparseable

    Example:
        >>> with open("quad.dem", "rb") as fh:
        ...     decoded = decode_dem(fh)
        >>> print(decoded.header.columns, len(decoded.profiles))
    """
    cursor = _as_cursor(source)
    header = decode_header(cursor)

    profiles: list[ElevationProfile] = []
    for i in range(header.columns):
        profile = decode_profile(cursor)

        expected = i + 1
        if profile.column_index != expected:
            logger.warning(
                "Record %d declares column %d", expected, profile.column_index
            )
            if on_column_mismatch is not None:
                on_column_mismatch(expected, profile.column_index)

        if profile.stopped_early:
            logger.info(
                "Column %d stopped early (%s): %d of %d samples",
                profile.column_index,
                profile.status.value,
                len(profile.samples),
                profile.declared_sample_count,
            )
        profiles.append(profile)

    return DecodedFile(header=header, profiles=tuple(profiles))
