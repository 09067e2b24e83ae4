"""Plain-text report of a decoded DEM.

Renders the header summary followed by each profile's samples, ten per line.
"""

from __future__ import annotations

from collections.abc import Iterable

from domain.dem.value_objects import DecodedFile, ElevationProfile, HeaderInfo

SAMPLES_PER_LINE = 10
NO_DESCRIPTION = "<none>"


def format_header(header: HeaderInfo, records: int) -> str:
    return "\n".join(
        [
            f"FileName   : {header.file_name}",
            f"Description: {header.description or NO_DESCRIPTION}",
            f"Rows       : {header.rows}",
            f"Columns    : {header.columns}",
            f"Records    : {records}",
        ]
    )


def _sample_lines(samples: Iterable[int]) -> list[str]:
    values = [str(z) for z in samples]
    return [
        ", ".join(values[i : i + SAMPLES_PER_LINE])
        for i in range(0, len(values), SAMPLES_PER_LINE)
    ]


def format_profile(profile: ElevationProfile) -> str:
    lines = [f"Column: {profile.column_index}", f"Points: {len(profile.samples)}"]
    lines.extend(_sample_lines(profile.samples))
    return "\n".join(lines)


def format_report(decoded: DecodedFile) -> str:
    """Return the full report: header block, then one block per profile."""
    sections = [format_header(decoded.header, len(decoded.profiles))]
    sections.extend(format_profile(p) for p in decoded.profiles)
    return "\n\n".join(sections)
