from __future__ import annotations

from domain.dem.value_objects import (
    DecodedFile,
    ElevationProfile,
    HeaderInfo,
    ProfileStatus,
)
from infrastructure.dem.report import format_header, format_profile, format_report


def test_header_block_with_description():
    header = HeaderInfo(file_name="QUAD", description="North", rows=4, columns=2)
    assert format_header(header, 2) == (
        "FileName   : QUAD\n"
        "Description: North\n"
        "Rows       : 4\n"
        "Columns    : 2\n"
        "Records    : 2"
    )


def test_header_block_empty_description_sentinel():
    header = HeaderInfo(file_name="QUAD", description="", rows=4, columns=0)
    assert "Description: <none>" in format_header(header, 0)


def test_profile_ten_samples_per_line():
    profile = ElevationProfile(
        column_index=3, declared_sample_count=12, samples=tuple(range(1, 13))
    )
    assert format_profile(profile) == (
        "Column: 3\n"
        "Points: 12\n"
        "1, 2, 3, 4, 5, 6, 7, 8, 9, 10\n"
        "11, 12"
    )


def test_profile_without_samples():
    profile = ElevationProfile(column_index=1, declared_sample_count=0)
    assert format_profile(profile) == "Column: 1\nPoints: 0"


def test_partial_profile_reported_as_is():
    profile = ElevationProfile(
        column_index=1,
        declared_sample_count=5,
        samples=(-1, 2),
        status=ProfileStatus.PARSE_STOPPED,
    )
    assert format_profile(profile) == "Column: 1\nPoints: 2\n-1, 2"


def test_full_report_sections():
    header = HeaderInfo(file_name="ELEV1", rows=1, columns=2)
    profiles = (
        ElevationProfile(column_index=1, declared_sample_count=1, samples=(10,)),
        ElevationProfile(column_index=2, declared_sample_count=1, samples=(20,)),
    )
    report = format_report(DecodedFile(header=header, profiles=profiles))

    sections = report.split("\n\n")
    assert len(sections) == 3
    assert sections[0].endswith("Records    : 2")
    assert sections[1] == "Column: 1\nPoints: 1\n10"
    assert sections[2] == "Column: 2\nPoints: 1\n20"
