"""Command-line entry point: decode a DEM file and print its report.

Usage:
    usgs-dem-dump path/to/file.dem
    python -m infrastructure.dem path/to/file.dem

Exit codes:
    0   decoded and printed (even if some profiles stopped early)
    -1  missing argument, missing file, or fatal decode error
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from domain.dem.errors import DEMError

from .file_adapter import UsgsDemFileAdapter
from .report import format_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = -1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="usgs-dem-dump",
        description="Decode a USGS DEM file and print its header and profiles.",
    )
    # Optional at the argparse level so a missing path gets our own message/exit code
    parser.add_argument("path", nargs="?", help="DEM file to decode")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path is None:
        print("No input file specified.", file=sys.stderr)
        return EXIT_FAILURE

    path = Path(args.path)
    if not path.exists():
        print(f'No input file named "{path}"', file=sys.stderr)
        return EXIT_FAILURE

    print(f'Reading "{path}"...', end="", flush=True)
    try:
        decoded = UsgsDemFileAdapter().load_dem(path)
    except (DEMError, OSError) as e:
        print()
        print(f"Failed to decode {path.name}: {e}", file=sys.stderr)
        return EXIT_FAILURE
    print("Done.")

    print(format_report(decoded))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
