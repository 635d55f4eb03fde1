"""Command line entry point: read and validate a scene file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from cubmap.config import Config, ConfigError, check_filename, parse_header
from cubmap.linereader import LineReader
from cubmap.mapgrid import MapError, parse_map

_PROG = "cubmap"


def read_map(path: str | Path) -> list[str]:
    """All lines of the file at ``path``, each with its line ending."""
    with open(path, "rb") as handle:
        return list(LineReader(handle.fileno()))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the scene file named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Usage: {_PROG} <map.cub>")
        return 1
    path = args[0]
    try:
        check_filename(path)
    except ConfigError as err:
        print(err)
        return 1
    try:
        lines = read_map(path)
    except OSError as err:
        print(f"open: {err.strerror or err}", file=sys.stderr)
        return 1
    if not lines:
        return 1
    config = Config()
    try:
        start = parse_header(config, lines)
        parse_map(config, lines, start)
    except (ConfigError, MapError) as err:
        print(err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())