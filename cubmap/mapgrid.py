"""The map part of a scene file: validation, copying and enclosure check."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from cubmap.config import Config, is_ws_only

_MAP_CHARS = frozenset("01NSEWD \t")
_WALKABLE = frozenset("0NSEWD")
_PLAYER_CHARS = frozenset("NSEW")
_VISITED = "x"


class MapError(ValueError):
    """The map is not valid."""


def is_map_char(c: str) -> bool:
    """True for a character that may appear in a map line."""
    return c in _MAP_CHARS


def copy_map(grid: Sequence[Sequence[str]]) -> list[list[str]]:
    """Copy ``grid`` into independent, mutable rows of characters."""
    return [list(row) for row in grid]


def is_invalid_tile(c: str) -> bool:
    """True for a tile that is outside the playable area."""
    return c in (" ", "\0")


def is_walkable(c: str) -> bool:
    """True for an open floor tile, a player start or a door."""
    return c in _WALKABLE


def flood_fill(grid: Sequence[MutableSequence[str]], x: int, y: int) -> bool:
    """Check that the open area reachable from (``x``, ``y``) is closed in.

    Walkable tiles that are reached are overwritten with ``'x'``, so the
    rows must be mutable (see :func:`copy_map`). Returns False when the
    area touches the edge of the grid or an empty tile.
    """
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not 0 <= cy < len(grid):
            return False
        row = grid[cy]
        if not 0 <= cx < len(row):
            return False
        tile = row[cx]
        if is_invalid_tile(tile):
            return False
        if not is_walkable(tile):
            continue
        row[cx] = _VISITED
        pending.extend(((cx, cy - 1), (cx, cy + 1), (cx - 1, cy), (cx + 1, cy)))
    return True


def _checked_part(line: str) -> str:
    for index, ch in enumerate(line):
        if ch in "\n\r":
            return line[:index]
    return line


def parse_map(config: Config, lines: Sequence[str], start_index: int) -> list[str]:
    """Read the map lines from ``start_index`` on into ``config``.

    Blank lines are skipped and every row is trimmed of surrounding white
    space. Exactly one player start (N, S, E or W) is required.
    """
    rows: list[str] = []
    players = 0
    for line in lines[start_index:]:
        if is_ws_only(line):
            continue
        for ch in _checked_part(line):
            if not is_map_char(ch):
                raise MapError("error, invalid character")
            if ch in _PLAYER_CHARS:
                players += 1
        rows.append(line.strip(" \t\r\n"))
    config.map = rows
    config.height = len(rows)
    config.player_count = players
    if players != 1:
        raise MapError("error, invalid number of players")
    return rows