"""Scene description header: texture paths and floor/ceiling colours.

A scene file starts with six identifier lines, in any order and separated
by blank lines if wanted::

    NO ./textures/north.xpm
    SO ./textures/south.xpm
    WE ./textures/west.xpm
    EA ./textures/east.xpm
    F 220,100,0
    C 225,30,0

and continues with the map itself, which :mod:`cubmap.mapgrid` reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

from cubmap.ft.chars import isdigit

VALID_CHARS = "01NSEWD \n"
TILE_SIZE = 32

TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
COLOR_KEYS = ("F", "C")
_HEADER_KEYS = TEXTURE_KEYS + COLOR_KEYS
_TEXTURE_ATTRS = {"NO": "no_path", "SO": "so_path", "WE": "we_path", "EA": "ea_path"}
_BLANKS = " \t"
_WHITESPACE = " \t\r\n"


class Key(IntEnum):
    """Keyboard key symbols the game reacts to."""

    ESCAPE = 0xFF1B
    W_LOWER = 0x0077
    A_LOWER = 0x0061
    S_LOWER = 0x0073
    D_LOWER = 0x0064
    A = 0x0041
    D = 0x0044
    W = 0x0057
    S = 0x0053


class ConfigError(ValueError):
    """The scene file or its header is not valid."""


@dataclass(frozen=True)
class Color:
    """An RGB colour; a component that could not be read is -1."""

    r: int
    g: int
    b: int


@dataclass
class Config:
    """Everything read from a scene file."""

    no_path: Optional[str] = None
    so_path: Optional[str] = None
    we_path: Optional[str] = None
    ea_path: Optional[str] = None
    floor: Optional[Color] = None
    ceiling: Optional[Color] = None
    map: list[str] = field(default_factory=list)
    height: int = 0
    player_count: int = 0

    def is_complete(self) -> bool:
        """True once all four textures and both colours are set."""
        return all(
            value is not None
            for value in (
                self.no_path,
                self.so_path,
                self.we_path,
                self.ea_path,
                self.floor,
                self.ceiling,
            )
        )


def check_filename(filename: str) -> str:
    """Return ``filename`` if its last extension is ``.cub``; raise otherwise."""
    dot = filename.rfind(".")
    if dot < 0 or filename[dot:] != ".cub":
        raise ConfigError("Invalid file name")
    return filename


def is_ws_only(line: str) -> bool:
    """True when ``line`` holds nothing but spaces, tabs and line endings."""
    return all(ch in _WHITESPACE for ch in line)


def _split_key(line: str) -> Optional[tuple[str, str]]:
    text = line.lstrip(_BLANKS)
    for key in _HEADER_KEYS:
        width = len(key)
        if text.startswith(key) and text[width:width + 1] in (" ", "\t"):
            return key, text[width:]
    return None


def is_header_line(line: str) -> bool:
    """True when ``line`` starts with one of the six identifiers and a blank."""
    return _split_key(line) is not None


def parse_header_line(config: Config, line: str) -> None:
    """Record the texture or colour that ``line`` defines in ``config``."""
    match = _split_key(line)
    if match is None:
        raise ConfigError(f"Error: Unknown identifier in {line.rstrip()!r}")
    key, rest = match
    if key in TEXTURE_KEYS:
        parse_texture(config, key, rest)
    else:
        parse_color(config, key, rest)


def parse_texture(config: Config, key: str, after_key: str) -> None:
    """Set the texture path for ``key`` from the text after the identifier."""
    attr = _TEXTURE_ATTRS.get(key)
    if attr is None:
        raise ConfigError(f"Error: Unknown texture {key}")
    if getattr(config, attr) is not None:
        raise ConfigError(f"Error: Duplicate {key}")
    path = after_key.strip(_WHITESPACE)
    if len(path) < 5 or not path.endswith(".xpm"):
        raise ConfigError(f"Error: {key} must be a .xpm file")
    setattr(config, attr, path)


def _read_component(text: str, pos: int) -> tuple[int, int]:
    while text[pos:pos + 1] == " ":
        pos += 1
    if pos >= len(text) or not isdigit(text[pos]):
        return -1, pos
    value = 0
    while pos < len(text) and isdigit(text[pos]):
        value = value * 10 + ord(text[pos]) - ord("0")
        pos += 1
    if value > 255:
        return -1, pos
    return value, pos


def parse_color(config: Config, key: str, after_key: str) -> None:
    """Set the floor (``F``) or ceiling (``C``) colour from ``R,G,B`` text.

    Components outside 0..255 or missing are stored as -1; text after the
    third component is ignored.
    """
    if key not in COLOR_KEYS:
        raise ConfigError(f"Error: Unknown colour {key}")
    attr = "floor" if key[0] == "F" else "ceiling"
    if getattr(config, attr) is not None:
        raise ConfigError(f"Error: Duplicate {key}")
    text = after_key.lstrip(_BLANKS)
    components = []
    pos = 0
    for index in range(3):
        value, pos = _read_component(text, pos)
        components.append(value)
        if index < 2:
            if text[pos:pos + 1] != ",":
                raise ConfigError(f"Error: Invalid {key} format")
            pos += 1
    setattr(config, attr, Color(*components))


def parse_header(config: Config, lines: Sequence[str]) -> int:
    """Read the identifier lines into ``config``.

    Returns the index of the first line of the map, past any blank lines.
    """
    index = 0
    while index < len(lines) and not config.is_complete():
        line = lines[index]
        if is_ws_only(line):
            index += 1
            continue
        if not is_header_line(line):
            break
        parse_header_line(config, line)
        index += 1
    if not config.is_complete():
        raise ConfigError("Error: Missing texture or color.")
    while index < len(lines) and is_ws_only(lines[index]):
        index += 1
    return index