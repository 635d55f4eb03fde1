"""Reading XPM pixmaps into :class:`cubmap.image.Image` objects."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, Optional, Sequence

from cubmap.colornames import lookup_color
from cubmap.ft.transform import atoi
from cubmap.image import Image

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_HEX_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """The pixmap could not be read."""


def str_to_wordtab(s: str) -> list[str]:
    """Words of ``s`` separated by spaces and tabs."""
    return [word for word in s.replace("\t", " ").split(" ") if word]


def str_str(s: str, find: str) -> Optional[int]:
    """Index of the first ``find`` in ``s``, or ``None``."""
    if not find:
        raise ValueError("search text must not be empty")
    index = s.find(find)
    return None if index < 0 else index


def str_str_quoted(s: str, find: str) -> Optional[int]:
    """Index of the first ``find`` in ``s`` that is not inside double quotes."""
    if not find:
        raise ValueError("search text must not be empty")
    quoted = False
    for pos in range(len(s) - len(find) + 1):
        if s[pos] == '"':
            quoted = not quoted
        if not quoted and s.startswith(find, pos):
            return pos
    return None


def strip_comments(text: str) -> str:
    """Blank out C-style comments outside strings, keeping the text's length."""
    while (begin := str_str_quoted(text, "/*")) is not None:
        end = text.find("*/", begin + 2)
        if end < 0:
            raise XpmError("unterminated comment")
        text = text[:begin] + " " * (end + 2 - begin) + text[end + 2:]
    while (begin := str_str_quoted(text, "//")) is not None:
        end = text.find("\n", begin + 2)
        stop = len(text) if end < 0 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def text_to_rgb(name: str, extra: Optional[str] = None) -> int:
    """Colour value of an XPM colour spec: ``#RRGGBB`` or a colour name.

    ``extra`` is the word that followed ``name``, tried as part of a
    two-word name. Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        sign, digits = match.group(1), match.group(2)
        if not digits:
            return 0
        value = int(digits, 16)
        return -value if sign == "-" else value
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Sequence[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixel rows."""
    source = iter(lines)
    header = str_to_wordtab(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = str_to_wordtab(line[cpp:])
        try:
            spec = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if spec >= len(words):
            raise XpmError(f"no colour after key in {line!r}")
        extra = words[spec + 1] if spec + 1 < len(words) else None
        key = line[:cpp]
        # Short keys are overwritten by later definitions, long ones keep the first.
        if cpp <= 2 or key not in palette:
            palette[key] = text_to_rgb(words[spec], extra)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(source, "pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} too short")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_file_to_image(path: str | Path) -> Image:
    """Read an XPM file from disk."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as err:
        raise XpmError(f"cannot read {path}: {err}") from err
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def xpm_to_image(data: Sequence[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(list(data))