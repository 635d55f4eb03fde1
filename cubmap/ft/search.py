"""String length, search, comparison and concatenation.

Strings end at their first NUL character, if they contain one. Search
functions return an index into the string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

_NUL = "\0"


def _cstr(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def strlen(s: Optional[str]) -> int:
    """Length of ``s``; ``None`` counts as empty."""
    if s is None:
        return 0
    return len(_cstr(s))


def strchr(s: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL ``c`` finds the end of the string."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL ``c`` finds the end of the string."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(s1: str, s2: str, limit: Optional[int]) -> int:
    pairs = zip_longest(_cstr(s1), _cstr(s2), fillvalue=_NUL)
    for i, (a, b) in enumerate(pairs):
        if limit is not None and i >= limit:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(s1: Optional[str], s2: Optional[str]) -> int:
    """Difference of the first differing character codes, 0 if equal.

    When either string is ``None`` the result is 0.
    """
    if s1 is None or s2 is None:
        return 0
    return _compare(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    return _compare(s1, s2, n)


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` wholly inside the first ``n`` characters of ``haystack``.

    An empty needle is found at 0.
    """
    big = _cstr(haystack)
    little = _cstr(needle)
    if not little:
        return 0
    if n <= 0:
        return None
    index = big[:n].find(little)
    return None if index < 0 else index


def strcpy(src: str) -> str:
    """Return a copy of ``src`` up to its terminator."""
    return _cstr(src)


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to ``dest``."""
    return _cstr(dest) + _cstr(src)