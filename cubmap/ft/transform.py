"""Number conversion and building new strings out of existing ones.

Strings end at their first NUL character, if they contain one. Functions
that receive ``None`` where a string is required give back ``None``, as
the allocation-based originals give back a null result.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_NUL = "\0"
_SPACES = " \t\n\v\f\r"


def _cstr(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def atoi(s: str) -> int:
    """Parse a decimal integer after optional white space and one sign.

    Reading stops at the first non-digit; no digits at all give 0.
    """
    text = _cstr(s).lstrip(_SPACES)
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Decimal form of ``n``."""
    return str(int(n))


def count_words(s: str, c: int | str) -> int:
    """Number of non-empty runs in ``s`` separated by ``c``."""
    sep = _char(c)
    return sum(1 for part in _cstr(s).split(sep) if part)


def split(s: str, c: int | str) -> Optional[list[str]]:
    """Non-empty pieces of ``s`` between occurrences of ``c``.

    An empty ``s`` gives ``None``.
    """
    text = _cstr(s) if s is not None else ""
    if not text:
        return None
    sep = _char(c)
    return [part for part in text.split(sep) if part]


def strdup(s: Optional[str]) -> Optional[str]:
    """Copy of ``s`` up to its terminator; ``None`` stays ``None``."""
    if s is None:
        return None
    return _cstr(s)


def striteri(
    s: Optional[MutableSequence],
    func: Callable[[int, MutableSequence], object],
) -> None:
    """Call ``func(index, s)`` for every element of the mutable sequence ``s``.

    ``func`` may change ``s[index]`` in place. Iteration stops at a NUL
    element. Nothing happens when ``s`` is ``None``.
    """
    if s is None:
        return
    index = 0
    while index < len(s) and s[index] not in (_NUL, 0):
        func(index, s)
        index += 1


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """``s1`` followed by ``s2``; ``None`` if either is missing."""
    if s1 is None or s2 is None:
        return None
    return _cstr(s1) + _cstr(s2)


def strsjoin(s1: Optional[str], s2: Optional[str], c: int | str) -> Optional[str]:
    """``s1``, then the character ``c``, then ``s2``; ``None`` if a string is missing."""
    if s1 is None or s2 is None:
        return None
    return _cstr(s1) + _char(c) + _cstr(s2)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``. A size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had; when ``dst`` already fills the buffer the second value is
    ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head = _cstr(dst)
    tail = _cstr(src)
    if size == 0:
        return head, len(tail)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strmapi(
    s: Optional[str],
    func: Optional[Callable[[int, str], str]],
) -> Optional[str]:
    """New string of ``func(index, char)`` for every character of ``s``."""
    if s is None or func is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(_cstr(s)))


def strncpy(src: str, n: int) -> str:
    """First ``n`` characters of ``src``, padded with NUL up to length ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    text = _cstr(src)[:n]
    return text + _NUL * (n - len(text))


def strndup(s: str, n: int) -> str:
    """Copy of at most ``n`` characters of ``s``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _cstr(s)[:n]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` without any characters of ``charset`` at either end."""
    if s is None or charset is None:
        return None
    chars = _cstr(charset)
    if not chars:
        return _cstr(s)
    return _cstr(s).strip(chars)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]