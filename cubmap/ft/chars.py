"""Character classification and case conversion on ASCII codes.

Every function accepts either an integer character code or a
one-character string.
"""

from __future__ import annotations

CharLike = "int | str"


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def isspace(c: int | str) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code