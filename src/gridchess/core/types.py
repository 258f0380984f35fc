"""Coordinate type alias and square-name helpers.

Squares are addressed by zero-based ``(col, row)`` pairs; row 0 is White's
home row.  Names use bijective base-26 column letters so boards wider than
26 columns stay addressable:

    (0, 0) -> 'a1', (25, 1) -> 'z2', (26, 0) -> 'aa1', (27, 0) -> 'ab1'
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (col, row)


def column_letters(col: int) -> str:
    """Column label, e.g. 0 -> 'a', 25 -> 'z', 26 -> 'aa'."""
    if col < 0:
        raise ValueError(f"Invalid column index: {col!r}")
    letters: list[str] = []
    remainder = col
    while True:
        letters.append(chr(ord("a") + remainder % 26))
        remainder //= 26
        if remainder == 0:
            break
        remainder -= 1
    return "".join(reversed(letters))


def square_name(col: int, row: int) -> str:
    """Human-readable name, e.g. (4, 3) -> 'e4'."""
    if row < 0:
        raise ValueError(f"Invalid row index: {row!r}")
    return f"{column_letters(col)}{row + 1}"


def parse_square(name: str) -> Coord:
    """Parse a square name, e.g. 'e4' -> (4, 3), 'ab1' -> (27, 0)."""
    letters = ""
    digits = ""
    for ch in name:
        if not digits and "a" <= ch <= "z":
            letters += ch
        elif ch.isascii() and ch.isdigit():
            digits += ch
        else:
            raise ValueError(f"Invalid square name: {name!r}")
    if not letters or not digits or int(digits) < 1:
        raise ValueError(f"Invalid square name: {name!r}")

    col = 0
    for ch in letters:
        col = col * 26 + (ord(ch) - ord("a") + 1)
    return (col - 1, int(digits) - 1)
