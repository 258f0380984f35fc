"""Unicode grid codec and terminal renderer.

A grid is one line per row, top row first, one character per square: a
unicode chess symbol (``♔``, ``♟``, ...) or anything else for an empty
square.  Line breaks are optional::

    board_from_string(2, 2, " ♛\\n♔ ")   # white king a1, black queen b2
"""

from __future__ import annotations

from gridchess.core.board import Board
from gridchess.core.enums import SquareColor
from gridchess.core.piece import Piece

_LIGHT_SQUARE = "\x1b[100m"
_RESET = "\x1b[0m"


class GridError(ValueError):
    """Raised when grid text does not match the requested dimensions."""


def board_from_string(width: int, height: int, text: str) -> Board:
    """Build a board from a unicode grid."""
    cells = text.replace("\n", "")
    if len(cells) != width * height:
        raise GridError(
            f"Expected {width * height} squares for a {width}x{height} board, "
            f"received {len(cells)}"
        )

    board = Board(width, height)
    for index, ch in enumerate(cells):
        try:
            piece = Piece.from_symbol(ch)
        except ValueError:
            continue
        board.place(piece, index % width, height - 1 - index // width)
    return board


def board_to_string(board: Board) -> str:
    """Inverse of :func:`board_from_string`; empty squares are spaces."""
    lines: list[str] = []
    for row in range(board.height - 1, -1, -1):
        line = ""
        for col in range(board.width):
            piece = board.get(col, row)
            line += piece.symbol if piece is not None else " "
        lines.append(line)
    return "\n".join(lines)


def render(board: Board) -> str:
    """Terminal rendering with ANSI-shaded light squares."""
    lines: list[str] = []
    for row in range(board.height - 1, -1, -1):
        line = ""
        for col in range(board.width):
            piece = board.get(col, row)
            shade = _LIGHT_SQUARE if board.square_color(col, row) == SquareColor.LIGHT else ""
            inner = piece.symbol if piece is not None else " "
            line += f"{shade} {inner} {_RESET}"
        lines.append(line)
    return "\n".join(lines) + "\n"
