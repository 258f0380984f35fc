"""Notation package: FEN and unicode-grid import/export, square names."""

from gridchess.core.types import parse_square, square_name
from gridchess.notation.fen import (
    STARTING_FEN,
    FenError,
    game_from_fen,
    game_to_fen,
)
from gridchess.notation.grid import GridError, board_from_string, board_to_string, render

__all__ = [
    "STARTING_FEN",
    "FenError",
    "GridError",
    "board_from_string",
    "board_to_string",
    "game_from_fen",
    "game_to_fen",
    "parse_square",
    "render",
    "square_name",
]
