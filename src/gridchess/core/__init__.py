"""Core domain layer: pure rules logic with zero external dependencies.

Quick start::

    from gridchess.core import Game, Rules

    game = Game.standard()
    status, moves = Rules.game_status(game)
    game.apply_move(moves[0])
"""

from gridchess.core.board import Board, MissingKingError, OutOfBoundsError
from gridchess.core.castling import castling_moves
from gridchess.core.enums import (
    CastlingRights,
    Color,
    GameStatus,
    PieceType,
    SquareColor,
)
from gridchess.core.game import Game, IllegalMoveError
from gridchess.core.move import Castle, EnPassant, Move, QuietMove, Take
from gridchess.core.move_generator import (
    is_in_check,
    legal_moves,
    piece_moves,
    pseudo_legal_moves,
)
from gridchess.core.perft import divide, perft
from gridchess.core.piece import Piece
from gridchess.core.rules import Rules
from gridchess.core.types import Coord, parse_square, square_name
from gridchess.core.variant import Variant

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "PieceType",
    "SquareColor",
    # Types / helpers
    "Coord",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Castle",
    "EnPassant",
    "Game",
    "Move",
    "Piece",
    "QuietMove",
    "Rules",
    "Take",
    "Variant",
    # Move generation
    "castling_moves",
    "is_in_check",
    "legal_moves",
    "piece_moves",
    "pseudo_legal_moves",
    "divide",
    "perft",
    # Errors
    "IllegalMoveError",
    "MissingKingError",
    "OutOfBoundsError",
]
