"""High-level rules: check, checkmate, stalemate and draw classification."""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from gridchess.core.board import Board, MissingKingError
from gridchess.core.enums import Color, GameStatus, PieceType

if TYPE_CHECKING:
    from gridchess.core.game import Game
    from gridchess.core.move import Move
    from gridchess.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

_MINOR_PIECES = frozenset({PieceType.BISHOP, PieceType.KNIGHT})


def _side_is_insufficient(color: Color, pieces: list[Piece]) -> bool:
    """A lone king, or a king with a single bishop or a single knight."""
    counts = Counter(p.piece_type for p in pieces)
    if counts[PieceType.KING] == 0:
        raise MissingKingError(f"No {color.name} king on board")
    if any(ptype not in _MINOR_PIECES and ptype != PieceType.KING for ptype in counts):
        return False
    # Two knights, two bishops or bishop + knight all count as mating material.
    return counts[PieceType.BISHOP] + counts[PieceType.KNIGHT] <= 1


class Rules:
    """Static rule-checker that operates on a :class:`Game`."""

    @staticmethod
    def is_in_check(game: Game) -> bool:
        return game.is_in_check()

    @staticmethod
    def is_checkmate(game: Game) -> bool:
        return game.is_in_check() and not game.legal_moves()

    @staticmethod
    def is_stalemate(game: Game) -> bool:
        return not game.is_in_check() and not game.legal_moves()

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """Neither side keeps more than a king and one minor piece."""
        return _side_is_insufficient(
            Color.WHITE, board.pieces(Color.WHITE)
        ) and _side_is_insufficient(Color.BLACK, board.pieces(Color.BLACK))

    @staticmethod
    def is_fifty_move_rule(game: Game) -> bool:
        return game.can_trigger_fifty_move_rule()

    @staticmethod
    def game_status(game: Game) -> tuple[GameStatus, list[Move]]:
        """Classify the position for the side to move.

        Returns the status together with the legal moves so callers never
        need to generate them a second time.
        """
        in_check = game.is_in_check()
        moves = game.legal_moves()

        if not moves:
            status = GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        elif in_check:
            status = GameStatus.CHECK
        elif Rules.is_insufficient_material(game.board):
            status = GameStatus.INSUFFICIENT_MATERIAL
        elif game.can_trigger_fifty_move_rule():
            status = GameStatus.FIFTY_MOVE_RULE
        else:
            status = GameStatus.IN_PROGRESS

        _LOGGER.debug(
            "%s to move: %s with %d legal moves", game.side_to_move, status, len(moves)
        )
        return status, moves
