"""Castling evaluator.

Castling is never produced by the king's generator.  It is evaluated here
from the castling-rights flags kept by :class:`~gridchess.core.game.Game`
plus a board inspection:

* the right for that color and side is still set;
* the king stands on its home row and the rook in that side's corner;
* every square strictly between them is empty;
* the king is not in check, does not cross an attacked square and does
  not land on one.

The king moves two columns toward the rook and the rook lands on the square
the king crossed, so king and rook must start at least three columns apart.
"""

from __future__ import annotations

from gridchess.core.board import Board
from gridchess.core.enums import CastlingRights, Color, PieceType
from gridchess.core.move import Castle, Move
from gridchess.core.move_generator import is_in_check
from gridchess.core.piece import Piece
from gridchess.core.types import Coord

_MIN_KING_ROOK_DISTANCE = 3


def home_row(board: Board, color: Color) -> int:
    return 0 if color == Color.WHITE else board.height - 1


def rook_corners(board: Board) -> dict[Coord, CastlingRights]:
    """Corner square -> the castling right a rook there represents."""
    top = board.height - 1
    right = board.width - 1
    return {
        (0, 0): CastlingRights.WHITE_QUEENSIDE,
        (right, 0): CastlingRights.WHITE_KINGSIDE,
        (0, top): CastlingRights.BLACK_QUEENSIDE,
        (right, top): CastlingRights.BLACK_KINGSIDE,
    }


def _king_safe_on(
    board: Board,
    color: Color,
    king_from: Coord,
    square: Coord,
    last_move: Move | None,
) -> bool:
    scratch = board.copy()
    king = scratch.remove(*king_from)
    assert king is not None
    scratch.place(king, *square)
    return not is_in_check(scratch, color, last_move)


def _castle_toward(
    board: Board,
    color: Color,
    king_sq: Coord,
    rook_col: int,
    last_move: Move | None,
) -> Castle | None:
    row = king_sq[1]
    king_col = king_sq[0]
    if board.get(rook_col, row) != Piece(color, PieceType.ROOK):
        return None
    if abs(rook_col - king_col) < _MIN_KING_ROOK_DISTANCE:
        return None

    step = 1 if rook_col > king_col else -1
    for col in range(king_col + step, rook_col, step):
        if not board.is_empty(col, row):
            return None

    crossed = (king_col + step, row)
    castle = Castle(
        color=color,
        king_from=king_sq,
        king_to=(king_col + 2 * step, row),
        rook_from=(rook_col, row),
        rook_to=crossed,
    )

    if not _king_safe_on(board, color, king_sq, crossed, last_move):
        return None
    scratch = board.copy()
    castle.apply(scratch)
    if is_in_check(scratch, color, last_move):
        return None
    return castle


def castling_moves(
    board: Board,
    color: Color,
    rights: CastlingRights,
    last_move: Move | None = None,
) -> list[Castle]:
    """Fully legal castles available to *color*."""
    if not rights & CastlingRights.both(color):
        return []

    king_sq = board.king_square(color)
    if king_sq[1] != home_row(board, color):
        return []
    if is_in_check(board, color, last_move):
        return []

    moves: list[Castle] = []
    if rights & CastlingRights.kingside(color):
        castle = _castle_toward(board, color, king_sq, board.width - 1, last_move)
        if castle is not None:
            moves.append(castle)
    if rights & CastlingRights.queenside(color):
        castle = _castle_toward(board, color, king_sq, 0, last_move)
        if castle is not None:
            moves.append(castle)
    return moves


def revoke_rights(board: Board, rights: CastlingRights, move: Move) -> CastlingRights:
    """Castling rights remaining after *move* is played.

    A king move drops both rights of its color; any move starting or ending
    on a rook corner drops the right tied to that corner.
    """
    remaining = rights
    if move.piece.is_king:
        remaining &= ~CastlingRights.both(move.piece.color)

    corners = rook_corners(board)
    touched = [move.from_sq, move.to_sq]
    if isinstance(move, Castle):
        touched.append(move.rook_from)
    for sq in touched:
        if sq in corners:
            remaining &= ~corners[sq]
    return remaining
