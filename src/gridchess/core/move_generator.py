"""Pseudo-legal move generation, attack detection and the legality filter.

Every generator is a pure function of ``(color, origin, board, last_move)``
returning the candidate moves of one piece.  Candidates obey piece geometry
and occupancy but may leave the mover's own king attacked; :func:`legal_moves`
removes those by replaying each candidate on a board copy.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from gridchess.core.board import Board
from gridchess.core.enums import Color, PieceType
from gridchess.core.move import EnPassant, Move, QuietMove, Take, is_double_pawn_push
from gridchess.core.piece import Piece
from gridchess.core.types import Coord
from gridchess.core.variant import Variant

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_STANDARD = Variant.standard()

PieceMoveFn: TypeAlias = Callable[[Color, Coord, Board, Move | None, Variant], list[Move]]


# -- Shared walkers --------------------------------------------------------


def _step_or_take(piece: Piece, origin: Coord, target: Coord, board: Board) -> Move | None:
    occupant = board.get(*target)
    if occupant is None:
        return QuietMove(origin, target, piece)
    if occupant.color != piece.color:
        return Take(origin, target, piece, occupant)
    return None


def _leap(
    piece: Piece,
    origin: Coord,
    board: Board,
    offsets: tuple[tuple[int, int], ...],
) -> list[Move]:
    moves: list[Move] = []
    col, row = origin
    for dc, dr in offsets:
        target = (col + dc, row + dr)
        if not board.in_bounds(*target):
            continue
        move = _step_or_take(piece, origin, target, board)
        if move is not None:
            moves.append(move)
    return moves


def _slide(
    piece: Piece,
    origin: Coord,
    board: Board,
    directions: tuple[tuple[int, int], ...],
) -> list[Move]:
    moves: list[Move] = []
    for dc, dr in directions:
        col, row = origin[0] + dc, origin[1] + dr
        while board.in_bounds(col, row):
            occupant = board.get(col, row)
            if occupant is None:
                moves.append(QuietMove(origin, (col, row), piece))
            else:
                if occupant.color != piece.color:
                    moves.append(Take(origin, (col, row), piece, occupant))
                break
            col += dc
            row += dr
    return moves


# -- Piece-specific generators ---------------------------------------------


def pawn_moves(
    color: Color,
    origin: Coord,
    board: Board,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    piece = Piece(color, PieceType.PAWN)
    col, row = origin
    direction = 1 if color == Color.WHITE else -1
    start_row = 1 if color == Color.WHITE else board.height - 2
    promotion_row = board.height - 1 if color == Color.WHITE else 0
    moves: list[Move] = []

    def advance(target: Coord, captured: Piece | None) -> None:
        if target[1] == promotion_row:
            for ptype in variant.promotion_types:
                moves.append(QuietMove(origin, target, piece, captured, ptype))
        elif captured is None:
            moves.append(QuietMove(origin, target, piece))
        else:
            moves.append(Take(origin, target, piece, captured))

    one_step = (col, row + direction)
    if board.in_bounds(*one_step) and board.is_empty(*one_step):
        advance(one_step, None)
        two_step = (col, row + 2 * direction)
        if (
            row == start_row
            and board.in_bounds(*two_step)
            and board.is_empty(*two_step)
        ):
            advance(two_step, None)

    for dc in (-1, 1):
        target = (col + dc, row + direction)
        if not board.in_bounds(*target):
            continue
        occupant = board.get(*target)
        if occupant is not None and occupant.color != color:
            advance(target, occupant)

    if is_double_pawn_push(last_move):
        assert last_move is not None
        victim_sq = last_move.to_sq
        victim = board.get(*victim_sq) if board.in_bounds(*victim_sq) else None
        if (
            last_move.piece.color != color
            and victim == last_move.piece
            and victim_sq[1] == row
            and abs(victim_sq[0] - col) == 1
        ):
            passed = (victim_sq[0], (last_move.from_sq[1] + victim_sq[1]) // 2)
            if passed[1] == row + direction and board.is_empty(*passed):
                moves.append(EnPassant(origin, passed, piece, victim_sq, victim))
    return moves


def knight_moves(
    color: Color,
    origin: Coord,
    board: Board,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    return _leap(Piece(color, PieceType.KNIGHT), origin, board, KNIGHT_OFFSETS)


def bishop_moves(
    color: Color,
    origin: Coord,
    board: Board,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    return _slide(Piece(color, PieceType.BISHOP), origin, board, BISHOP_DIRS)


def rook_moves(
    color: Color,
    origin: Coord,
    board: Board,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    return _slide(Piece(color, PieceType.ROOK), origin, board, ROOK_DIRS)


def queen_moves(
    color: Color,
    origin: Coord,
    board: Board,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    return _slide(Piece(color, PieceType.QUEEN), origin, board, QUEEN_DIRS)


def king_moves(
    color: Color,
    origin: Coord,
    board: Board,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    """Single steps only; castling lives in :mod:`gridchess.core.castling`."""
    return _leap(Piece(color, PieceType.KING), origin, board, KING_OFFSETS)


_GENERATORS: dict[PieceType, PieceMoveFn] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


# -- Public API --------------------------------------------------------------


def piece_moves(
    piece: Piece,
    origin: Coord,
    board: Board,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    """Pseudo-legal moves of *piece* standing on *origin*."""
    return _GENERATORS[piece.piece_type](piece.color, origin, board, last_move, variant)


def pseudo_legal_moves(
    board: Board,
    color: Color,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    """All pseudo-legal moves of *color* (may leave own king in check)."""
    moves: list[Move] = []
    for origin, piece in board.occupied(color):
        moves.extend(piece_moves(piece, origin, board, last_move, variant))
    return moves


def is_in_check(board: Board, color: Color, last_move: Move | None = None) -> bool:
    """Is *color*'s king capturable by any opposing pseudo-legal move?"""
    board.king_square(color)  # fail loudly without a king
    king = Piece(color, PieceType.KING)
    for origin, piece in board.occupied(color.opposite):
        for move in piece_moves(piece, origin, board, last_move):
            if move.captured == king:
                return True
    return False


def leaves_king_safe(
    board: Board,
    move: Move,
    last_move: Move | None = None,
) -> bool:
    """Replay *move* on a board copy and test the mover's king."""
    scratch = board.copy()
    move.apply(scratch)
    return not is_in_check(scratch, move.piece.color, last_move)


def legal_moves(
    board: Board,
    color: Color,
    last_move: Move | None = None,
    variant: Variant = _STANDARD,
) -> list[Move]:
    """Pseudo-legal moves of *color* that do not leave its king attacked.

    Castling is not included; see :func:`gridchess.core.castling.castling_moves`.
    """
    return [
        move
        for move in pseudo_legal_moves(board, color, last_move, variant)
        if leaves_king_safe(board, move, last_move)
    ]
