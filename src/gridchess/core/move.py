"""Move variants.

``Move`` is a closed union of four frozen value objects.  Each variant
carries enough data to apply itself to a :class:`Board` and to undo that
application again:

* :class:`QuietMove` - a step to a square, optionally promoting and
  optionally capturing on the destination (promotion captures);
* :class:`Take` - a plain capture on the destination square;
* :class:`Castle` - king and rook relocation;
* :class:`EnPassant` - pawn capture where the victim is not on the
  destination square.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from gridchess.core.enums import Color, PieceType
from gridchess.core.piece import Piece
from gridchess.core.types import Coord, square_name

if TYPE_CHECKING:
    from gridchess.core.board import Board

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


def _coord_text(from_sq: Coord, to_sq: Coord) -> str:
    return f"{square_name(*from_sq)}{square_name(*to_sq)}"


@dataclass(frozen=True, slots=True)
class QuietMove:
    """Step to *to_sq*; may promote, and may capture when promoting."""

    from_sq: Coord
    to_sq: Coord
    piece: Piece
    captured: Piece | None = None
    promotion: PieceType | None = None

    def apply(self, board: Board) -> None:
        board.remove(*self.from_sq)
        placed = self.piece
        if self.promotion is not None:
            placed = Piece(self.piece.color, self.promotion)
        board.place(placed, *self.to_sq)

    def undo(self, board: Board) -> None:
        board[self.to_sq] = self.captured
        board.place(self.piece, *self.from_sq)

    @property
    def is_double_pawn_push(self) -> bool:
        return (
            self.piece.piece_type == PieceType.PAWN
            and self.from_sq[0] == self.to_sq[0]
            and abs(self.to_sq[1] - self.from_sq[1]) == 2
            and self.promotion is None
        )

    def __str__(self) -> str:
        base = _coord_text(self.from_sq, self.to_sq)
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base


@dataclass(frozen=True, slots=True)
class Take:
    """Capture of the piece standing on *to_sq*."""

    from_sq: Coord
    to_sq: Coord
    piece: Piece
    captured: Piece

    def apply(self, board: Board) -> None:
        board.remove(*self.from_sq)
        board.place(self.piece, *self.to_sq)

    def undo(self, board: Board) -> None:
        board.place(self.captured, *self.to_sq)
        board.place(self.piece, *self.from_sq)

    def __str__(self) -> str:
        return _coord_text(self.from_sq, self.to_sq)


@dataclass(frozen=True, slots=True)
class Castle:
    """King and rook swap sides in one move."""

    color: Color
    king_from: Coord
    king_to: Coord
    rook_from: Coord
    rook_to: Coord

    @property
    def from_sq(self) -> Coord:
        return self.king_from

    @property
    def to_sq(self) -> Coord:
        return self.king_to

    @property
    def piece(self) -> Piece:
        return Piece(self.color, PieceType.KING)

    @property
    def captured(self) -> None:
        return None

    @property
    def is_kingside(self) -> bool:
        return self.rook_from[0] > self.king_from[0]

    def apply(self, board: Board) -> None:
        king = board.remove(*self.king_from)
        rook = board.remove(*self.rook_from)
        assert king is not None and rook is not None
        board.place(king, *self.king_to)
        board.place(rook, *self.rook_to)

    def undo(self, board: Board) -> None:
        king = board.remove(*self.king_to)
        rook = board.remove(*self.rook_to)
        assert king is not None and rook is not None
        board.place(king, *self.king_from)
        board.place(rook, *self.rook_from)

    def __str__(self) -> str:
        return _coord_text(self.king_from, self.king_to)


@dataclass(frozen=True, slots=True)
class EnPassant:
    """Pawn capture of a pawn that just passed *to_sq* with a double step."""

    from_sq: Coord
    to_sq: Coord
    piece: Piece
    captured_sq: Coord
    captured: Piece

    def apply(self, board: Board) -> None:
        board.remove(*self.from_sq)
        board.remove(*self.captured_sq)
        board.place(self.piece, *self.to_sq)

    def undo(self, board: Board) -> None:
        board.remove(*self.to_sq)
        board.place(self.captured, *self.captured_sq)
        board.place(self.piece, *self.from_sq)

    def __str__(self) -> str:
        return _coord_text(self.from_sq, self.to_sq)


Move: TypeAlias = QuietMove | Take | Castle | EnPassant


def is_double_pawn_push(move: Move | None) -> bool:
    """Whether *move* is a two-square pawn advance."""
    return isinstance(move, QuietMove) and move.is_double_pawn_push


def is_capture(move: Move) -> bool:
    return move.captured is not None
