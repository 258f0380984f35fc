"""Tests for Board."""

import pytest

from gridchess.core.board import Board, MissingKingError, OutOfBoundsError
from gridchess.core.enums import Color, PieceType, SquareColor
from gridchess.core.piece import Piece

BACK_RANK = [
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
]


class TestBoardStandard:
    def test_dimensions(self) -> None:
        board = Board.standard()
        assert board.width == 8
        assert board.height == 8

    def test_king_positions(self) -> None:
        board = Board.standard()
        assert board.get(4, 0) == Piece(Color.WHITE, PieceType.KING)
        assert board.get(4, 7) == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.standard()
        for col, pt in enumerate(BACK_RANK):
            assert board.get(col, 0) == Piece(Color.WHITE, pt), f"Mismatch at col {col}"
            assert board.get(col, 7) == Piece(Color.BLACK, pt), f"Mismatch at col {col}"

    def test_pawns(self) -> None:
        board = Board.standard()
        for col in range(8):
            assert board.get(col, 1) == Piece(Color.WHITE, PieceType.PAWN)
            assert board.get(col, 6) == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.standard()
        for col in range(8):
            for row in range(2, 6):
                assert board.is_empty(col, row)


class TestBoardOperations:
    def test_empty_board_of_any_size(self) -> None:
        board = Board(10, 3)
        assert board.width == 10
        assert board.height == 3
        assert all(piece is None for _, _, piece in board.squares())
        assert len(list(board.squares())) == 30

    @pytest.mark.parametrize(("width", "height"), [(0, 8), (8, 0), (-1, 3)])
    def test_invalid_dimensions(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            Board(width, height)

    def test_place_get_remove(self) -> None:
        board = Board()
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        board.place(knight, 0, 0)
        assert board.get(0, 0) == knight
        assert board[0, 0] == knight

        removed = board.remove(0, 0)
        assert removed == knight
        assert board.get(0, 0) is None

        board.place(removed, 0, 1)
        assert board.get(0, 1) == knight

    def test_remove_empty_returns_none(self) -> None:
        assert Board().remove(3, 3) is None

    def test_setitem_none_clears(self) -> None:
        board = Board.standard()
        board[0, 0] = None
        assert board.is_empty(0, 0)

    @pytest.mark.parametrize("coord", [(8, 0), (0, 8), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, coord: tuple[int, int]) -> None:
        board = Board.standard()
        piece = Piece(Color.WHITE, PieceType.KNIGHT)
        with pytest.raises(OutOfBoundsError):
            board.place(piece, *coord)
        with pytest.raises(OutOfBoundsError):
            board.remove(*coord)
        with pytest.raises(IndexError):
            board.get(*coord)

    def test_in_bounds(self) -> None:
        board = Board(5, 4)
        assert board.in_bounds(4, 3)
        assert not board.in_bounds(5, 3)
        assert not board.in_bounds(4, 4)

    def test_square_color(self) -> None:
        board = Board()
        assert board.square_color(0, 0) == SquareColor.DARK
        assert board.square_color(1, 0) == SquareColor.LIGHT
        assert board.square_color(7, 7) == SquareColor.DARK

    def test_copy_independence(self) -> None:
        board = Board.standard()
        copy = board.copy()
        assert board == copy
        copy.remove(4, 0)
        assert board != copy
        assert board.get(4, 0) == Piece(Color.WHITE, PieceType.KING)
        assert board.king_square(Color.WHITE) == (4, 0)

    def test_equality_needs_same_dimensions(self) -> None:
        assert Board(8, 8) != Board(8, 7)

    def test_occupied_by_color(self) -> None:
        board = Board.standard()
        assert len(board.occupied(Color.WHITE)) == 16
        assert len(board.occupied(Color.BLACK)) == 16
        assert len(board.occupied()) == 32
        assert all(row in (0, 1) for (_, row), _ in board.occupied(Color.WHITE))

    def test_clear(self) -> None:
        board = Board.standard()
        board.clear()
        assert board.occupied() == []

    def test_repr_not_empty(self) -> None:
        text = repr(Board.standard())
        assert "K" in text
        assert "a b c d e f g h" in text


class TestKingSquare:
    def test_standard(self) -> None:
        board = Board.standard()
        assert board.king_square(Color.WHITE) == (4, 0)
        assert board.king_square(Color.BLACK) == (4, 7)

    def test_missing_raises(self) -> None:
        with pytest.raises(MissingKingError, match="No WHITE king"):
            Board().king_square(Color.WHITE)

    def test_follows_moves(self) -> None:
        board = Board(3, 3)
        king = Piece(Color.BLACK, PieceType.KING)
        board.place(king, 0, 0)
        board.remove(0, 0)
        board.place(king, 2, 1)
        assert board.king_square(Color.BLACK) == (2, 1)

    def test_king_overwritten(self) -> None:
        board = Board(3, 3)
        board.place(Piece(Color.WHITE, PieceType.KING), 1, 1)
        board.place(Piece(Color.BLACK, PieceType.QUEEN), 1, 1)
        with pytest.raises(MissingKingError):
            board.king_square(Color.WHITE)
