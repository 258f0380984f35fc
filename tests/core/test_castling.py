"""Tests for castling availability and castling-rights bookkeeping."""

import pytest

from gridchess.core.board import Board
from gridchess.core.castling import castling_moves, revoke_rights, rook_corners
from gridchess.core.enums import CastlingRights, Color, PieceType
from gridchess.core.move import Castle, QuietMove, Take
from gridchess.core.piece import Piece
from gridchess.notation.fen import game_from_fen, game_to_fen
from gridchess.notation.grid import board_from_string

W_KING = Piece(Color.WHITE, PieceType.KING)
W_ROOK = Piece(Color.WHITE, PieceType.ROOK)
B_ROOK = Piece(Color.BLACK, PieceType.ROOK)


def _sides(castles: list[Castle]) -> set[str]:
    return {"king" if c.is_kingside else "queen" for c in castles}


class TestCastlingAvailability:
    def test_black_castle_long(self) -> None:
        board = board_from_string(
            8,
            8,
            "♜   ♚ ♞♜\n"
            "♟♟♟♟♟♟♟♟\n"
            "        \n"
            "        \n"
            "      ♙♛\n"
            "     ♙  \n"
            "♙♙♙♙♙  ♙\n"
            "♖♘♗♕♔♗♘♖\n",
        )
        castles = castling_moves(board, Color.BLACK, CastlingRights.ALL)
        assert castles == [Castle(Color.BLACK, (4, 7), (2, 7), (0, 7), (3, 7))]

    def test_white_castle_long(self) -> None:
        board = board_from_string(
            8,
            8,
            "♜ ♞ ♚ ♞♜\n"
            "♟♟♟♟♟♟♟♟\n"
            "        \n"
            "        \n"
            "     ♛  \n"
            "        \n"
            "♙♙♙♙   ♙\n"
            "♖   ♔♗♘♖",
        )
        castles = castling_moves(board, Color.WHITE, CastlingRights.ALL)
        assert _sides(castles) == {"queen"}

    def test_white_castle_short_with_queen_nearby(self) -> None:
        board = board_from_string(
            8,
            8,
            "♜  ♞♚  ♜\n"
            "♟♟♟♟♟♟♟♟\n"
            "        \n"
            "        \n"
            "      ♙♛\n"
            "        \n"
            "♙♙♙♙♙♙ ♙\n"
            "♖♘♗♕♔  ♖\n",
        )
        assert _sides(castling_moves(board, Color.WHITE, CastlingRights.ALL)) == {"king"}
        assert _sides(castling_moves(board, Color.BLACK, CastlingRights.ALL)) == {"king"}

    def test_both_sides_open(self) -> None:
        game = game_from_fen("4k3/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        castles = [m for m in game.legal_moves() if isinstance(m, Castle)]
        assert _sides(castles) == {"king", "queen"}

    def test_requires_right(self) -> None:
        game = game_from_fen("4k3/8/8/8/8/8/8/R3K2R w K - 0 1")
        castles = [m for m in game.legal_moves() if isinstance(m, Castle)]
        assert _sides(castles) == {"king"}

    @pytest.mark.parametrize(
        ("fen", "sides"),
        [
            # f1 crossed under attack
            ("k4r2/8/8/8/8/8/8/R3K2R w KQ - 0 1", {"queen"}),
            # g1 landing square attacked
            ("k5r1/8/8/8/8/8/8/R3K2R w KQ - 0 1", {"queen"}),
            # king in check
            ("k3r3/8/8/8/8/8/8/R3K2R w KQ - 0 1", set()),
            # b1 attacked does not matter
            ("kr6/8/8/8/8/8/8/R3K2R w KQ - 0 1", {"king", "queen"}),
            # d1 crossed under attack
            ("k2r4/8/8/8/8/8/8/R3K2R w KQ - 0 1", {"king"}),
            # c1 landing square attacked
            ("k1r5/8/8/8/8/8/8/R3K2R w KQ - 0 1", {"king"}),
        ],
    )
    def test_attacked_squares(self, fen: str, sides: set[str]) -> None:
        game = game_from_fen(fen)
        castles = castling_moves(game.board, Color.WHITE, game.castling)
        assert _sides(castles) == sides

    def test_blocked_path(self) -> None:
        game = game_from_fen("4k3/8/8/8/8/8/8/RN2K1NR w KQ - 0 1")
        assert castling_moves(game.board, Color.WHITE, game.castling) == []

    def test_rook_missing_from_corner(self) -> None:
        game = game_from_fen("4k3/8/8/8/8/8/8/1R2K1R1 w KQ - 0 1")
        assert castling_moves(game.board, Color.WHITE, game.castling) == []

    def test_king_off_home_row(self) -> None:
        game = game_from_fen("4k3/8/8/8/8/8/4K3/R6R w KQ - 0 1")
        assert castling_moves(game.board, Color.WHITE, game.castling) == []

    def test_wide_board(self) -> None:
        game = game_from_fen("4k5/10/10/10/10/10/10/R3K4R w KQ - 0 1")
        castles = castling_moves(game.board, Color.WHITE, game.castling)
        assert Castle(Color.WHITE, (4, 0), (6, 0), (9, 0), (5, 0)) in castles
        assert Castle(Color.WHITE, (4, 0), (2, 0), (0, 0), (3, 0)) in castles

    def test_king_rook_too_close(self) -> None:
        game = game_from_fen("2k2/5/5/5/R1K1R w KQ - 0 1")
        assert castling_moves(game.board, Color.WHITE, game.castling) == []


class TestCastleMove:
    def test_apply_and_undo(self) -> None:
        board = Board(8, 1)
        board.place(W_KING, 4, 0)
        board.place(W_ROOK, 7, 0)
        castle = Castle(Color.WHITE, (4, 0), (6, 0), (7, 0), (5, 0))

        castle.apply(board)
        assert board.get(6, 0) == W_KING
        assert board.get(5, 0) == W_ROOK
        assert board.is_empty(4, 0)
        assert board.is_empty(7, 0)
        assert board.king_square(Color.WHITE) == (6, 0)

        castle.undo(board)
        assert board.get(4, 0) == W_KING
        assert board.get(7, 0) == W_ROOK

    def test_reports_king_squares(self) -> None:
        castle = Castle(Color.BLACK, (4, 7), (2, 7), (0, 7), (3, 7))
        assert castle.from_sq == (4, 7)
        assert castle.to_sq == (2, 7)
        assert castle.piece == Piece(Color.BLACK, PieceType.KING)
        assert castle.captured is None
        assert not castle.is_kingside
        assert str(castle) == "e8c8"

    def test_game_castles_and_fen_reflects_it(self) -> None:
        game = game_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 3 10")
        game.play(Castle(Color.WHITE, (4, 0), (6, 0), (7, 0), (5, 0)))
        assert game_to_fen(game) == "r3k2r/8/8/8/8/8/8/R4RK1 b kq - 4 10"


class TestRevokeRights:
    def test_rook_corners_follow_board_size(self) -> None:
        corners = rook_corners(Board(10, 6))
        assert corners[(9, 0)] == CastlingRights.WHITE_KINGSIDE
        assert corners[(0, 5)] == CastlingRights.BLACK_QUEENSIDE

    def test_king_move_clears_both(self) -> None:
        board = Board()
        move = QuietMove((4, 0), (4, 1), W_KING)
        remaining = revoke_rights(board, CastlingRights.ALL, move)
        assert remaining == CastlingRights.BLACK_BOTH

    def test_rook_move_clears_its_side(self) -> None:
        board = Board()
        move = QuietMove((0, 0), (0, 3), W_ROOK)
        remaining = revoke_rights(board, CastlingRights.ALL, move)
        assert remaining == CastlingRights.ALL & ~CastlingRights.WHITE_QUEENSIDE

    def test_capture_on_corner_clears_victim_side(self) -> None:
        board = Board()
        move = Take((7, 0), (7, 7), W_ROOK, B_ROOK)
        remaining = revoke_rights(board, CastlingRights.ALL, move)
        assert remaining == CastlingRights.WHITE_QUEENSIDE | CastlingRights.BLACK_QUEENSIDE

    def test_castle_clears_color(self) -> None:
        board = Board()
        castle = Castle(Color.BLACK, (4, 7), (6, 7), (7, 7), (5, 7))
        remaining = revoke_rights(board, CastlingRights.ALL, castle)
        assert remaining == CastlingRights.WHITE_BOTH

    def test_unrelated_move_keeps_rights(self) -> None:
        board = Board()
        move = QuietMove((1, 0), (2, 2), Piece(Color.WHITE, PieceType.KNIGHT))
        assert revoke_rights(board, CastlingRights.ALL, move) == CastlingRights.ALL

    def test_game_tracks_rook_moves(self) -> None:
        game = game_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        game.play(QuietMove((0, 0), (0, 1), W_ROOK))
        assert game.castling == CastlingRights.ALL & ~CastlingRights.WHITE_QUEENSIDE
        game.undo_last_move()
        assert game.castling == CastlingRights.ALL
