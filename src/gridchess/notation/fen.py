"""FEN parsing and serialization for boards of any size.

Ranks are listed from the top row down and separated by ``/``; the number
of ranks gives the board height and the width of every rank must agree.
Empty-square runs may use several digits (``12`` on a wide board).

The engine keeps en passant eligibility in the move history rather than as
a target square, so an en passant field is imported as a synthetic last
move: the opponent's two-square pawn advance through that square.
"""

from __future__ import annotations

import logging
import re

from gridchess.core.board import Board
from gridchess.core.enums import CastlingRights, Color, PieceType
from gridchess.core.game import Game
from gridchess.core.move import Move, QuietMove, is_double_pawn_push
from gridchess.core.piece import Piece
from gridchess.core.types import parse_square, square_name
from gridchess.core.variant import Variant

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_RANK_TOKEN_RE = re.compile(r"\d+|.")

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


class FenError(ValueError):
    """Raised for malformed FEN text."""


def _parse_rank(rank_text: str, fen: str) -> list[Piece | None]:
    cells: list[Piece | None] = []
    for token in _RANK_TOKEN_RE.findall(rank_text):
        if token.isdigit():
            step = int(token)
            if step < 1:
                raise FenError(f"Invalid FEN digit run {token!r}: {fen!r}")
            cells.extend([None] * step)
        else:
            try:
                cells.append(Piece.from_char(token))
            except ValueError:
                raise FenError(f"Invalid FEN piece {token!r}: {fen!r}") from None
    return cells


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field alone."""
    ranks = placement.split("/")
    rows = [_parse_rank(text, placement) for text in ranks]
    width = len(rows[0])
    if width == 0 or any(len(cells) != width for cells in rows):
        raise FenError(f"Invalid FEN rank width: {placement!r}")

    height = len(rows)
    board = Board(width, height)
    for rank_idx, cells in enumerate(rows):
        row = height - 1 - rank_idx
        for col, piece in enumerate(cells):
            if piece is not None:
                board.place(piece, col, row)
    return board


def _check_kings(board: Board, fen: str) -> None:
    for color in Color:
        kings = sum(1 for piece in board.pieces(color) if piece.is_king)
        if kings != 1:
            raise FenError(f"FEN needs exactly one {color.name} king, found {kings}: {fen!r}")


def _en_passant_move(board: Board, side: Color, ep_part: str, fen: str) -> QuietMove | None:
    try:
        col, row = parse_square(ep_part)
    except ValueError:
        raise FenError(f"Invalid FEN en-passant square: {ep_part!r}") from None
    if not board.in_bounds(col, row):
        raise FenError(f"FEN en-passant square off the board: {ep_part!r}")

    mover = side.opposite
    direction = 1 if mover == Color.WHITE else -1
    from_sq = (col, row - direction)
    to_sq = (col, row + direction)
    pawn = Piece(mover, PieceType.PAWN)
    if (
        not board.in_bounds(*from_sq)
        or not board.in_bounds(*to_sq)
        or board.get(*to_sq) != pawn
        or not board.is_empty(*from_sq)
        or not board.is_empty(col, row)
    ):
        _LOGGER.warning("Ignoring en passant square %s in %r: no matching pawn", ep_part, fen)
        return None
    return QuietMove(from_sq, to_sq, pawn)


def _parse_counter(text: str, minimum: int, name: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise FenError(f"Invalid FEN {name}: {text!r}") from None
    if value < minimum:
        raise FenError(f"Invalid FEN {name}: {text!r}")
    return value


def game_from_fen(fen: str, variant: Variant | None = None) -> Game:
    """Parse a FEN string into a :class:`Game`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise FenError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    board = board_from_placement(placement)
    _check_kings(board, fen)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise FenError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    history: list[Move] = []
    if ep_part != "-":
        last_move = _en_passant_move(board, side, ep_part, fen)
        if last_move is not None:
            history.append(last_move)

    # 5-6. Clocks (optional)
    halfmove = _parse_counter(parts[4], 0, "halfmove clock") if len(parts) > 4 else 0
    fullmove = _parse_counter(parts[5], 1, "fullmove number") if len(parts) > 5 else 1

    return Game(board, side, castling, halfmove, fullmove, variant, history)


def placement_to_fen(board: Board) -> str:
    rows: list[str] = []
    for row in range(board.height - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(board.width):
            piece = board.get(col, row)
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def game_to_fen(game: Game) -> str:
    """Serialise a :class:`Game` to FEN."""
    board_str = placement_to_fen(game.board)
    side_str = "w" if game.side_to_move == Color.WHITE else "b"

    castling_str = "".join(
        ch for ch, right in _CASTLING_CHARS.items() if game.castling & right
    ) or "-"

    ep_str = "-"
    last = game.last_move
    if is_double_pawn_push(last):
        assert last is not None
        ep_str = square_name(last.to_sq[0], (last.from_sq[1] + last.to_sq[1]) // 2)

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{game.halfmove_clock} {game.fullmove_number}"
    )
