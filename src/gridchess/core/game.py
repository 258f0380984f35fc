"""Game: board plus side to move, clocks, castling rights and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridchess.core.board import Board
from gridchess.core.castling import castling_moves, revoke_rights
from gridchess.core.enums import CastlingRights, Color, PieceType
from gridchess.core.move import Move, is_capture
from gridchess.core.move_generator import is_in_check, legal_moves
from gridchess.core.variant import Variant

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a move is not legal for the side to move."""


@dataclass(slots=True)
class _UndoState:
    """Snapshot saved before each move so it can be taken back."""

    castling: CastlingRights
    halfmove_clock: int
    fullmove_number: int


class Game:
    """Mutable game record driven one legal move per turn.

    The board is owned by the game; :meth:`apply_move` mutates it in place,
    toggles the side to move and advances the counters.  History is kept in
    play order, so ``history[-1]`` is the move the next player answers
    (needed for en passant).
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "halfmove_clock",
        "fullmove_number",
        "turn",
        "variant",
        "_history",
        "_undo",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        variant: Variant | None = None,
        history: list[Move] | None = None,
    ) -> None:
        if castling is None:
            castling = CastlingRights.ALL if board is None else CastlingRights.NONE
        self.board = board if board is not None else Board.standard()
        self.side_to_move = side_to_move
        self.castling = castling
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.turn = 1
        self.variant = variant if variant is not None else Variant.standard()
        # Moves passed in (e.g. an imported double pawn push) cannot be undone.
        self._history: list[Move] = list(history) if history else []
        self._undo: list[_UndoState] = []

    @classmethod
    def standard(cls, variant: Variant | None = None) -> Game:
        """New game from the standard starting position."""
        return cls(Board.standard(), Color.WHITE, CastlingRights.ALL, variant=variant)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def ply_count(self) -> int:
        """Number of moves applied through :meth:`apply_move`."""
        return len(self._undo)

    def is_in_check(self) -> bool:
        return is_in_check(self.board, self.side_to_move, self.last_move)

    def legal_moves(self) -> list[Move]:
        """Every fully legal move for the side to move, castles included."""
        moves = legal_moves(self.board, self.side_to_move, self.last_move, self.variant)
        moves.extend(
            castling_moves(self.board, self.side_to_move, self.castling, self.last_move)
        )
        return moves

    def can_trigger_fifty_move_rule(self) -> bool:
        return self.halfmove_clock >= self.variant.fifty_move_halfmoves

    # ── Core move operations ─────────────────────────────────────────────

    def apply_move(self, move: Move) -> None:
        """Apply *move* for the side to move.

        Caller is responsible for legality; see :meth:`play`.
        """
        if move.piece.color != self.side_to_move:
            raise IllegalMoveError(
                f"{move} moves a {move.piece.color} piece on {self.side_to_move}'s turn"
            )

        self._undo.append(
            _UndoState(
                castling=self.castling,
                halfmove_clock=self.halfmove_clock,
                fullmove_number=self.fullmove_number,
            )
        )

        move.apply(self.board)
        self._history.append(move)
        self.castling = revoke_rights(self.board, self.castling, move)

        if move.piece.piece_type == PieceType.PAWN or is_capture(move):
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite
        self.turn += 1
        _LOGGER.debug("Applied %s; %s to move (turn %d)", move, self.side_to_move, self.turn)

    def play(self, move: Move) -> None:
        """Apply *move* after checking it against the legal-move list."""
        if move not in self.legal_moves():
            raise IllegalMoveError(f"Illegal move for {self.side_to_move}: {move}")
        self.apply_move(move)

    def undo_last_move(self) -> Move | None:
        """Take back the last applied move. Returns it, or None if none."""
        if not self._undo:
            return None

        state = self._undo.pop()
        move = self._history.pop()
        move.undo(self.board)

        self.castling = state.castling
        self.halfmove_clock = state.halfmove_clock
        self.fullmove_number = state.fullmove_number
        self.side_to_move = self.side_to_move.opposite
        self.turn -= 1
        return move

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent copy; undo information is not carried over."""
        game = Game(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            variant=self.variant,
            history=self._history,
        )
        game.turn = self.turn
        return game
