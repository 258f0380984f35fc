"""Perft node counting for checking move generation against known totals."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gridchess.core.game import Game


def perft(game: Game, depth: int) -> int:
    """Count leaf nodes at *depth* using apply/undo.

    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over all legal children of perft(depth - 1).

    The game is restored before returning.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1

    moves = game.legal_moves()
    if depth == 1:
        return len(moves)

    nodes = 0
    for move in moves:
        game.apply_move(move)
        nodes += perft(game, depth - 1)
        game.undo_last_move()
    return nodes


def divide(game: Game, depth: int) -> dict[str, int]:
    """Per-root-move perft counts, keyed by the move's coordinate text."""
    if depth < 1:
        raise ValueError("depth must be >= 1")
    counts: dict[str, int] = {}
    for move in game.legal_moves():
        game.apply_move(move)
        counts[str(move)] = perft(game, depth - 1)
        game.undo_last_move()
    return counts
