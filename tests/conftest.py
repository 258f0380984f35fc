"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from gridchess.core.enums import CastlingRights, Color
from gridchess.core.game import Game
from gridchess.notation.grid import board_from_string

GridGameFactory = Callable[..., Game]


@pytest.fixture
def start_game() -> Game:
    """A fresh game from the standard starting position."""
    return Game.standard()


@pytest.fixture
def grid_game() -> GridGameFactory:
    """Build a game from a unicode grid, top row first."""

    def _make(
        width: int,
        height: int,
        text: str,
        side: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
    ) -> Game:
        return Game(board_from_string(width, height, text), side, castling)

    return _make
