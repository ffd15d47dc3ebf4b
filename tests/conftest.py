"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.core.notation import STARTING_FEN, board_from_fen

CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


@pytest.fixture
def starting_board() -> Board:
    """Fresh board decoded from the standard starting FEN."""
    return board_from_fen(STARTING_FEN)


@pytest.fixture
def castling_board() -> Board:
    """Kings and rooks only, every castling right available."""
    return board_from_fen(CASTLING_FEN)
