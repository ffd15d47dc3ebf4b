"""Notation package: FEN parsing and serialization."""

from chessrules.core.notation.fen import (
    STARTING_FEN,
    FenError,
    board_from_fen,
    board_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "FenError",
    "board_from_fen",
    "board_to_fen",
]
