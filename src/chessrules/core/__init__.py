"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveResult, board_from_fen, board_to_fen, STARTING_FEN

    board = board_from_fen(STARTING_FEN)
    print(board.legal_moves("g1"))
    assert board.play_move("e2", "e4") == MoveResult.OK
    print(board_to_fen(board))
"""

from chessrules.core.board import Board, CastlingRights
from chessrules.core.enums import Color, MoveResult, MoveShape, PieceType
from chessrules.core.move import MoveRule, PieceMove
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    FenError,
    board_from_fen,
    board_to_fen,
)
from chessrules.core.piece import Piece, move_rules_for
from chessrules.core.types import (
    InvalidSquareFormat,
    Square,
    is_valid_coordinate,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveResult",
    "MoveShape",
    "PieceType",
    # Types / helpers
    "InvalidSquareFormat",
    "Square",
    "is_valid_coordinate",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "MoveGenerator",
    "MoveRule",
    "Piece",
    "PieceMove",
    "move_rules_for",
    # Notation
    "STARTING_FEN",
    "FenError",
    "board_from_fen",
    "board_to_fen",
]
