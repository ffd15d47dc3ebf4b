"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction pawns of this color advance in."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveShape(IntEnum):
    """How a single move rule is interpreted by the generator."""

    NORMAL = 0
    LINE_OF_SIGHT = 1
    PAWN_SINGLE_MOVE = 2
    PAWN_DOUBLE_MOVE = 3
    PAWN_CAPTURE = 4
    CASTLING = 5


class MoveResult(IntEnum):
    """Outcome of :meth:`Board.play_move`."""

    OK = 0
    PAWN_PROMOTE = 1
    INVALID = 2
