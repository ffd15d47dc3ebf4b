"""Declarative move rules and the moves generated from them."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveShape
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveRule:
    """One way a piece type may move: an offset plus the shape interpreting it."""

    shape: MoveShape
    file_offset: int
    rank_offset: int

    @classmethod
    def normal(cls, file_offset: int, rank_offset: int) -> MoveRule:
        return cls(MoveShape.NORMAL, file_offset, rank_offset)

    @classmethod
    def line_of_sight(cls, file_offset: int, rank_offset: int) -> MoveRule:
        return cls(MoveShape.LINE_OF_SIGHT, file_offset, rank_offset)

    @classmethod
    def pawn_single_move(cls, rank_offset: int) -> MoveRule:
        return cls(MoveShape.PAWN_SINGLE_MOVE, 0, rank_offset)

    @classmethod
    def pawn_double_move(cls, rank_offset: int) -> MoveRule:
        return cls(MoveShape.PAWN_DOUBLE_MOVE, 0, rank_offset)

    @classmethod
    def pawn_capture(cls, file_offset: int, rank_offset: int) -> MoveRule:
        return cls(MoveShape.PAWN_CAPTURE, file_offset, rank_offset)

    @classmethod
    def castling(cls, file_offset: int) -> MoveRule:
        return cls(MoveShape.CASTLING, file_offset, 0)


@dataclass(frozen=True, slots=True)
class PieceMove:
    """A concrete destination produced by applying a :class:`MoveRule`."""

    shape: MoveShape
    target: Square

    def __str__(self) -> str:
        return self.target.name
