"""Rule-driven move generation, king-safety filtering and attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, MoveShape, PieceType
from chessrules.core.move import MoveRule, PieceMove
from chessrules.core.piece import Piece
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board


# Shapes that can never land on an occupied square, so they never attack.
_NON_CAPTURING: frozenset[MoveShape] = frozenset(
    (MoveShape.PAWN_SINGLE_MOVE, MoveShape.PAWN_DOUBLE_MOVE, MoveShape.CASTLING)
)


class MoveGenerator:
    """Expands a piece's :class:`MoveRule` table into concrete moves on a board.

    The generator never mutates the board it wraps. King-safety checks run
    against throwaway copies made with :meth:`Board.copy`.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate(
        self, piece: Piece, square: Square, check_king_safety: bool = True
    ) -> list[PieceMove]:
        """All moves for *piece* standing on *square*, in rule-table order."""
        moves: list[PieceMove] = []
        for rule in piece.move_rules:
            moves.extend(self.generate_for_rule(piece, square, rule, check_king_safety))
        return moves

    def generate_for_rule(
        self,
        piece: Piece,
        square: Square,
        rule: MoveRule,
        check_king_safety: bool = True,
    ) -> list[PieceMove]:
        """Moves produced by a single *rule* for *piece* on *square*."""
        target = square.offset(rule.file_offset, rule.rank_offset)
        if target is None:
            return []

        board = self._board
        occupant = board[target]
        shape = rule.shape
        moves: list[PieceMove] = []

        if shape == MoveShape.NORMAL:
            if occupant is None or occupant.color != piece.color:
                moves.append(PieceMove(shape, target))

        elif shape == MoveShape.LINE_OF_SIGHT:
            moves.extend(self._ray(piece, target, rule))

        elif shape == MoveShape.PAWN_SINGLE_MOVE:
            if occupant is None:
                moves.append(PieceMove(shape, target))

        elif shape == MoveShape.PAWN_DOUBLE_MOVE:
            # Only the landing square is checked, not the one skipped over.
            if not piece.has_moved and occupant is None:
                moves.append(PieceMove(shape, target))

        elif shape == MoveShape.PAWN_CAPTURE:
            if (
                occupant is not None and occupant.color != piece.color
            ) or target == board.en_passant:
                moves.append(PieceMove(shape, target))

        elif shape == MoveShape.CASTLING:
            if occupant is None and self._can_castle(piece, square, rule):
                moves.append(PieceMove(shape, target))

        if check_king_safety:
            moves = [m for m in moves if self._is_safe(piece, square, m.target)]
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_king_attacked(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        Raises:
            ValueError: If *color* has no king on the board.
        """
        king_sq = self._board.king_square(color)
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Could a piece of the other side standing on *sq* be captured by *by_color*?"""
        for origin, piece in self._board.pieces(by_color):
            for rule in piece.move_rules:
                if rule.shape in _NON_CAPTURING:
                    continue
                for move in self.generate_for_rule(piece, origin, rule, False):
                    if move.target == sq:
                        return True
        return False

    # -- Internals ----------------------------------------------------------

    def _ray(self, piece: Piece, start: Square, rule: MoveRule) -> list[PieceMove]:
        moves: list[PieceMove] = []
        target: Square | None = start
        while target is not None:
            occupant = self._board[target]
            if occupant is not None:
                if occupant.color != piece.color:
                    moves.append(PieceMove(rule.shape, target))
                break
            moves.append(PieceMove(rule.shape, target))
            target = target.offset(rule.file_offset, rule.rank_offset)
        return moves

    def _can_castle(self, king: Piece, square: Square, rule: MoveRule) -> bool:
        if king.has_moved:
            return False

        rook_file, direction = (0, -1) if rule.file_offset < 0 else (7, 1)
        rook = self._board[Square(rook_file, square.rank)]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != king.color
            or rook.has_moved
        ):
            return False

        path = self.generate_for_rule(
            king, square, MoveRule.line_of_sight(direction, 0), False
        )
        if len(path) != abs(square.file - rook_file) - 1:
            return False

        return not self.is_king_attacked(king.color)

    def _is_safe(self, piece: Piece, origin: Square, target: Square) -> bool:
        trial = self._board.copy()
        trial[target] = piece
        trial[origin] = None
        return not MoveGenerator(trial).is_king_attacked(piece.color)
