"""Piece value object and per-piece move rule tables."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import MoveRule
from chessrules.core.types import Square

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


# ── Move rule tables ─────────────────────────────────────────────────────────

_ROOK_RULES: tuple[MoveRule, ...] = (
    MoveRule.line_of_sight(1, 0),
    MoveRule.line_of_sight(-1, 0),
    MoveRule.line_of_sight(0, 1),
    MoveRule.line_of_sight(0, -1),
)

_BISHOP_RULES: tuple[MoveRule, ...] = (
    MoveRule.line_of_sight(1, 1),
    MoveRule.line_of_sight(-1, 1),
    MoveRule.line_of_sight(1, -1),
    MoveRule.line_of_sight(-1, -1),
)

_KNIGHT_RULES: tuple[MoveRule, ...] = (
    MoveRule.normal(1, 2),
    MoveRule.normal(1, -2),
    MoveRule.normal(-1, 2),
    MoveRule.normal(-1, -2),
    MoveRule.normal(2, -1),
    MoveRule.normal(2, 1),
    MoveRule.normal(-2, -1),
    MoveRule.normal(-2, 1),
)

# Castling -3 lands the king on the b-file with the rook beside it on c.
_KING_RULES: tuple[MoveRule, ...] = (
    MoveRule.normal(1, 1),
    MoveRule.normal(-1, -1),
    MoveRule.normal(1, -1),
    MoveRule.normal(-1, 1),
    MoveRule.normal(0, 1),
    MoveRule.normal(0, -1),
    MoveRule.normal(1, 0),
    MoveRule.normal(-1, 0),
    MoveRule.castling(-2),
    MoveRule.castling(-3),
    MoveRule.castling(2),
)


def _pawn_rules(color: Color) -> tuple[MoveRule, ...]:
    dr = color.forward
    return (
        MoveRule.pawn_single_move(dr),
        MoveRule.pawn_double_move(2 * dr),
        MoveRule.pawn_capture(-1, dr),
        MoveRule.pawn_capture(1, dr),
    )


_MOVE_RULES: dict[tuple[PieceType, Color], tuple[MoveRule, ...]] = {}
for _color in Color:
    _MOVE_RULES[(PieceType.PAWN, _color)] = _pawn_rules(_color)
    _MOVE_RULES[(PieceType.KNIGHT, _color)] = _KNIGHT_RULES
    _MOVE_RULES[(PieceType.BISHOP, _color)] = _BISHOP_RULES
    _MOVE_RULES[(PieceType.ROOK, _color)] = _ROOK_RULES
    _MOVE_RULES[(PieceType.QUEEN, _color)] = _ROOK_RULES + _BISHOP_RULES
    _MOVE_RULES[(PieceType.KING, _color)] = _KING_RULES
del _color


def move_rules_for(piece_type: PieceType, color: Color) -> tuple[MoveRule, ...]:
    """Ordered move rules for a piece type and color."""
    return _MOVE_RULES[(piece_type, color)]


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece on a board cell.

    Equality only considers color and type; the history fields travel with
    the value but are not part of its identity.
    """

    color: Color
    piece_type: PieceType
    initial_square: Square | None = field(default=None, compare=False)
    move_count: int = field(default=0, compare=False)
    last_move_turn: int | None = field(default=None, compare=False)

    @property
    def has_moved(self) -> bool:
        return self.move_count > 0

    @property
    def move_rules(self) -> tuple[MoveRule, ...]:
        return move_rules_for(self.piece_type, self.color)

    # ── Copy helpers ─────────────────────────────────────────────────────

    def placed_at(self, square: Square) -> Piece:
        """Copy with *square* recorded as the starting square if none is set."""
        if self.initial_square is not None:
            return self
        return replace(self, initial_square=square)

    def moved(self, turn: int | None = None) -> Piece:
        """Copy with the move counter incremented."""
        return replace(self, move_count=self.move_count + 1, last_move_turn=turn)

    def with_type(self, piece_type: PieceType) -> Piece:
        """Copy with a different type, keeping the history."""
        return replace(self, piece_type=piece_type)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)
