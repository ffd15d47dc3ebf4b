"""Square value object and coordinate helpers.

Files and ranks are zero-based from White's perspective:
    a1 = Square(0, 0), h1 = Square(7, 0), a8 = Square(0, 7), h8 = Square(7, 7)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

_FILES = "abcdefgh"
_RANKS = "12345678"


class InvalidSquareFormat(ValueError):
    """Raised when algebraic square text cannot be parsed."""


def is_valid_coordinate(file: int, rank: int) -> bool:
    """Check whether both coordinates lie on the board."""
    return 0 <= file < 8 and 0 <= rank < 8


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate, e.g. ``Square(4, 3)`` is e4."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_valid_coordinate(self.file, self.rank):
            raise ValueError(f"Square out of range: ({self.file}, {self.rank})")

    # ── Conversion ───────────────────────────────────────────────────────

    @classmethod
    def from_name(cls, name: str) -> Square:
        """Parse algebraic text such as ``'e4'`` (case-insensitive)."""
        if len(name) != 2:
            raise InvalidSquareFormat(f"Invalid square name: {name!r}")
        file_char, rank_char = name[0].lower(), name[1]
        if file_char not in _FILES or rank_char not in _RANKS:
            raise InvalidSquareFormat(f"Invalid square name: {name!r}")
        return cls(_FILES.index(file_char), _RANKS.index(rank_char))

    @classmethod
    def coerce(cls, value: SquareLike) -> Square:
        """Accept a Square, a ``(file, rank)`` pair or an algebraic string."""
        if isinstance(value, Square):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        file, rank = value
        return cls(int(file), int(rank))

    @property
    def name(self) -> str:
        return _FILES[self.file] + _RANKS[self.rank]

    @property
    def index(self) -> int:
        """Flat 0–63 index (a1=0 … h8=63)."""
        return self.rank * 8 + self.file

    def offset(self, file_offset: int, rank_offset: int) -> Square | None:
        """Shifted square, or ``None`` when it falls off the board."""
        file = self.file + file_offset
        rank = self.rank + rank_offset
        if not is_valid_coordinate(file, rank):
            return None
        return Square(file, rank)

    def __str__(self) -> str:
        return self.name


SquareLike: TypeAlias = "Square | str | Sequence[int]"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 3)."""
    return Square.from_name(name)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(0, 0) → 'a1'."""
    return sq.name


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
