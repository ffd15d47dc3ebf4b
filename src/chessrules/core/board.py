"""Board — piece placement on an 8x8 grid plus game metadata and move application."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chessrules.core.enums import Color, MoveResult, MoveShape, PieceType
from chessrules.core.move import PieceMove
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import Square, SquareLike

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(slots=True)
class CastlingRights:
    """Castling availability for one side."""

    kingside: bool = True
    queenside: bool = True

    @classmethod
    def both(cls) -> CastlingRights:
        return cls(True, True)

    @classmethod
    def none(cls) -> CastlingRights:
        return cls(False, False)

    def copy(self) -> CastlingRights:
        return CastlingRights(self.kingside, self.queenside)


class Board:
    """Mutable chess board: 64 cells, side to move, castling, en passant, clocks.

    Cells are addressed by :class:`Square` or a ``(file, rank)`` pair. The only
    state transition during play is :meth:`play_move`; direct cell and
    metadata edits are meant for setting up a position.
    """

    __slots__ = (
        "_squares",
        "active_color",
        "white_castling",
        "black_castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self.active_color = Color.WHITE
        self.white_castling = CastlingRights.both()
        self.black_castling = CastlingRights.both()
        self.en_passant: Square | None = None
        self.halfmove_clock = 0
        self.fullmove_number = 1

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: SquareLike) -> Piece | None:
        return self._squares[Square.coerce(sq).index]

    def __setitem__(self, sq: SquareLike, piece: Piece | None) -> None:
        square = Square.coerce(sq)
        if piece is not None:
            piece = piece.placed_at(square)
        self._squares[square.index] = piece

    def piece(self, file: int, rank: int) -> Piece | None:
        return self[Square(file, rank)]

    def set_piece(self, file: int, rank: int, piece_type: PieceType, color: Color) -> None:
        """Place a fresh, never-moved piece on (*file*, *rank*)."""
        square = Square(file, rank)
        self._squares[square.index] = Piece(color, piece_type, initial_square=square)

    def remove_piece(self, sq: SquareLike) -> Piece | None:
        """Clear a cell, returning whatever stood there."""
        square = Square.coerce(sq)
        piece = self._squares[square.index]
        self._squares[square.index] = None
        return piece

    def change_piece_type(self, sq: SquareLike, piece_type: PieceType) -> None:
        """Swap the type of the piece on *sq*; used to finish a promotion."""
        square = Square.coerce(sq)
        piece = self._squares[square.index]
        if piece is not None:
            self._squares[square.index] = piece.with_type(piece_type)

    def is_empty(self, sq: SquareLike) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(
        self, color: Color | None = None, piece_type: PieceType | None = None
    ) -> list[tuple[Square, Piece]]:
        """Snapshot of occupied cells, file by file, optionally filtered."""
        found: list[tuple[Square, Piece]] = []
        for file in range(8):
            for rank in range(8):
                piece = self._squares[rank * 8 + file]
                if piece is None:
                    continue
                if color is not None and piece.color != color:
                    continue
                if piece_type is not None and piece.piece_type != piece_type:
                    continue
                found.append((Square(file, rank), piece))
        return found

    def find_piece(self, piece_type: PieceType, color: Color) -> tuple[Square, Piece] | None:
        """First matching piece in :meth:`pieces` order, or ``None``."""
        matches = self.pieces(color, piece_type)
        return matches[0] if matches else None

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        found = self.find_piece(PieceType.KING, color)
        if found is None:
            raise ValueError(f"No {color.name} king on board")
        return found[0]

    def castling(self, color: Color) -> CastlingRights:
        """Castling rights record for *color* (mutable)."""
        return self.white_castling if color == Color.WHITE else self.black_castling

    # -- Move generation ----------------------------------------------------

    def valid_moves(self, sq: SquareLike, check_king_safety: bool = True) -> list[PieceMove]:
        """Moves for the piece on *sq*; empty when the cell is empty."""
        square = Square.coerce(sq)
        piece = self[square]
        if piece is None:
            return []
        return MoveGenerator(self).generate(piece, square, check_king_safety)

    def legal_moves(self, sq: SquareLike) -> list[Square]:
        """Destination squares the piece on *sq* may legally move to."""
        return [move.target for move in self.valid_moves(sq)]

    def is_king_attacked(self, color: Color) -> bool:
        """Is *color*'s king currently attacked? Raises ``ValueError`` if absent."""
        return MoveGenerator(self).is_king_attacked(color)

    # -- Move application ---------------------------------------------------

    def play_move(self, from_sq: SquareLike, to_sq: SquareLike) -> MoveResult:
        """Apply a move if it is legal.

        Returns:
            MoveResult: ``OK`` for a completed move, ``PAWN_PROMOTE`` when a
            pawn reached the last rank (the caller must then call
            :meth:`change_piece_type`), ``INVALID`` when the source is empty
            or the destination is not legal. An invalid move leaves the board
            untouched.
        """
        origin = Square.coerce(from_sq)
        target = Square.coerce(to_sq)

        piece = self[origin]
        if piece is None:
            _LOGGER.debug("Rejected %s%s: no piece on source", origin, target)
            return MoveResult.INVALID

        move = next((m for m in self.valid_moves(origin) if m.target == target), None)
        if move is None:
            _LOGGER.debug("Rejected %s%s: not a legal destination", origin, target)
            return MoveResult.INVALID

        # Clocks
        if piece.piece_type == PieceType.PAWN or self[target] is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        piece = piece.moved(self.fullmove_number)

        # En passant: the captured pawn sits beside the mover, not on the target
        if move.shape == MoveShape.PAWN_CAPTURE and target == self.en_passant:
            capture_rank = 3 if target.rank == 2 else 4
            captured = self.remove_piece(Square(target.file, capture_rank))
            _LOGGER.debug("En passant on %s removed %s", target, captured)

        # Slide the rook for castling
        if move.shape == MoveShape.CASTLING:
            if target.file > origin.file:
                rook_from, rook_to = Square(7, target.rank), Square(target.file - 1, target.rank)
            else:
                rook_from, rook_to = Square(0, target.rank), Square(target.file + 1, target.rank)
            rook = self.remove_piece(rook_from)
            assert rook is not None
            self[rook_to] = rook.moved(self.fullmove_number)
            _LOGGER.debug("Castling moved rook %s -> %s", rook_from, rook_to)

        self._squares[origin.index] = None
        self._squares[target.index] = piece

        self._update_en_passant(move)
        self._update_castling(piece)

        if self.active_color == Color.BLACK:
            self.fullmove_number += 1
        self.active_color = self.active_color.opposite

        if piece.piece_type == PieceType.PAWN and target.rank in (0, 7):
            _LOGGER.debug("Pawn on %s awaits promotion", target)
            return MoveResult.PAWN_PROMOTE
        return MoveResult.OK

    def _update_en_passant(self, move: PieceMove) -> None:
        en_passant: Square | None = None
        if move.shape == MoveShape.PAWN_DOUBLE_MOVE:
            if move.target.rank == 3:
                en_passant = Square(move.target.file, 2)
            elif move.target.rank == 4:
                en_passant = Square(move.target.file, 5)
        self.en_passant = en_passant

    def _update_castling(self, moved: Piece) -> None:
        rights = self.castling(moved.color)
        if moved.piece_type == PieceType.KING:
            rights.kingside = False
            rights.queenside = False
        elif moved.piece_type == PieceType.ROOK and moved.initial_square is not None:
            # Keyed on the rook's starting file: file 0 drops the kingside flag,
            # file 7 the queenside flag.
            if moved.initial_square.file == 0:
                rights.kingside = False
            elif moved.initial_square.file == 7:
                rights.queenside = False

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b.active_color = self.active_color
        b.white_castling = self.white_castling.copy()
        b.black_castling = self.black_castling.copy()
        b.en_passant = self.en_passant
        b.halfmove_clock = self.halfmove_clock
        b.fullmove_number = self.fullmove_number
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b.set_piece(f, 0, pt, Color.WHITE)
            b.set_piece(f, 1, PieceType.PAWN, Color.WHITE)
            b.set_piece(f, 6, PieceType.PAWN, Color.BLACK)
            b.set_piece(f, 7, pt, Color.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.active_color == other.active_color
            and self.white_castling == other.white_castling
            and self.black_castling == other.black_castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.piece(file, rank)
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
