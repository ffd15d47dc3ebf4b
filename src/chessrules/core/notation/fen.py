"""FEN parsing and serialization."""

from __future__ import annotations

from chessrules.core.board import Board, CastlingRights
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import InvalidSquareFormat, Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class FenError(ValueError):
    """Raised when FEN text is malformed."""


def board_from_fen(fen: str) -> Board:
    """Parse a six-field FEN string into a :class:`Board`."""
    parts = fen.split()
    if len(parts) != 6:
        raise FenError(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                if ch not in "12345678":
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += int(ch)
            else:
                if file >= 8:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    piece = Piece.from_char(ch)
                except ValueError as exc:
                    raise FenError(f"Invalid FEN piece {ch!r}: {fen!r}") from exc
                board.set_piece(file, rank, piece.piece_type, piece.color)
                file += 1
            if file > 8:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise FenError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        board.active_color = Color.WHITE
    elif side_part == "b":
        board.active_color = Color.BLACK
    else:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    white = CastlingRights.none()
    black = CastlingRights.none()
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            if ch not in "KQkq" or ch in seen:
                raise FenError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
        white.kingside = "K" in seen
        white.queenside = "Q" in seen
        black.kingside = "k" in seen
        black.queenside = "q" in seen
    board.white_castling = white
    board.black_castling = black

    # 4. En passant
    if ep_part != "-":
        try:
            ep = Square.from_name(ep_part)
        except InvalidSquareFormat as exc:
            raise FenError(f"Invalid FEN en-passant square: {ep_part!r}") from exc
        if ep.rank not in (2, 5):
            raise FenError(f"Invalid FEN en-passant square: {ep_part!r}")
        board.en_passant = ep

    # 5–6. Clocks
    # Plain ASCII digits only; int() would also take signs, underscores
    # and non-ASCII digits.
    if not all(part.isascii() and part.isdecimal() for part in (halfmove_part, fullmove_part)):
        raise FenError(f"Invalid FEN move counters: {fen!r}")
    halfmove = int(halfmove_part)
    fullmove = int(fullmove_part)
    if fullmove < 1:
        raise FenError(f"Invalid FEN fullmove number: {fullmove_part!r}")
    board.halfmove_clock = halfmove
    board.fullmove_number = fullmove

    return board


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board.piece(file, rank)
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if board.active_color == Color.WHITE else "b"

    # 3. Castling
    castling_str = ""
    if board.white_castling.kingside:
        castling_str += "K"
    if board.white_castling.queenside:
        castling_str += "Q"
    if board.black_castling.kingside:
        castling_str += "k"
    if board.black_castling.queenside:
        castling_str += "q"
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = board.en_passant.name if board.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {board.halfmove_clock} {board.fullmove_number}"
