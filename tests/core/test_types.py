"""Tests for the Square value object."""

import pytest

from chessrules.core.types import (
    A1, E2, E4, H8,
    InvalidSquareFormat,
    Square,
    is_valid_coordinate,
    parse_square,
    square_name,
)


class TestSquareParsing:
    def test_parse_e4(self) -> None:
        assert Square.from_name("e4") == Square(4, 3)

    def test_parse_corners(self) -> None:
        assert parse_square("a1") == Square(0, 0)
        assert parse_square("h8") == Square(7, 7)

    def test_parse_is_case_insensitive(self) -> None:
        assert parse_square("D2") == Square(3, 1)

    @pytest.mark.parametrize(
        "text", ["", "e", "e44", "i4", "e9", "e0", "4e", "ee", "44", "a?", "?1"]
    )
    def test_invalid_text_raises(self, text: str) -> None:
        with pytest.raises(InvalidSquareFormat):
            Square.from_name(text)

    def test_invalid_format_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square("z9")


class TestSquareRendering:
    def test_str(self) -> None:
        assert str(Square(4, 3)) == "e4"

    def test_square_name(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"

    def test_every_square_round_trips_through_text(self) -> None:
        for file in range(8):
            for rank in range(8):
                sq = Square(file, rank)
                assert parse_square(sq.name) == sq

    def test_index(self) -> None:
        assert A1.index == 0
        assert E4.index == 28
        assert H8.index == 63


class TestSquareConstruction:
    @pytest.mark.parametrize("file, rank", [(8, 0), (0, 8), (-1, 0), (0, -1)])
    def test_out_of_range_raises(self, file: int, rank: int) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Square(file, rank)

    def test_is_valid_coordinate(self) -> None:
        assert is_valid_coordinate(0, 7)
        assert not is_valid_coordinate(7, 8)

    def test_offset_on_board(self) -> None:
        assert E2.offset(0, 2) == E4

    def test_offset_off_board(self) -> None:
        assert A1.offset(-1, 0) is None
        assert H8.offset(0, 1) is None

    def test_coerce_accepts_pairs_and_text(self) -> None:
        assert Square.coerce((4, 3)) == E4
        assert Square.coerce([4, 3]) == E4
        assert Square.coerce("e4") == E4
        assert Square.coerce(E4) is E4

    def test_hashable(self) -> None:
        assert len({Square(1, 1), Square(1, 1), Square(2, 1)}) == 2
