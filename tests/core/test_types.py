"""Tests for Coordinate and algebraic notation helpers."""

import pytest

from chessfinder.core.errors import InvalidSquareError
from chessfinder.core.types import (
    Coordinate,
    as_coordinate,
    is_in_bounds,
    make_coordinate,
    parse_square,
    square_name,
)

ALL_SQUARES = [f + r for f in "abcdefgh" for r in "12345678"]


class TestSquareNames:
    def test_corners(self) -> None:
        assert parse_square("a8") == Coordinate(0, 0)
        assert parse_square("h8") == Coordinate(7, 0)
        assert parse_square("a1") == Coordinate(0, 7)
        assert parse_square("h1") == Coordinate(7, 7)

    def test_e4(self) -> None:
        assert parse_square("e4") == Coordinate(4, 4)
        assert square_name(Coordinate(4, 4)) == "e4"

    @pytest.mark.parametrize("name", ALL_SQUARES)
    def test_round_trip(self, name: str) -> None:
        assert square_name(parse_square(name)) == name

    def test_all_squares_distinct(self) -> None:
        assert len({parse_square(name) for name in ALL_SQUARES}) == 64

    @pytest.mark.parametrize("name", ["", "e", "i1", "a0", "a9", "E4", "e44", "4e", "e4\n"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(InvalidSquareError, match="Invalid square"):
            parse_square(name)

    def test_invalid_square_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_square("z9")


class TestCoordinate:
    def test_out_of_bounds_rejected(self) -> None:
        with pytest.raises(InvalidSquareError):
            Coordinate(8, 0)
        with pytest.raises(InvalidSquareError):
            make_coordinate(0, -1)

    def test_is_in_bounds(self) -> None:
        assert is_in_bounds(0, 0)
        assert is_in_bounds(7, 7)
        assert not is_in_bounds(-1, 3)
        assert not is_in_bounds(3, 8)

    def test_offset(self) -> None:
        e4 = parse_square("e4")
        assert e4.offset(0, -1) == parse_square("e5")
        assert e4.offset(1, 1) == parse_square("f3")
        assert parse_square("a1").offset(-1, 0) is None

    def test_hashable_and_ordered(self) -> None:
        coords = {Coordinate(1, 2), Coordinate(1, 2), Coordinate(0, 0)}
        assert len(coords) == 2
        assert sorted(coords) == [Coordinate(0, 0), Coordinate(1, 2)]

    def test_str(self) -> None:
        assert str(Coordinate(3, 4)) == "d4"
        assert Coordinate(3, 4).name == "d4"

    def test_as_coordinate(self) -> None:
        coord = Coordinate(2, 2)
        assert as_coordinate(coord) is coord
        assert as_coordinate("c6") == coord
