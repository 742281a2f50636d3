import pytest

from polarchess.bitboard import iter_squares, popcount
from polarchess.core import Square, chebyshev, square_file, square_rank
from polarchess.rays import ray_between

SQUARES = list(Square)[:64]


def _aligned(a, b):
    df = square_file(b) - square_file(a)
    dr = square_rank(b) - square_rank(a)
    return a != b and (df == 0 or dr == 0 or abs(df) == abs(dr))


def test_long_diagonal():
    expected = {Square.B2, Square.C3, Square.D4, Square.E5, Square.F6, Square.G7}
    assert set(iter_squares(ray_between(Square.A1, Square.H8))) == expected


def test_along_rank():
    expected = {Square.B1, Square.C1, Square.D1}
    assert set(iter_squares(ray_between(Square.A1, Square.E1))) == expected


def test_along_file():
    expected = {Square.E3, Square.E4, Square.E5, Square.E6}
    assert set(iter_squares(ray_between(Square.E7, Square.E2))) == expected


def test_same_square_is_empty():
    for square in SQUARES:
        assert ray_between(square, square) == 0


def test_knight_jump_is_empty():
    assert ray_between(Square.A1, Square.B3) == 0


def test_adjacent_squares_are_empty():
    assert ray_between(Square.D4, Square.E5) == 0
    assert ray_between(Square.D4, Square.D5) == 0


@pytest.mark.parametrize("src", SQUARES)
def test_symmetric(src):
    for dst in SQUARES:
        assert ray_between(src, dst) == ray_between(dst, src)


@pytest.mark.parametrize("src", SQUARES)
def test_length_matches_distance(src):
    for dst in SQUARES:
        ray = ray_between(src, dst)
        if _aligned(src, dst):
            assert popcount(ray) == chebyshev(src, dst) - 1
        else:
            assert ray == 0


@pytest.mark.parametrize("src", SQUARES)
def test_ray_squares_lie_between(src):
    for dst in SQUARES:
        for mid in iter_squares(ray_between(src, dst)):
            assert chebyshev(src, mid) + chebyshev(mid, dst) == chebyshev(src, dst)