import pytest

from polarchess import bitboard as bb
from polarchess.core import Square, square_bit, square_file, square_rank, to_square
from polarchess.sliding import (
    bishop_attacks_slow,
    edges,
    empty_board_bishops,
    empty_board_rooks,
    generate_sliding_attacks,
    rook_attacks_slow,
)


def test_edges():
    assert edges(bb.UP) == bb.RANK_8
    assert edges(bb.LEFT) == bb.FILE_A
    assert edges(bb.DOWN_RIGHT) == bb.FILE_H | bb.RANK_1


def test_edges_rejects_unknown_direction():
    with pytest.raises(ValueError):
        edges(3)


def test_single_ray_on_empty_board():
    assert generate_sliding_attacks(Square.A1, bb.UP, 0) == bb.FILE_A ^ square_bit(Square.A1)
    assert generate_sliding_attacks(Square.H1, bb.LEFT, 0) == bb.RANK_1 ^ square_bit(Square.H1)


def test_ray_from_edge_is_empty():
    assert generate_sliding_attacks(Square.A8, bb.UP, 0) == 0
    assert generate_sliding_attacks(Square.A4, bb.LEFT, 0) == 0


def test_ray_stops_at_blocker():
    attacks = generate_sliding_attacks(Square.A1, bb.UP, square_bit(Square.A3))
    assert attacks == square_bit(Square.A2) | square_bit(Square.A3)


def test_rook_from_corner():
    a1 = square_bit(Square.A1)
    assert rook_attacks_slow(Square.A1, 0) == (bb.FILE_A | bb.RANK_1) ^ a1


def test_bishop_from_corner_is_long_diagonal():
    expected = 0
    for i in range(1, 8):
        expected |= square_bit(to_square(i, i))
    assert bishop_attacks_slow(Square.A1, 0) == expected


def test_empty_board_tables_match_slow_generation():
    for sq in bb.iter_squares(bb.ALL):
        assert empty_board_rooks(sq) == rook_attacks_slow(sq, 0)
        assert empty_board_bishops(sq) == bishop_attacks_slow(sq, 0)


def test_empty_board_rook_always_covers_rank_and_file():
    for sq in bb.iter_squares(bb.ALL):
        expected = (bb.RANKS[square_rank(sq)] | bb.FILES[square_file(sq)]) ^ square_bit(sq)
        assert empty_board_rooks(sq) == expected


def test_attacks_never_include_source_and_are_symmetric():
    for a in bb.iter_squares(bb.ALL):
        rook = empty_board_rooks(a)
        bishop = empty_board_bishops(a)
        assert rook & square_bit(a) == 0
        assert bishop & square_bit(a) == 0
        assert rook & bishop == 0
        for b in bb.iter_squares(rook):
            assert empty_board_rooks(b) & square_bit(a)
        for b in bb.iter_squares(bishop):
            assert empty_board_bishops(b) & square_bit(a)


def test_occupancy_only_shrinks_attacks():
    occupancy = square_bit(Square.D6) | square_bit(Square.F4) | square_bit(Square.B2)
    rook = rook_attacks_slow(Square.D4, occupancy)
    bishop = bishop_attacks_slow(Square.D4, occupancy)
    assert rook & ~empty_board_rooks(Square.D4) == 0
    assert bishop & ~empty_board_bishops(Square.D4) == 0
    assert rook & square_bit(Square.D6)
    assert rook & square_bit(Square.D7) == 0
    assert bishop & square_bit(Square.B2)
    assert bishop & square_bit(Square.A1) == 0