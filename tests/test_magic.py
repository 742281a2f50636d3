import random

import pytest

from polarchess import magic
from polarchess.bitboard import ALL, popcount
from polarchess.core import Square, square_bit
from polarchess.sliding import (
    bishop_attacks_slow,
    empty_board_bishops,
    empty_board_rooks,
    rook_attacks_slow,
)


def _random_occupancies(seed, count):
    rng = random.Random(seed)
    return [rng.getrandbits(64) & rng.getrandbits(64) for _ in range(count)]


@pytest.mark.parametrize("index", range(64))
def test_rook_attacks_match_ray_walk(index):
    square = Square(index)
    for occupancy in _random_occupancies(index, 40):
        assert magic.rook_attacks(square, occupancy) == rook_attacks_slow(square, occupancy)


@pytest.mark.parametrize("index", range(64))
def test_bishop_attacks_match_ray_walk(index):
    square = Square(index)
    for occupancy in _random_occupancies(1000 + index, 40):
        assert magic.bishop_attacks(square, occupancy) == bishop_attacks_slow(square, occupancy)


def test_empty_board_lookups():
    for index in range(64):
        square = Square(index)
        assert magic.rook_attacks(square, 0) == empty_board_rooks(square)
        assert magic.bishop_attacks(square, 0) == empty_board_bishops(square)


def test_full_board_rook_attacks_are_neighbours_only():
    attacks = magic.rook_attacks(Square.D4, ALL)
    expected = (
        square_bit(Square.D5)
        | square_bit(Square.D3)
        | square_bit(Square.C4)
        | square_bit(Square.E4)
    )
    assert attacks == expected


def test_index_ignores_irrelevant_squares():
    for index in range(64):
        square = Square(index)
        rook_mask = magic.ROOK_DATA.squares[index].mask
        bishop_mask = magic.BISHOP_DATA.squares[index].mask
        for occupancy in _random_occupancies(index + 7, 5):
            assert magic.rook_index(occupancy, square) == magic.rook_index(
                occupancy | rook_mask, square
            )
            assert magic.bishop_index(occupancy, square) == magic.bishop_index(
                occupancy | bishop_mask, square
            )


def test_indices_fit_within_square_slice():
    for index in range(64):
        square = Square(index)
        for occupancy in _random_occupancies(index + 99, 10):
            assert magic.rook_index(occupancy, square) < 1 << (64 - magic.ROOK_SHIFTS[index])
            assert magic.bishop_index(occupancy, square) < 1 << (64 - magic.BISHOP_SHIFTS[index])


@pytest.mark.parametrize("data", [magic.ROOK_DATA, magic.BISHOP_DATA])
def test_offsets_increase_and_fit_table(data):
    offsets = [entry.offset for entry in data.squares]
    assert offsets[0] == 0
    assert offsets == sorted(set(offsets))
    assert offsets[-1] < data.table_size


def test_relevant_masks_are_within_empty_board_attacks():
    for index in range(64):
        square = Square(index)
        rook_relevant = magic.ROOK_DATA.squares[index].relevant
        bishop_relevant = magic.BISHOP_DATA.squares[index].relevant
        assert rook_relevant & ~empty_board_rooks(square) == 0
        assert bishop_relevant & ~empty_board_bishops(square) == 0
        assert rook_relevant & square_bit(square) == 0


def test_known_relevant_bit_counts():
    assert popcount(magic.ROOK_DATA.squares[int(Square.A1)].relevant) == 12
    assert popcount(magic.BISHOP_DATA.squares[int(Square.D4)].relevant) == 9