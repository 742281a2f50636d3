"""Ray-walking generation of sliding piece attacks."""

from __future__ import annotations

from .bitboard import (
    ALL,
    DOWN,
    DOWN_LEFT,
    DOWN_RIGHT,
    FILE_A,
    FILE_H,
    LEFT,
    RANK_1,
    RANK_8,
    RIGHT,
    UP,
    UP_LEFT,
    UP_RIGHT,
)
from .core import Square, square_bit

ROOK_DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
BISHOP_DIRECTIONS = (UP_LEFT, UP_RIGHT, DOWN_LEFT, DOWN_RIGHT)

_EDGES = {
    UP: RANK_8,
    DOWN: RANK_1,
    LEFT: FILE_A,
    RIGHT: FILE_H,
    UP_LEFT: FILE_A | RANK_8,
    UP_RIGHT: FILE_H | RANK_8,
    DOWN_LEFT: FILE_A | RANK_1,
    DOWN_RIGHT: FILE_H | RANK_1,
}


def edges(direction: int) -> int:
    """The board edge a ray in the given direction stops at."""
    try:
        return _EDGES[direction]
    except KeyError:
        raise ValueError(f"not a sliding direction: {direction}") from None


def generate_sliding_attacks(square: Square, direction: int, occupancy: int) -> int:
    """Squares reached along one ray, stopping at (and including) the first blocker."""
    blockers = edges(direction)
    bit = square_bit(square)
    if blockers & bit:
        return 0

    blockers |= occupancy
    towards_low = direction < 0
    shift = abs(direction)

    attacks = 0
    while True:
        bit = bit >> shift if towards_low else (bit << shift) & ALL
        attacks |= bit
        if bit & blockers or not bit:
            return attacks


def _all_sliding_attacks(square: Square, directions: tuple[int, ...], occupancy: int) -> int:
    attacks = 0
    for direction in directions:
        attacks |= generate_sliding_attacks(square, direction, occupancy)
    return attacks


def rook_attacks_slow(square: Square, occupancy: int) -> int:
    """Rook attacks computed by walking each ray."""
    return _all_sliding_attacks(square, ROOK_DIRECTIONS, occupancy)


def bishop_attacks_slow(square: Square, occupancy: int) -> int:
    """Bishop attacks computed by walking each ray."""
    return _all_sliding_attacks(square, BISHOP_DIRECTIONS, occupancy)


_EMPTY_BOARD_ROOKS = tuple(rook_attacks_slow(Square(i), 0) for i in range(64))
_EMPTY_BOARD_BISHOPS = tuple(bishop_attacks_slow(Square(i), 0) for i in range(64))


def empty_board_rooks(square: Square) -> int:
    """Rook attacks from a square on an empty board."""
    return _EMPTY_BOARD_ROOKS[int(square)]


def empty_board_bishops(square: Square) -> int:
    """Bishop attacks from a square on an empty board."""
    return _EMPTY_BOARD_BISHOPS[int(square)]