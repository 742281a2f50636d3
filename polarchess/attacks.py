"""Attack lookups for every piece kind."""

from __future__ import annotations

from . import magic
from .bitboard import (
    shift_down,
    shift_down_down_left,
    shift_down_down_right,
    shift_down_left,
    shift_down_left_left,
    shift_down_right,
    shift_down_right_right,
    shift_left,
    shift_right,
    shift_up,
    shift_up_left,
    shift_up_left_left,
    shift_up_left_relative,
    shift_up_right,
    shift_up_right_relative,
    shift_up_right_right,
    shift_up_up_left,
    shift_up_up_right,
)
from .core import Color, Square, square_bit

_KNIGHT_STEPS = (
    shift_up_up_left,
    shift_up_up_right,
    shift_up_left_left,
    shift_up_right_right,
    shift_down_left_left,
    shift_down_right_right,
    shift_down_down_left,
    shift_down_down_right,
)

_KING_STEPS = (
    shift_up,
    shift_down,
    shift_left,
    shift_right,
    shift_up_left,
    shift_up_right,
    shift_down_left,
    shift_down_right,
)


def _step_table(steps) -> tuple[int, ...]:
    table = []
    for index in range(64):
        bit = square_bit(Square(index))
        attacks = 0
        for step in steps:
            attacks |= step(bit)
        table.append(attacks)
    return tuple(table)


def _pawn_table(color: Color) -> tuple[int, ...]:
    return tuple(
        shift_up_left_relative(square_bit(Square(i)), color)
        | shift_up_right_relative(square_bit(Square(i)), color)
        for i in range(64)
    )


KNIGHT_ATTACKS = _step_table(_KNIGHT_STEPS)
KING_ATTACKS = _step_table(_KING_STEPS)
BLACK_PAWN_ATTACKS = _pawn_table(Color.BLACK)
WHITE_PAWN_ATTACKS = _pawn_table(Color.WHITE)


def knight_attacks(square: Square) -> int:
    """Squares a knight on the given square attacks."""
    return KNIGHT_ATTACKS[int(square)]


def king_attacks(square: Square) -> int:
    """Squares a king on the given square attacks."""
    return KING_ATTACKS[int(square)]


def pawn_attacks(square: Square, color: Color) -> int:
    """Squares a pawn of the given colour on the given square attacks."""
    table = WHITE_PAWN_ATTACKS if color == Color.WHITE else BLACK_PAWN_ATTACKS
    return table[int(square)]


def rook_attacks(square: Square, occupancy: int) -> int:
    """Rook attacks from a square given the board occupancy."""
    return magic.rook_attacks(square, occupancy)


def bishop_attacks(square: Square, occupancy: int) -> int:
    """Bishop attacks from a square given the board occupancy."""
    return magic.bishop_attacks(square, occupancy)


def queen_attacks(square: Square, occupancy: int) -> int:
    """Queen attacks: the union of rook and bishop attacks."""
    return rook_attacks(square, occupancy) | bishop_attacks(square, occupancy)