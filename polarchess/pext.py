"""Sliding attack lookup indexed by parallel bit extraction.

Rook attacks are stored compressed: each entry holds only the bits of the
empty-board attack set, extracted with pext and expanded again with pdep.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache

from .bitboard import ALL, popcount
from .core import Square
from .sliding import (
    BISHOP_DIRECTIONS,
    ROOK_DIRECTIONS,
    bishop_attacks_slow,
    edges,
    generate_sliding_attacks,
    rook_attacks_slow,
)


def pext(value: int, mask: int) -> int:
    """Gather the bits of value selected by mask into the low bits of the result."""
    mask &= ALL
    result = 0
    out = 1
    while mask:
        low = mask & -mask
        if value & low:
            result |= out
        out <<= 1
        mask ^= low
    return result


def pdep(value: int, mask: int) -> int:
    """Scatter the low bits of value to the positions selected by mask."""
    mask &= ALL
    result = 0
    source = 1
    while mask:
        low = mask & -mask
        if value & source:
            result |= low
        source <<= 1
        mask ^= low
    return result


@dataclass(frozen=True)
class _RookSquareData:
    src_mask: int
    dst_mask: int
    offset: int


@dataclass(frozen=True)
class _BishopSquareData:
    mask: int
    offset: int


def _rook_data() -> tuple[tuple[_RookSquareData, ...], int]:
    squares = []
    size = 0
    for index in range(64):
        src_mask = 0
        dst_mask = 0
        for direction in ROOK_DIRECTIONS:
            attacks = generate_sliding_attacks(Square(index), direction, 0)
            src_mask |= attacks & ~edges(direction)
            dst_mask |= attacks
        src_mask &= ALL
        squares.append(_RookSquareData(src_mask, dst_mask, size))
        size += 1 << popcount(src_mask)
    return tuple(squares), size


def _bishop_data() -> tuple[tuple[_BishopSquareData, ...], int]:
    squares = []
    size = 0
    for index in range(64):
        mask = 0
        for direction in BISHOP_DIRECTIONS:
            attacks = generate_sliding_attacks(Square(index), direction, 0)
            mask |= attacks & ~edges(direction)
        mask &= ALL
        squares.append(_BishopSquareData(mask, size))
        size += 1 << popcount(mask)
    return tuple(squares), size


_ROOK_SQUARES, _ROOK_TABLE_SIZE = _rook_data()
_BISHOP_SQUARES, _BISHOP_TABLE_SIZE = _bishop_data()


@cache
def _rook_table() -> tuple[int, ...]:
    table = [0] * _ROOK_TABLE_SIZE
    for index, entry in enumerate(_ROOK_SQUARES):
        square = Square(index)
        for i in range(1 << popcount(entry.src_mask)):
            occupancy = pdep(i, entry.src_mask)
            attacks = rook_attacks_slow(square, occupancy)
            table[entry.offset + i] = pext(attacks, entry.dst_mask)
    return tuple(table)


@cache
def _bishop_table() -> tuple[int, ...]:
    table = [0] * _BISHOP_TABLE_SIZE
    for index, entry in enumerate(_BISHOP_SQUARES):
        square = Square(index)
        for i in range(1 << popcount(entry.mask)):
            occupancy = pdep(i, entry.mask)
            table[entry.offset + i] = bishop_attacks_slow(square, occupancy)
    return tuple(table)


def rook_attacks(square: Square, occupancy: int) -> int:
    """Rook attacks from a square given the board occupancy."""
    entry = _ROOK_SQUARES[int(square)]
    idx = pext(occupancy, entry.src_mask)
    return pdep(_rook_table()[entry.offset + idx], entry.dst_mask)


def bishop_attacks(square: Square, occupancy: int) -> int:
    """Bishop attacks from a square given the board occupancy."""
    entry = _BISHOP_SQUARES[int(square)]
    idx = pext(occupancy, entry.mask)
    return _bishop_table()[entry.offset + idx]