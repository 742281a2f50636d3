"""Squares strictly between two aligned squares."""

from __future__ import annotations

from .core import Square, square_bit
from .sliding import (
    bishop_attacks_slow,
    empty_board_bishops,
    empty_board_rooks,
    rook_attacks_slow,
)


def _generate_rays() -> tuple[tuple[int, ...], ...]:
    rays = []
    for src_index in range(64):
        src = Square(src_index)
        src_mask = square_bit(src)
        rook_reach = empty_board_rooks(src)
        bishop_reach = empty_board_bishops(src)
        row = []
        for dst_index in range(64):
            dst = Square(dst_index)
            dst_mask = square_bit(dst)
            if src_index == dst_index:
                row.append(0)
            elif rook_reach & dst_mask:
                row.append(rook_attacks_slow(src, dst_mask) & rook_attacks_slow(dst, src_mask))
            elif bishop_reach & dst_mask:
                row.append(bishop_attacks_slow(src, dst_mask) & bishop_attacks_slow(dst, src_mask))
            else:
                row.append(0)
        rays.append(tuple(row))
    return tuple(rays)


RAYS = _generate_rays()


def ray_between(src: Square, dst: Square) -> int:
    """Squares strictly between src and dst on a shared line, or 0 if not aligned."""
    return RAYS[int(src)][int(dst)]