"""Bitboard constants and operations on 64-bit boards held as plain ints.

Bit 0 is A1 and bit 63 is H8; "left" is towards the A file and "up" is
towards the eighth rank.
"""

from __future__ import annotations

from collections.abc import Iterator

from .core import Color, Square, relative_rank

ALL = 0xFFFFFFFFFFFFFFFF

RANK_1 = 0x00000000000000FF
RANK_2 = 0x000000000000FF00
RANK_3 = 0x0000000000FF0000
RANK_4 = 0x00000000FF000000
RANK_5 = 0x000000FF00000000
RANK_6 = 0x0000FF0000000000
RANK_7 = 0x00FF000000000000
RANK_8 = 0xFF00000000000000

FILE_A = 0x0101010101010101
FILE_B = 0x0202020202020202
FILE_C = 0x0404040404040404
FILE_D = 0x0808080808080808
FILE_E = 0x1010101010101010
FILE_F = 0x2020202020202020
FILE_G = 0x4040404040404040
FILE_H = 0x8080808080808080

RANKS = (RANK_1, RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8)
FILES = (FILE_A, FILE_B, FILE_C, FILE_D, FILE_E, FILE_F, FILE_G, FILE_H)

DARK_SQUARES = 0xAA55AA55AA55AA55
LIGHT_SQUARES = 0x55AA55AA55AA55AA

# Square index offsets of single steps.
UP = 8
DOWN = -8
LEFT = -1
RIGHT = 1
UP_LEFT = UP + LEFT
UP_RIGHT = UP + RIGHT
DOWN_LEFT = DOWN + LEFT
DOWN_RIGHT = DOWN + RIGHT

# Shift amounts.
VERTICAL = 8
HORIZONTAL = 1
DIAGONAL_LR = VERTICAL - HORIZONTAL
DIAGONAL_RL = VERTICAL + HORIZONTAL
DIAGONAL_12_LR = VERTICAL + VERTICAL - HORIZONTAL
DIAGONAL_12_RL = VERTICAL + VERTICAL + HORIZONTAL
DIAGONAL_21_LR = VERTICAL - HORIZONTAL - HORIZONTAL
DIAGONAL_21_RL = VERTICAL + HORIZONTAL + HORIZONTAL

_NOT_A = ALL & ~FILE_A
_NOT_H = ALL & ~FILE_H
_NOT_AB = ALL & ~(FILE_A | FILE_B)
_NOT_GH = ALL & ~(FILE_G | FILE_H)


def popcount(board: int) -> int:
    """Number of set squares."""
    return (board & ALL).bit_count()


def multiple(board: int) -> bool:
    """True if more than one square is set."""
    return (board & (board - 1)) != 0


def lowest_square(board: int) -> Square:
    """The lowest set square, or Square.NONE for an empty board."""
    if board == 0:
        return Square.NONE
    return Square((board & -board).bit_length() - 1)


def lowest_bit(board: int) -> int:
    """Board holding only the lowest set square."""
    return board & -board


def iter_squares(board: int) -> Iterator[Square]:
    """Yield the set squares from lowest to highest."""
    board &= ALL
    while board:
        low = board & -board
        yield Square(low.bit_length() - 1)
        board ^= low


def shift_up(board: int) -> int:
    return (board << VERTICAL) & ALL


def shift_down(board: int) -> int:
    return board >> VERTICAL


def shift_left(board: int) -> int:
    return (board >> HORIZONTAL) & _NOT_H


def shift_right(board: int) -> int:
    return (board << HORIZONTAL) & _NOT_A


def shift_up_left(board: int) -> int:
    return (board << DIAGONAL_LR) & _NOT_H


def shift_up_right(board: int) -> int:
    return (board << DIAGONAL_RL) & _NOT_A


def shift_down_left(board: int) -> int:
    return (board >> DIAGONAL_RL) & _NOT_H


def shift_down_right(board: int) -> int:
    return (board >> DIAGONAL_LR) & _NOT_A


def shift_up_up_left(board: int) -> int:
    return (board << DIAGONAL_12_LR) & _NOT_H


def shift_up_up_right(board: int) -> int:
    return (board << DIAGONAL_12_RL) & _NOT_A


def shift_up_left_left(board: int) -> int:
    return (board << DIAGONAL_21_LR) & _NOT_GH


def shift_up_right_right(board: int) -> int:
    return (board << DIAGONAL_21_RL) & _NOT_AB


def shift_down_left_left(board: int) -> int:
    return (board >> DIAGONAL_21_RL) & _NOT_GH


def shift_down_right_right(board: int) -> int:
    return (board >> DIAGONAL_21_LR) & _NOT_AB


def shift_down_down_left(board: int) -> int:
    return (board >> DIAGONAL_12_RL) & _NOT_H


def shift_down_down_right(board: int) -> int:
    return (board >> DIAGONAL_12_LR) & _NOT_A


def shift_up_relative(board: int, color: Color) -> int:
    """Shift one rank forward from the given side's point of view."""
    return shift_down(board) if color == Color.BLACK else shift_up(board)


def shift_up_left_relative(board: int, color: Color) -> int:
    return shift_down_left(board) if color == Color.BLACK else shift_up_left(board)


def shift_up_right_relative(board: int, color: Color) -> int:
    return shift_down_right(board) if color == Color.BLACK else shift_up_right(board)


def shift_down_relative(board: int, color: Color) -> int:
    return shift_up(board) if color == Color.BLACK else shift_down(board)


def shift_down_left_relative(board: int, color: Color) -> int:
    return shift_up_left(board) if color == Color.BLACK else shift_down_left(board)


def shift_down_right_relative(board: int, color: Color) -> int:
    return shift_up_right(board) if color == Color.BLACK else shift_down_right(board)


def fill_up(board: int) -> int:
    """Set every square above each set square, inclusive."""
    board |= (board << 8) & ALL
    board |= (board << 16) & ALL
    board |= (board << 32) & ALL
    return board


def fill_down(board: int) -> int:
    """Set every square below each set square, inclusive."""
    board |= board >> 8
    board |= board >> 16
    board |= board >> 32
    return board


def fill_up_relative(board: int, color: Color) -> int:
    return fill_down(board) if color == Color.BLACK else fill_up(board)


def fill_down_relative(board: int, color: Color) -> int:
    return fill_up(board) if color == Color.BLACK else fill_down(board)


def fill_file(board: int) -> int:
    """Set every file that has a set square."""
    return fill_up(board) | fill_down(board)


def promotion_rank(color: Color) -> int:
    """The rank on which the given side's pawns promote."""
    return RANK_1 if color == Color.BLACK else RANK_8


def relative_rank_board(color: Color, idx: int) -> int:
    """The rank board for a rank index seen from the given side."""
    return RANKS[relative_rank(color, idx)]


def up_offset(color: Color) -> int:
    """Square offset of a forward step for the given side."""
    return DOWN if color == Color.BLACK else UP


def up_left_offset(color: Color) -> int:
    return DOWN_LEFT if color == Color.BLACK else UP_LEFT


def up_right_offset(color: Color) -> int:
    return DOWN_RIGHT if color == Color.BLACK else UP_RIGHT