"""Compact 16-bit move encoding and global engine options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .core import BasePiece, Square, to_square

DEFAULT_MOVE_LIST_CAPACITY = 256

_PROMOTION_TARGETS = (BasePiece.KNIGHT, BasePiece.BISHOP, BasePiece.ROOK, BasePiece.QUEEN)


class MoveType(IntEnum):
    """How a move is applied to the board."""

    STANDARD = 0
    PROMOTION = 1
    CASTLING = 2
    EN_PASSANT = 3


@dataclass
class GlobalOptions:
    """Engine-wide switches affecting move generation."""

    underpromotions: bool = False
    chess960: bool = False


@dataclass(frozen=True)
class Move:
    """A move packed as src(6) | dst(6) | promotion target(2) | type(2).

    Castling moves are encoded king-takes-rook: dst is the rook's square.
    """

    data: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.data <= 0xFFFF:
            raise ValueError(f"move data out of range: {self.data}")

    @property
    def src(self) -> Square:
        return Square(self.data >> 10)

    @property
    def src_rank(self) -> int:
        return self.data >> 13

    @property
    def src_file(self) -> int:
        return (self.data >> 10) & 0x7

    @property
    def dst(self) -> Square:
        return Square((self.data >> 4) & 0x3F)

    @property
    def dst_rank(self) -> int:
        return (self.data >> 7) & 0x7

    @property
    def dst_file(self) -> int:
        return (self.data >> 4) & 0x7

    @property
    def target(self) -> BasePiece:
        """Promotion piece; only meaningful for promotions."""
        return BasePiece(((self.data >> 2) & 0x3) + 1)

    @property
    def target_idx(self) -> int:
        return (self.data >> 2) & 0x3

    @property
    def type(self) -> MoveType:
        return MoveType(self.data & 0x3)

    @property
    def is_null(self) -> bool:
        return self.data == 0

    def __bool__(self) -> bool:
        return not self.is_null

    @staticmethod
    def _pack(src: Square, dst: Square, extra: int, move_type: MoveType) -> int:
        for square in (src, dst):
            if not 0 <= int(square) < 64:
                raise ValueError(f"not a board square: {square!r}")
        return (int(src) << 10) | (int(dst) << 4) | (extra << 2) | int(move_type)

    @classmethod
    def standard(cls, src: Square, dst: Square) -> Move:
        return cls(cls._pack(src, dst, 0, MoveType.STANDARD))

    @classmethod
    def promotion(cls, src: Square, dst: Square, target: BasePiece) -> Move:
        if target not in _PROMOTION_TARGETS:
            raise ValueError(f"cannot promote to {target!r}")
        return cls(cls._pack(src, dst, int(target) - 1, MoveType.PROMOTION))

    @classmethod
    def castling(cls, src: Square, dst: Square) -> Move:
        return cls(cls._pack(src, dst, 0, MoveType.CASTLING))

    @classmethod
    def en_passant(cls, src: Square, dst: Square) -> Move:
        return cls(cls._pack(src, dst, 0, MoveType.EN_PASSANT))


NULL_MOVE = Move()


def move_actual_dst(move: Move, chess960: bool = False) -> Square:
    """The king's real destination for standard castling, else the move's dst.

    Keeps history from crediting the king for walking into the corner.
    """
    if move.type == MoveType.CASTLING and not chess960:
        return to_square(move.src_rank, 6 if move.src_file < move.dst_file else 2)
    return move.dst