"""Core chess types: pieces, colours, squares, castling rooks and tapered scores."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Piece(IntEnum):
    """A coloured piece; the low bit is the colour, the rest is the base piece."""

    BLACK_PAWN = 0
    WHITE_PAWN = 1
    BLACK_KNIGHT = 2
    WHITE_KNIGHT = 3
    BLACK_BISHOP = 4
    WHITE_BISHOP = 5
    BLACK_ROOK = 6
    WHITE_ROOK = 7
    BLACK_QUEEN = 8
    WHITE_QUEEN = 9
    BLACK_KING = 10
    WHITE_KING = 11
    NONE = 12


class BasePiece(IntEnum):
    """A piece kind without colour."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    NONE = 6


class Color(IntEnum):
    """Side colour."""

    BLACK = 0
    WHITE = 1
    NONE = 2


# Squares are numbered from A1 (0) to H8 (63), rank-major; NONE is 64.
Square = IntEnum(
    "Square",
    [f"{file}{rank}" for rank in "12345678" for file in "ABCDEFGH"] + ["NONE"],
    start=0,
)
Square.__doc__ = "A board square, A1 = 0 through H8 = 63, with NONE = 64."

Score = int

SCORE_MAX = 32767
SCORE_MATE = 32766
SCORE_WIN = 25000

_PIECE_CHARS = "pPnNbBrRqQkK"
_BASE_PIECE_CHARS = "pnbrqk"


def opp_color(color: Color) -> Color:
    """Return the opposing colour."""
    return Color(int(not int(color)))


def color_piece(piece: BasePiece, color: Color) -> Piece:
    """Combine a base piece and a colour into a coloured piece."""
    if piece == BasePiece.NONE:
        raise ValueError("cannot colour BasePiece.NONE")
    if color == Color.NONE:
        raise ValueError("cannot colour a piece with Color.NONE")
    return Piece((int(piece) << 1) + int(color))


def base_piece(piece: Piece) -> BasePiece:
    """Strip the colour from a piece."""
    if piece == Piece.NONE:
        raise ValueError("Piece.NONE has no base piece")
    return BasePiece(int(piece) >> 1)


def piece_color(piece: Piece) -> Color:
    """Return the colour of a piece."""
    if piece == Piece.NONE:
        raise ValueError("Piece.NONE has no colour")
    return Color(int(piece) & 1)


def flip_piece_color(piece: Piece) -> Piece:
    """Return the same kind of piece in the other colour."""
    if piece == Piece.NONE:
        raise ValueError("Piece.NONE has no colour to flip")
    return Piece(int(piece) ^ 1)


def piece_from_char(c: str) -> Piece:
    """Parse a FEN piece letter; unknown letters give Piece.NONE."""
    index = _PIECE_CHARS.find(c) if len(c) == 1 else -1
    return Piece.NONE if index < 0 else Piece(index)


def piece_to_char(piece: Piece) -> str:
    """Return the FEN letter of a piece, or a space for Piece.NONE."""
    if piece == Piece.NONE:
        return " "
    return _PIECE_CHARS[int(piece)]


def base_piece_from_char(c: str) -> BasePiece:
    """Parse a lower-case piece letter; unknown letters give BasePiece.NONE."""
    index = _BASE_PIECE_CHARS.find(c) if len(c) == 1 else -1
    return BasePiece.NONE if index < 0 else BasePiece(index)


def base_piece_to_char(piece: BasePiece) -> str:
    """Return the lower-case letter of a base piece, or a space for NONE."""
    if piece == BasePiece.NONE:
        return " "
    return _BASE_PIECE_CHARS[int(piece)]


def to_square(rank: int, file: int) -> Square:
    """Build a square from a zero-based rank and file."""
    return Square((rank << 3) | file)


def square_rank(square: Square) -> int:
    """Zero-based rank of a square."""
    return int(square) >> 3


def square_file(square: Square) -> int:
    """Zero-based file of a square."""
    return int(square) & 0x7


def square_bit(square: Square) -> int:
    """Bitboard with only the given square set."""
    return 1 << int(square)


def square_bit_checked(square: Square) -> int:
    """Like square_bit, but an empty board for Square.NONE."""
    if square == Square.NONE:
        return 0
    return 1 << int(square)


def chebyshev(s1: Square, s2: Square) -> int:
    """King-move distance between two squares."""
    return max(
        abs(square_file(s2) - square_file(s1)),
        abs(square_rank(s2) - square_rank(s1)),
    )


def relative_rank(color: Color, rank: int) -> int:
    """Rank as seen from the given side."""
    return 7 - rank if color == Color.BLACK else rank


@dataclass(frozen=True)
class CastlingRooks:
    """Rook squares still available for castling, Square.NONE where lost."""

    black_short: Square = Square.NONE
    black_long: Square = Square.NONE
    white_short: Square = Square.NONE
    white_long: Square = Square.NONE


@dataclass(frozen=True)
class TaperedScore:
    """A pair of midgame and endgame scores."""

    midgame: Score = 0
    endgame: Score = 0

    def __add__(self, other: TaperedScore | int) -> TaperedScore:
        if isinstance(other, TaperedScore):
            return TaperedScore(self.midgame + other.midgame, self.endgame + other.endgame)
        if isinstance(other, int):
            return TaperedScore(self.midgame + other, self.endgame + other)
        return NotImplemented

    def __radd__(self, other: int) -> TaperedScore:
        if isinstance(other, int):
            return TaperedScore(self.midgame + other, self.endgame + other)
        return NotImplemented

    def __sub__(self, other: TaperedScore | int) -> TaperedScore:
        if isinstance(other, TaperedScore):
            return TaperedScore(self.midgame - other.midgame, self.endgame - other.endgame)
        if isinstance(other, int):
            return TaperedScore(self.midgame - other, self.endgame - other)
        return NotImplemented

    def __rsub__(self, other: int) -> TaperedScore:
        # Subtracts the scalar from each component, as the engine's scoring does.
        if isinstance(other, int):
            return TaperedScore(self.midgame - other, self.endgame - other)
        return NotImplemented

    def __mul__(self, other: int) -> TaperedScore:
        if isinstance(other, int):
            return TaperedScore(self.midgame * other, self.endgame * other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> TaperedScore:
        return TaperedScore(-self.midgame, -self.endgame)

    def colored(self, color: Color) -> TaperedScore:
        """The score from the given side's point of view."""
        return self if color == Color.WHITE else -self