"""Piece values and piece-square tables."""

from __future__ import annotations

from .core import BasePiece, Piece, Square, TaperedScore

PAWN = TaperedScore(84, 100)
KNIGHT = TaperedScore(361, 312)
BISHOP = TaperedScore(379, 342)
ROOK = TaperedScore(483, 610)
QUEEN = TaperedScore(1045, 1175)
KING = TaperedScore(0, 0)

BASE_VALUES = (PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING, TaperedScore())

VALUES = tuple(value for value in BASE_VALUES[:6] for _ in range(2)) + (TaperedScore(),)

# Placement bonuses per piece kind (pawn, knight, bishop, rook, queen, king),
# given as separate midgame and endgame grids, rank 8 at the top as seen by white.
_MIDGAME_GRIDS = (
    """
       0    0    0    0    0    0    0    0
      46   42    7   66    8   63  -72  -97
      17    8   22   37   56   83   48   23
     -10   -2   -8   11   11   18   10   -6
     -18  -17  -10    8    3   10    3  -14
     -24  -25  -18  -21  -17   -1   10  -11
     -14   -3  -13    3   -6   35   39    0
       0    0    0    0    0    0    0    0
    """,
    """
    -142  -77  -81  -16   70  -93  -30  -90
     -68  -45   43   23   25   46   13   -8
     -53   19   20   45   59  105   46   40
      -3    9    5   48   29   64   23   37
     -14   -2   13   16   27   21   46    3
     -28  -13    6    9   27   18   23  -17
     -26  -22  -10   11   11   14    7   -1
    -104  -16  -23   -7    5   -4  -13  -15
    """,
    """
     -17  -28 -102 -126  -73  -94  -25  -36
     -30  -22  -37  -49    3   16  -10  -44
     -13   15   18   18   44   65   42   28
     -18   11    6   44   24   37   11   -4
      -5    2    8   28   29    4    5    6
      -2   19   11   11   14   24   13   10
      14   15   21    5   12   24   35    8
      -6   23   -1    0   18   -9    8    3
    """,
    """
      -8   17  -31   14   18    4   35   41
     -17   -8    9   29   49   56   13   19
     -33   -1   -8    9    9   57   78   29
     -39   -2  -17   -5   -3   21   17    1
     -43  -32  -27  -19   -1   -6   26  -15
     -33  -26  -23  -18  -15   11   23   -8
     -37  -22  -22  -13   -5   10   18  -46
     -12  -10  -12    3    6    8  -13   -5
    """,
    """
     -28  -16  -14    6   71   35   59   40
     -30  -56  -25  -31  -50   38   18   51
      -5  -18   -4  -14   48   77   78   58
     -35  -18  -27  -27  -11   11    4    6
     -14  -30  -13  -28  -11  -11    7   -4
     -21   -8   -8   -1   -1    5   12    6
     -26   -9    2   15   15   22    3   10
      -6  -18   -6    4   -3  -26  -18  -30
    """,
    """
      -3   56   72    1  -82  -74   40   28
      78   -3  -37   63   -7  -47   -5   -8
     -13   18   76    5    7   68   81   -9
     -10  -28  -16  -49  -74  -75  -41  -84
    -125  -15  -51  -98 -122  -88  -80 -108
       6  -15  -55  -81  -65  -66  -27  -39
      57   27  -17  -47  -45  -26   21   30
      35   74   51  -48   13  -25   54   47
    """,
)

_ENDGAME_GRIDS = (
    """
       0    0    0    0    0    0    0    0
     118  107   94   50   76   40  110  137
      42   41   10  -28  -39  -16   14   24
      20    6   -5  -33  -23  -18    1    3
       3    2  -16  -31  -24  -19  -10  -12
       0    0  -10    6    3   -6  -12  -16
       4    2    4   -2   18   -1   -7  -13
       0    0    0    0    0    0    0    0
    """,
    """
     -51  -24   14  -15  -20   -5  -41  -88
       1   16  -12   12    2  -13   -6  -24
       2    0   26   19   11   -1   -7  -24
       9   13   35   32   32   23   14   -4
      11    7   33   34   35   31    8    8
      -2   16   -2   23   21    3   -7   -1
     -26   -4    1   14    6   -7  -18  -26
     -10  -18   -7    2    2   -5   -1  -49
    """,
    """
      -4   -5   11   17    6    6   -2   -7
       5   10    6    2    0   -4    7   -4
       2    1    3    0   -6   -3   -1   -2
       4    5   18   14   17    5   -1   12
      -5    8   10   18    8    6    4   -7
      -5   -7   13    2    9    4   -1  -10
     -29   -7  -21    7    6  -12  -15  -31
     -20  -12   10    0   -6    9  -15  -19
    """,
    """
      20   10   27   11   12   14    2    3
      19   19   15    8   -8   -2   10    8
      15   11   13    7    1  -12  -13   -8
      14    0   16    6    2    0   -5    1
       9    8   11    6   -6   -2  -13   -6
      -3    2   -4   -6   -2  -16  -18  -22
      -7   -8   -5   -3  -11  -15  -22  -12
      -3   -6   -1  -14  -17   -6   -8  -19
    """,
    """
     -12    2   22   12  -11   10  -18   13
     -14   18   30   51   86    8    7   -5
     -21  -12   -5   44   16   16  -15   15
      10    5   10   38   48   50   63   46
       0   14    0   44   17   29   31   37
     -14  -10   -5  -31  -12  -12  -13  -12
     -32  -25  -10  -70  -49  -52  -52  -56
     -37  -24  -32    4  -30  -20  -29  -60
    """,
    """
     -76  -36  -22    0   17   44   26  -16
     -22   38   37   21   39   63   45   21
      16   32   23   35   41   53   48   19
      -1   38   43   52   57   57   47   21
      11   11   42   59   64   48   30   13
     -17    7   30   45   45   34   17   -1
     -43  -11   14   25   26   16   -6  -27
     -78  -58  -33    2  -19   -8  -43  -73
    """,
)


def _parse_grid(text: str) -> list[int]:
    values = [int(token) for token in text.split()]
    if len(values) != 64:
        raise ValueError("a bonus grid needs exactly 64 entries")
    return values


def _bonus_table(midgame: str, endgame: str) -> tuple[TaperedScore, ...]:
    return tuple(
        TaperedScore(mg, eg) for mg, eg in zip(_parse_grid(midgame), _parse_grid(endgame))
    )


_BONUS_TABLES = tuple(
    _bonus_table(mg, eg) for mg, eg in zip(_MIDGAME_GRIDS, _ENDGAME_GRIDS)
)


def _create_psts() -> tuple[tuple[TaperedScore, ...], ...]:
    tables: list[tuple[TaperedScore, ...]] = []
    for kind, bonus in enumerate(_BONUS_TABLES):
        value = BASE_VALUES[kind]
        tables.append(tuple(-value - bonus[sq] for sq in range(64)))
        tables.append(tuple(value + bonus[sq ^ 0x38] for sq in range(64)))
    return tuple(tables)


PIECE_SQUARE_TABLES = _create_psts()


def piece_value(piece: Piece) -> TaperedScore:
    """Material value of a coloured piece; zero for Piece.NONE."""
    return VALUES[int(piece)]


def base_piece_value(piece: BasePiece) -> TaperedScore:
    """Material value of a piece kind; zero for BasePiece.NONE."""
    return BASE_VALUES[int(piece)]


def piece_square_value(piece: Piece, square: Square) -> TaperedScore:
    """Signed material plus placement bonus, positive for white."""
    if piece == Piece.NONE or square == Square.NONE:
        raise ValueError("piece_square_value needs a real piece and square")
    return PIECE_SQUARE_TABLES[int(piece)][int(square)]