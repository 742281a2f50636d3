import pytest

from polarchess.core import (
    BasePiece,
    Piece,
    Square,
    TaperedScore,
    base_piece,
    flip_piece_color,
)
from polarchess.material import (
    base_piece_value,
    piece_square_value,
    piece_value,
)

REAL_PIECES = [p for p in Piece if p != Piece.NONE]
SQUARES = [s for s in Square if s != Square.NONE]


def test_pinned_values():
    assert piece_value(Piece.WHITE_PAWN) == TaperedScore(84, 100)
    assert base_piece_value(BasePiece.QUEEN) == TaperedScore(1045, 1175)
    assert base_piece_value(BasePiece.KING) == TaperedScore(0, 0)


def test_none_values_are_zero():
    assert piece_value(Piece.NONE) == TaperedScore()
    assert base_piece_value(BasePiece.NONE) == TaperedScore()


@pytest.mark.parametrize("piece", REAL_PIECES)
def test_coloured_value_matches_base(piece):
    assert piece_value(piece) == base_piece_value(base_piece(piece))


@pytest.mark.parametrize("piece", REAL_PIECES)
def test_pst_colour_mirror(piece):
    for square in SQUARES:
        mirrored = Square(int(square) ^ 0x38)
        assert piece_square_value(piece, square) == -piece_square_value(
            flip_piece_color(piece), mirrored
        )


def test_pawn_on_back_rank_has_no_bonus():
    assert piece_square_value(Piece.WHITE_PAWN, Square.A1) == piece_value(Piece.WHITE_PAWN)
    assert piece_square_value(Piece.BLACK_PAWN, Square.H8) == -piece_value(Piece.BLACK_PAWN)


def test_king_square_bonus_from_table():
    assert piece_square_value(Piece.WHITE_KING, Square.E1) == TaperedScore(13, -19)
    assert piece_square_value(Piece.BLACK_KING, Square.E8) == -TaperedScore(13, -19)


def test_white_positive_black_negative_for_material():
    for square in SQUARES:
        assert piece_square_value(Piece.WHITE_QUEEN, square).midgame > 0
        assert piece_square_value(Piece.BLACK_QUEEN, square).midgame < 0


def test_none_rejected():
    with pytest.raises(ValueError):
        piece_square_value(Piece.NONE, Square.A1)
    with pytest.raises(ValueError):
        piece_square_value(Piece.WHITE_PAWN, Square.NONE)