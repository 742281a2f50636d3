import pytest

from polarchess.core import BasePiece, Square
from polarchess.move import (
    NULL_MOVE,
    GlobalOptions,
    Move,
    MoveType,
    move_actual_dst,
)

SQUARES = list(Square)[:64]


def test_standard_round_trip():
    for src in SQUARES[::7]:
        for dst in SQUARES[::5]:
            move = Move.standard(src, dst)
            assert move.src == src
            assert move.dst == dst
            assert move.type == MoveType.STANDARD


def test_rank_and_file_accessors():
    move = Move.standard(Square.B2, Square.G7)
    assert (move.src_rank, move.src_file) == (Square.B2 // 8, Square.B2 % 8)
    assert (move.dst_rank, move.dst_file) == (Square.G7 // 8, Square.G7 % 8)


@pytest.mark.parametrize(
    "target", [BasePiece.KNIGHT, BasePiece.BISHOP, BasePiece.ROOK, BasePiece.QUEEN]
)
def test_promotion_round_trip(target):
    move = Move.promotion(Square.E7, Square.E8, target)
    assert move.type == MoveType.PROMOTION
    assert move.target == target
    assert move.target_idx == int(target) - 1
    assert move.src == Square.E7
    assert move.dst == Square.E8


@pytest.mark.parametrize("target", [BasePiece.PAWN, BasePiece.KING, BasePiece.NONE])
def test_invalid_promotion_target(target):
    with pytest.raises(ValueError):
        Move.promotion(Square.E7, Square.E8, target)


def test_castling_and_en_passant_types():
    assert Move.castling(Square.E1, Square.H1).type == MoveType.CASTLING
    assert Move.en_passant(Square.E5, Square.D6).type == MoveType.EN_PASSANT


def test_null_move():
    assert NULL_MOVE.is_null
    assert not NULL_MOVE
    assert Move.standard(Square.A1, Square.A1) == NULL_MOVE


def test_real_move_is_truthy():
    move = Move.standard(Square.E2, Square.E4)
    assert move
    assert not move.is_null


def test_equality_by_encoding():
    assert Move.standard(Square.G1, Square.F3) == Move.standard(Square.G1, Square.F3)
    assert Move.standard(Square.G1, Square.F3) != Move.castling(Square.G1, Square.F3)


def test_data_out_of_range():
    with pytest.raises(ValueError):
        Move(0x10000)


def test_none_square_rejected():
    with pytest.raises(ValueError):
        Move.standard(Square.NONE, Square.A1)


def test_actual_dst_short_castle():
    assert move_actual_dst(Move.castling(Square.E1, Square.H1)) == Square.G1
    assert move_actual_dst(Move.castling(Square.E8, Square.H8)) == Square.G8


def test_actual_dst_long_castle():
    assert move_actual_dst(Move.castling(Square.E1, Square.A1)) == Square.C1
    assert move_actual_dst(Move.castling(Square.E8, Square.A8)) == Square.C8


def test_actual_dst_chess960_keeps_rook_square():
    opts = GlobalOptions(chess960=True)
    move = Move.castling(Square.E1, Square.H1)
    assert move_actual_dst(move, opts.chess960) == Square.H1


def test_actual_dst_non_castling():
    move = Move.standard(Square.E2, Square.E4)
    assert move_actual_dst(move) == Square.E4
    assert move_actual_dst(move, True) == Square.E4


def test_options_are_mutable():
    opts = GlobalOptions()
    opts.underpromotions = True
    assert opts.underpromotions is True
    assert opts.chess960 is False