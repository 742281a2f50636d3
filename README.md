# polarchess

Building blocks for a chess engine. The package is plain Python and uses
only the standard library.

Bitboards are plain `int`s. Bit 0 is A1 and bit 63 is H8.

## Modules

- `polarchess.core` defines the basic types. `Piece`, `BasePiece`, `Color`
  and `Square` are `IntEnum`s, and each has a `NONE` member. `CastlingRooks`
  is a frozen dataclass of rook squares. `TaperedScore` is a
  midgame/endgame pair that supports `+`, `-`, `*` and negation, and it has
  `colored(color)`. The module also has the helpers `opp_color`,
  `color_piece`, `base_piece`, `piece_color`, `flip_piece_color`,
  `piece_from_char`/`piece_to_char`,
  `base_piece_from_char`/`base_piece_to_char`, `to_square`, `square_rank`,
  `square_file`, `square_bit`, `square_bit_checked`, `chebyshev` and
  `relative_rank`, and the constants `SCORE_MAX`, `SCORE_MATE` and
  `SCORE_WIN`. `color_piece`, `base_piece`, `piece_color` and
  `flip_piece_color` raise `ValueError` when given a `NONE` value.
- `polarchess.bitboard` holds the rank, file and square-colour constants and
  the helpers that work on boards:
  - `popcount`, `multiple`, `lowest_square`, `lowest_bit` and
    `iter_squares`.
  - Shifts one step in every direction, plus the two-step knight-style
    shifts. The shifts wrap-guard the board edges.
  - Colour-relative versions of the shifts, such as `shift_up_relative`.
  - `fill_up`, `fill_down`, their relative forms, and `fill_file`.
  - `promotion_rank`, `relative_rank_board`, and the step offsets
    `up_offset`, `up_left_offset` and `up_right_offset`.
- `polarchess.sliding` is a slow reference for sliding attacks, found by
  walking the rays. It provides `generate_sliding_attacks`, `edges`,
  `rook_attacks_slow`, `bishop_attacks_slow`, `empty_board_rooks` and
  `empty_board_bishops`.
- `polarchess.magic` looks up rook and bishop attacks through magic
  bitboards. It provides `rook_attacks`, `bishop_attacks`, `rook_index`
  and `bishop_index`, along with the `SquareData` and `MagicData`
  descriptors. The lookup tables are built on the first call and then
  cached.
- `polarchess.pext` gives the same lookups indexed by software `pext` and
  `pdep`, which are also exported. Its rook table stores compressed entries
  that are expanded with `pdep`. These tables are also built lazily.
- `polarchess.attacks` provides `knight_attacks`, `king_attacks`,
  `pawn_attacks(square, color)`, `rook_attacks`, `bishop_attacks` and
  `queen_attacks`. The sliding lookups go through `polarchess.magic`.
- `polarchess.rays` provides `ray_between(src, dst)`. It returns the squares
  strictly between two squares that share a rank, file or diagonal, and 0
  when they do not.
- `polarchess.move` contains the following:
  - `Move` is a frozen 16-bit packed move. You build one with
    `Move.standard`, `Move.promotion`, `Move.castling` or
    `Move.en_passant`. It has the properties `src`, `dst`, `type`, `target`
    and `is_null`.
  - Castling moves are encoded with the king capturing its own rook, so
    `dst` is the rook's square.
  - `NULL_MOVE` is the empty move, and it is false.
  - `move_actual_dst(move, chess960=False)` gives the king's real
    destination for standard castling.
  - `GlobalOptions` is a dataclass holding the `underpromotions` and
    `chess960` switches.
- `polarchess.history` contains the move-ordering history tables:
  - `update_history_score(score, adjustment)` returns the adjusted score.
  - `HistoryMove` is a piece and destination pair.
  - `HistoryTable.entry(move)` returns a mutable `HistoryEntry` with a
    `score` and a `countermove`.
  - `HistoryTable.cont_entry(move)` returns a `ContinuationEntry`, which is
    indexed by `HistoryMove`.
  - `HistoryTable.age()` halves the scores, and `HistoryTable.clear()`
    resets everything.
- `polarchess.limits` holds `SearchData` (`depth`, `seldepth`, `nodes` and
  `move`) and the limiters that decide when a search stops:
  - `SearchLimiter` is the abstract base.
  - `InfiniteLimiter` never stops.
  - `NodeLimiter(max_nodes)` stops once the node count is reached.
  - `MoveTimeLimiter(time, overhead=0, clock=None)` takes its time in
    milliseconds.
  - `TimeManager(start, remaining, increment, to_go, overhead, clock=None)`
    takes values in clock seconds. `to_go=0` means 25 moves. Its hard limit
    is half the remaining time, and its soft limit is at most that.
- `polarchess.material` provides the piece values as `TaperedScore`
  constants, `piece_value`, `base_piece_value` and `piece_square_value`.
  The piece-square tables combine material with placement bonuses and are
  signed, so black entries are negative.

## Installing

```
pip install .
```

Install the `test` extra to run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from polarchess.core import Square
from polarchess.attacks import knight_attacks, rook_attacks
from polarchess.bitboard import iter_squares
from polarchess.move import Move

print([sq.name for sq in iter_squares(knight_attacks(Square.G1))])
# ['E2', 'F3', 'H3']

blockers = 1 << Square.E4
print(bin(rook_attacks(Square.E1, blockers)))

move = Move.standard(Square.E2, Square.E4)
print(move.src, move.dst, move.type)
```

```python
from polarchess.limits import NodeLimiter, SearchData

limiter = NodeLimiter(1000)
print(limiter.stop(SearchData(depth=5, nodes=1000), True))  # True
```

`MoveTimeLimiter` and `TimeManager` read the time from an optional `clock`
callable that returns seconds. It defaults to `time.perf_counter`, and you
can replace it with a fake clock in tests.

## What it does not do

The package has no board or position type, no FEN parsing, no move
generation or legality checking, and no search or full evaluation. It
provides no command-line program or UCI protocol handling either. It
supplies the pieces such an engine is built from. `GlobalOptions` is only a
holder for its two switches, and nothing in the package reads them.