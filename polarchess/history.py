"""History heuristic tables: butterfly-style scores, countermoves and continuations."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core import Piece, Square
from .move import NULL_MOVE, Move

HISTORY_DIVISOR = 324
HISTORY_SCALE = 32

_PIECES = 12
_SQUARES = 64


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def update_history_score(score: int, adjustment: int) -> int:
    """Return a history score after applying a gravity-scaled adjustment."""
    score -= _trunc_div(score * abs(adjustment), HISTORY_DIVISOR)
    score += adjustment * HISTORY_SCALE
    return score


@dataclass(frozen=True)
class HistoryMove:
    """The moving piece and its destination; false when no piece moved."""

    moving: Piece = Piece.NONE
    dst: Square = Square.NONE

    def __bool__(self) -> bool:
        return self.moving != Piece.NONE

    def index(self) -> int:
        """Flat table index of this move."""
        if self.moving == Piece.NONE or self.dst == Square.NONE:
            raise ValueError(f"history move has no table slot: {self!r}")
        return int(self.moving) * _SQUARES + int(self.dst)


@dataclass
class HistoryEntry:
    """Score and countermove recorded for one piece-destination pair."""

    score: int = 0
    countermove: Move = field(default=NULL_MOVE)


class ContinuationEntry:
    """Scores of follow-up moves, indexed by HistoryMove."""

    __slots__ = ("_scores",)

    def __init__(self) -> None:
        self._scores = [0] * (_PIECES * _SQUARES)

    def __getitem__(self, move: HistoryMove) -> int:
        return self._scores[move.index()]

    def __setitem__(self, move: HistoryMove, value: int) -> None:
        self._scores[move.index()] = value


class HistoryTable:
    """Per-move history entries and continuation tables."""

    def __init__(self) -> None:
        self._entries = [HistoryEntry() for _ in range(_PIECES * _SQUARES)]
        self._continuations: dict[int, ContinuationEntry] = {}

    def entry(self, move: HistoryMove) -> HistoryEntry:
        """The mutable history entry for a move."""
        return self._entries[move.index()]

    def cont_entry(self, move: HistoryMove) -> ContinuationEntry:
        """The mutable continuation table following a move."""
        index = move.index()
        table = self._continuations.get(index)
        if table is None:
            table = self._continuations[index] = ContinuationEntry()
        return table

    def age(self) -> None:
        """Halve every main history score, rounding towards zero."""
        for entry in self._entries:
            entry.score = _trunc_div(entry.score, 2)

    def clear(self) -> None:
        """Reset all scores, countermoves and continuations."""
        for entry in self._entries:
            entry.score = 0
            entry.countermove = NULL_MOVE
        self._continuations.clear()