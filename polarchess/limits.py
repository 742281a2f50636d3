"""Search progress data and the limiters that decide when a search stops."""

from __future__ import annotations

import time as _time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

from .move import NULL_MOVE, Move

DEFAULT_MOVE_OVERHEAD = 10
MOVE_OVERHEAD_RANGE = (0, 50000)

Clock = Callable[[], float]


@dataclass
class SearchData:
    """Progress of a running search."""

    depth: int = 0
    seldepth: int = 0
    nodes: int = 0
    move: Move = field(default=NULL_MOVE)


class SearchLimiter(ABC):
    """Decides whether a search should stop."""

    def update(self, data: SearchData, stable_best_move: bool) -> None:
        """Inform the limiter of a finished iteration."""

    @abstractmethod
    def stop(self, data: SearchData, allow_soft_timeout: bool) -> bool:
        """True if the search should stop now."""


class InfiniteLimiter(SearchLimiter):
    """Never stops the search."""

    def stop(self, data: SearchData, allow_soft_timeout: bool) -> bool:
        return False


class NodeLimiter(SearchLimiter):
    """Stops once a node count is reached."""

    def __init__(self, max_nodes: int) -> None:
        self.max_nodes = max_nodes

    def stop(self, data: SearchData, allow_soft_timeout: bool) -> bool:
        return data.nodes >= self.max_nodes


class MoveTimeLimiter(SearchLimiter):
    """Stops after a fixed time in milliseconds, less the move overhead."""

    def __init__(self, time: int, overhead: int = 0, clock: Clock | None = None) -> None:
        self._clock = clock or _time.perf_counter
        self._max_time = self._clock() + max(1, time - overhead) / 1000.0

    @property
    def deadline(self) -> float:
        """Clock reading at which the search stops."""
        return self._max_time

    def stop(self, data: SearchData, allow_soft_timeout: bool) -> bool:
        return (
            data.depth > 2
            and data.nodes > 0
            and data.nodes % 1024 == 0
            and self._clock() >= self._max_time
        )


class TimeManager(SearchLimiter):
    """Allocates time from a game clock, with soft and hard limits."""

    def __init__(
        self,
        start: float,
        remaining: float,
        increment: float,
        to_go: int,
        overhead: float,
        clock: Clock | None = None,
    ) -> None:
        self._clock = clock or _time.perf_counter
        self._start_time = start

        limit = max(0.001, remaining - overhead)
        if to_go == 0:
            to_go = 25

        base_time = limit / to_go + increment * 3 / 4

        self._max_time = limit / 2.0
        self._soft_time = min(base_time * 0.6, self._max_time)

    @property
    def max_time(self) -> float:
        return self._max_time

    @property
    def soft_time(self) -> float:
        return self._soft_time

    def update(self, data: SearchData, stable_best_move: bool) -> None:
        # Best-move stability is not used for allocation yet.
        return None

    def stop(self, data: SearchData, allow_soft_timeout: bool) -> bool:
        if data.depth < 5:
            return False
        if data.nodes == 0 or (not allow_soft_timeout and data.nodes % 1024 != 0):
            return False
        elapsed = self._clock() - self._start_time
        return elapsed > self._max_time or (allow_soft_timeout and elapsed > self._soft_time)