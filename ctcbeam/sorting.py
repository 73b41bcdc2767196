from __future__ import annotations

import functools
import heapq
import math
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from .errors import ScoreNotComparableError

T = TypeVar("T")


@functools.total_ordering
class ScoredValue(Generic[T]):
    """
    A value paired with a score.

    Comparisons look at the score only, so two instances holding different
    values but the same score compare equal.
    """

    __slots__ = ("value", "score")

    def __init__(self, value: T, score: float):
        if math.isnan(score):
            raise ScoreNotComparableError(score, value)
        self.value = value
        self.score = score

    def __eq__(self, other):
        if not isinstance(other, ScoredValue):
            return NotImplemented
        return self.score == other.score

    def __lt__(self, other):
        if not isinstance(other, ScoredValue):
            return NotImplemented
        return self.score < other.score

    __hash__ = None

    def __repr__(self):
        return f"ScoredValue(value={self.value!r}, score={self.score!r})"


def top_n_elements(items: Iterable[ScoredValue[T]], n: int) -> list[ScoredValue[T]]:
    """
    Return the ``n`` highest scoring items, best first.

    Keeps a min-heap of at most ``n`` items while scanning, which costs
    O(m log n) for m items instead of sorting all of them.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return []

    min_heap: list[ScoredValue[T]] = []
    for scored_value in items:
        if len(min_heap) < n:
            heapq.heappush(min_heap, scored_value)
        elif scored_value.score > min_heap[0].score:
            heapq.heapreplace(min_heap, scored_value)

    min_heap.sort(reverse=True)
    return min_heap


def top_n(items: Iterable[T], n: int, key: Callable[[T], float]) -> list[T]:
    """Like top_n_elements, for plain items scored by ``key``."""
    scored = (ScoredValue(item, key(item)) for item in items)
    return [scored_value.value for scored_value in top_n_elements(scored, n)]
