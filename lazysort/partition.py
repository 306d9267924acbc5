"""
Partition-based (quicksort-style) lazy selection.

Unsorted ranges of the buffer live on an explicit stack with the leftmost
range on top. A request partitions the top range until the front of the
buffer holds a resolved element, emits it, and leaves everything to its
right only as ordered as that took.
"""

import logging
import random
from typing import List, Optional, Tuple, TypeVar

from .base import Less, Selector
from .models import PivotPolicy

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PartitionSelector(Selector[T]):
    """
    Lazy selector backed by iterative three-way partitioning.

    Stack entries are ``(lo, hi, resolved)`` half-open ranges. A resolved
    range holds elements equal under the ordering and is emitted front to
    back without further comparisons.

    Degenerate pivots (always the smallest or largest element of the range)
    make a single request O(n) and a full run O(n^2); the pivot policy is
    the mitigation.
    """

    def __init__(self, buffer: List[T], less: Less,
                 pivot: PivotPolicy = PivotPolicy.MEDIAN_OF_THREE,
                 seed: Optional[int] = None):
        super().__init__(buffer, less)
        self.pivot_policy = PivotPolicy(pivot)
        self._rng = random.Random(seed)
        self._stack: List[Tuple[int, int, bool]] = [(0, self._n, False)]
        self._choose_pivot = {
            PivotPolicy.MIDDLE: self._middle_pivot,
            PivotPolicy.MEDIAN_OF_THREE: self._median_of_three_pivot,
            PivotPolicy.RANDOM: self._random_pivot,
        }[self.pivot_policy]
        logger.debug(
            f"Partition selector over {self._n} elements "
            f"(pivot={self.pivot_policy.value})"
        )

    @classmethod
    def from_config(cls, buffer: List[T], less: Less, config) -> "PartitionSelector[T]":
        return cls(buffer, less, pivot=config.pivot, seed=config.seed)

    # --------- pivot policies ----------
    def _middle_pivot(self, lo: int, hi: int) -> int:
        return lo + (hi - lo) // 2

    def _median_of_three_pivot(self, lo: int, hi: int) -> int:
        mid = lo + (hi - lo) // 2
        if hi - lo < 3:
            return mid
        data, less = self._buffer, self._less
        a, b, c = lo, mid, hi - 1
        if less(data[a], data[b]):
            if less(data[b], data[c]):
                return b
            return c if less(data[a], data[c]) else a
        if less(data[a], data[c]):
            return a
        return c if less(data[b], data[c]) else b

    def _random_pivot(self, lo: int, hi: int) -> int:
        return self._rng.randrange(lo, hi)

    # --------- partitioning ----------
    def _partition(self, lo: int, hi: int) -> Tuple[int, int]:
        """
        Dijkstra three-way partition of ``[lo, hi)``.

        Returns ``(lt, gt)`` such that ``[lo, lt)`` sorts before the pivot,
        ``[lt, gt)`` is equal to it and ``[gt, hi)`` sorts after it. The
        pivot starts the equal block, so ``gt > lt`` even when the ordering
        is malformed.
        """
        data, less = self._buffer, self._less
        p = self._choose_pivot(lo, hi)
        data[lo], data[p] = data[p], data[lo]
        pivot = data[lo]
        lt, i, gt = lo, lo + 1, hi
        while i < gt:
            x = data[i]
            if less(x, pivot):
                data[lt], data[i] = x, data[lt]
                lt += 1
                i += 1
            elif less(pivot, x):
                gt -= 1
                data[i], data[gt] = data[gt], x
            else:
                i += 1
        return lt, gt

    def __next__(self) -> T:
        stack = self._stack
        while stack:
            lo, hi, resolved = stack[-1]
            size = hi - lo
            if size == 0:
                stack.pop()
                continue
            if size == 1 or resolved:
                if size == 1:
                    stack.pop()
                else:
                    stack[-1] = (lo + 1, hi, True)
                self._emitted += 1
                if self._emitted == self._n:
                    logger.debug(f"Partition stack exhausted after {self._n} elements")
                return self._buffer[lo]
            # The range stays on the stack until partitioning succeeds.
            lt, gt = self._partition(lo, hi)
            stack.pop()
            if gt < hi:
                stack.append((gt, hi, False))
            stack.append((lt, gt, True))
            if lo < lt:
                stack.append((lo, lt, False))
        raise StopIteration

    @property
    def depth(self) -> int:
        """Number of ranges waiting on the stack"""
        return len(self._stack)
