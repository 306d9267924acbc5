"""
Heap-based lazy selection.

The buffer is turned into a binary min-heap in place (O(n)); each request
pops the root (O(log n)).
"""

import logging
from typing import List, Optional, TypeVar

from .base import Less, Selector

T = TypeVar("T")

logger = logging.getLogger(__name__)

_NOTHING = object()


class HeapSelector(Selector[T]):
    """Lazy selector backed by an in-place binary min-heap"""

    def __init__(self, buffer: List[T], less: Less):
        super().__init__(buffer, less)
        self._heap_len = self._n
        self._pending = _NOTHING
        self._interrupted_at: Optional[int] = None
        self._heapify()
        logger.debug(f"Heapified {self._n} elements")

    def _heapify(self) -> None:
        """Bottom-up build: sift down every internal node, last parent first"""
        for i in reversed(range(self._heap_len // 2)):
            self._sift_down(i)

    def _sift_down(self, idx: int) -> None:
        data = self._buffer
        less = self._less
        n = self._heap_len
        try:
            while True:
                left = 2 * idx + 1
                if left >= n:
                    return
                smallest = left
                right = left + 1
                if right < n and less(data[right], data[left]):
                    smallest = right
                if not less(data[smallest], data[idx]):
                    return
                data[idx], data[smallest] = data[smallest], data[idx]
                idx = smallest
        except Exception:
            # Only the element at idx may be out of place; resume from there.
            self._interrupted_at = idx
            raise

    def __next__(self) -> T:
        if self._pending is not _NOTHING:
            result, self._pending = self._pending, _NOTHING
            return self._emit(result)
        if self._interrupted_at is not None:
            idx, self._interrupted_at = self._interrupted_at, None
            self._sift_down(idx)
        if self._heap_len == 0:
            raise StopIteration
        data = self._buffer
        result = data[0]
        last = self._heap_len - 1
        data[0], data[last] = data[last], data[0]
        self._heap_len = last
        if last > 1:
            try:
                self._sift_down(0)
            except Exception:
                # Popped but not returned yet; hand it out on the next call.
                self._pending = result
                raise
        return self._emit(result)

    def _emit(self, result: T) -> T:
        self._emitted += 1
        if self._emitted == self._n:
            logger.debug(f"Heap exhausted after {self._emitted} elements")
        return result

    @property
    def heap_len(self) -> int:
        return self._heap_len
