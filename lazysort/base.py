"""
Selector contract shared by the lazy sorting strategies.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")

# Strict "a sorts before b" predicate; every ordering is reduced to one of these.
Less = Callable[[Any, Any], bool]


class Selector(ABC, Generic[T]):
    """
    Produces the elements of an owned buffer in ascending order, one per
    ``__next__`` call, doing only the work needed for that element.

    Once exhausted, every further call raises ``StopIteration`` again.
    """

    def __init__(self, buffer: List[T], less: Less):
        self._buffer = buffer
        self._less = less
        self._n = len(buffer)
        self._emitted = 0

    @classmethod
    def from_config(cls, buffer: List[T], less: Less, config) -> "Selector[T]":
        """Build the selector from a LazySortConfig; strategies pick the options they use"""
        return cls(buffer, less)

    @abstractmethod
    def __next__(self) -> T:
        """Return the next smallest element or raise StopIteration"""

    def __iter__(self):
        return self

    def __length_hint__(self) -> int:
        return self.remaining

    @property
    def emitted(self) -> int:
        return self._emitted

    @property
    def remaining(self) -> int:
        return self._n - self._emitted

    @property
    def exhausted(self) -> bool:
        return self._emitted == self._n

    def __repr__(self):
        return (
            f"{type(self).__name__}(emitted={self._emitted}, "
            f"remaining={self.remaining})"
        )
