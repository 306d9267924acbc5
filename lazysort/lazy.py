"""
Lazy sorted sequence adapter.

Copies the source into an owned buffer once, then hands each pull to the
selected strategy so only the requested prefix is ever ordered.
"""

import logging
import operator
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Type, Union

from .base import Less, Selector
from .heap import HeapSelector
from .models import LazySortConfig, PivotPolicy, SortStrategy
from .partition import PartitionSelector

logger = logging.getLogger(__name__)


SELECTORS: Dict[SortStrategy, Type[Selector]] = {
    SortStrategy.HEAP: HeapSelector,
    SortStrategy.PARTITION: PartitionSelector,
}


def build_less(cmp: Optional[Callable[[Any, Any], int]] = None,
               keyed: bool = False, reverse: bool = False) -> Less:
    """
    Reduce an ordering to a strict "sorts before" predicate.

    ``keyed`` means buffer entries are ``(key_value, element)`` pairs and
    only the key takes part in comparisons.
    """
    if cmp is not None:
        if reverse:
            def less(a, b):
                return cmp(b, a) < 0
        else:
            def less(a, b):
                return cmp(a, b) < 0
    elif keyed:
        if reverse:
            def less(a, b):
                return b[0] < a[0]
        else:
            def less(a, b):
                return a[0] < b[0]
    else:
        less = operator.gt if reverse else operator.lt
    return less


class LazySorted:
    """
    Iterator over ``source`` in sorted order, computed one element per pull.

    The source is copied at construction and never mutated. Not stable:
    equal elements come out in an unspecified relative order. A single
    consumer is assumed; there is no internal locking.
    """

    def __init__(self, source: Iterable, *, key: Optional[Callable[[Any], Any]] = None,
                 cmp: Optional[Callable[[Any, Any], int]] = None,
                 config: Optional[LazySortConfig] = None):
        if key is not None and cmp is not None:
            raise ValueError("Pass either key or cmp, not both")
        self.config = config or LazySortConfig()
        self._keyed = key is not None
        if self._keyed:
            buffer: List = [(key(item), item) for item in source]
        else:
            buffer = list(source)
        less = build_less(cmp=cmp, keyed=self._keyed, reverse=self.config.reverse)
        self._selector = SELECTORS[self.config.strategy].from_config(buffer, less, self.config)
        logger.debug(
            f"LazySorted over {len(buffer)} elements "
            f"(strategy={self.config.strategy.value}, reverse={self.config.reverse})"
        )

    # --------- iterator protocol ----------
    def __iter__(self):
        return self

    def __next__(self):
        entry = next(self._selector)
        return entry[1] if self._keyed else entry

    def __length_hint__(self) -> int:
        return self._selector.remaining

    # --------- pulling ----------
    def pull(self, default=None):
        """Return the next element, or default once exhausted"""
        try:
            return next(self)
        except StopIteration:
            return default

    def first(self, default=None):
        """Return the smallest remaining element, or default if none is left"""
        return self.pull(default)

    def take(self, n: int) -> List:
        """Pull up to n elements; no work is done past the n-th. n must be an integer"""
        n = operator.index(n)
        if n < 0:
            raise ValueError("take() count must be >= 0")
        taken = []
        while len(taken) < n:
            try:
                taken.append(next(self))
            except StopIteration:
                break
        return taken

    def batch(self, size: int) -> Iterator[Tuple]:
        """Lazily group the remaining elements into tuples of up to size elements"""
        size = operator.index(size)
        if size < 1:
            raise ValueError("Batch size must be >= 1")
        return self._batches(size)

    def chunk(self, size: int) -> Iterator[Tuple]:
        """Alias for batch()"""
        return self.batch(size)

    def _batches(self, size: int) -> Iterator[Tuple]:
        while True:
            bucket = self.take(size)
            if not bucket:
                return
            yield tuple(bucket)

    def to_list(self) -> List:
        """Drain every remaining element"""
        return list(self)

    # --------- state ----------
    @property
    def strategy(self) -> SortStrategy:
        return self.config.strategy

    @property
    def remaining(self) -> int:
        return self._selector.remaining

    @property
    def emitted(self) -> int:
        return self._selector.emitted

    @property
    def exhausted(self) -> bool:
        return self._selector.exhausted

    def __repr__(self):
        return (
            f"LazySorted(strategy={self.config.strategy.value}, "
            f"emitted={self.emitted}, remaining={self.remaining})"
        )


def make_adapter(source: Iterable, *, key: Optional[Callable[[Any], Any]] = None,
                 cmp: Optional[Callable[[Any, Any], int]] = None,
                 reverse: bool = False,
                 strategy: Union[SortStrategy, str] = SortStrategy.HEAP,
                 pivot: Union[PivotPolicy, str] = PivotPolicy.MEDIAN_OF_THREE,
                 seed: Optional[int] = None,
                 config: Optional[LazySortConfig] = None) -> LazySorted:
    """
    Build a lazy sorted view of ``source``.

    The loose ``reverse``/``strategy``/``pivot``/``seed`` options are
    validated through LazySortConfig; an explicit ``config`` wins over them.
    """
    if config is None:
        config = LazySortConfig(strategy=strategy, pivot=pivot, seed=seed, reverse=reverse)
    return LazySorted(source, key=key, cmp=cmp, config=config)


def lazy_sorted(iterable: Iterable, *, key: Optional[Callable[[Any], Any]] = None,
                cmp: Optional[Callable[[Any, Any], int]] = None,
                reverse: bool = False,
                strategy: Union[SortStrategy, str] = SortStrategy.PARTITION,
                pivot: Union[PivotPolicy, str] = PivotPolicy.MEDIAN_OF_THREE,
                seed: Optional[int] = None) -> LazySorted:
    """Lazy counterpart of the builtin sorted(); partitions by default"""
    return make_adapter(iterable, key=key, cmp=cmp, reverse=reverse,
                        strategy=strategy, pivot=pivot, seed=seed)
