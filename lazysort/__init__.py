"""
lazysort - incremental sorting.

Yields the elements of a collection in sorted order one at a time, doing
only the work needed for the prefix actually consumed.
"""

from .base import Selector
from .heap import HeapSelector
from .lazy import LazySorted, build_less, lazy_sorted, make_adapter
from .models import LazySortConfig, PivotPolicy, SortStrategy
from .partition import PartitionSelector

__version__ = "0.1.0"

__all__ = [
    "HeapSelector",
    "LazySortConfig",
    "LazySorted",
    "PartitionSelector",
    "PivotPolicy",
    "Selector",
    "SortStrategy",
    "build_less",
    "lazy_sorted",
    "make_adapter",
]
