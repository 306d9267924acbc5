"""
Utility functions for lazysort

Logging setup, comparator call counting and helpers for measuring how much
work a lazy prefix costs compared to an eager sort.
"""

import functools
import gc
import logging
import sys
import time
import tracemalloc
from typing import Any, Callable, Dict, List, Optional

from .lazy import make_adapter
from .models import PivotPolicy, SortStrategy


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Setup structured logging for lazysort"""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s',
        handlers=handlers
    )
    return logging.getLogger('lazysort')


logger = logging.getLogger(__name__)


class CountingComparator:
    """Three-way comparator that counts how often it is called"""

    def __init__(self, cmp: Optional[Callable[[Any, Any], int]] = None):
        self._cmp = cmp
        self.calls = 0

    def __call__(self, a, b) -> int:
        self.calls += 1
        if self._cmp is not None:
            return self._cmp(a, b)
        return (a > b) - (a < b)

    def reset(self) -> None:
        self.calls = 0


# Global performance tracking
_performance_metrics = {
    "operations": [],
    "total_time_ms": 0.0,
    "total_memory_mb": 0.0,
    "operation_count": 0
}


def _record(performance_info: Dict[str, Any]) -> None:
    _performance_metrics["operations"].append(performance_info)
    _performance_metrics["total_time_ms"] += performance_info["execution_time_ms"]
    _performance_metrics["total_memory_mb"] += performance_info["memory_usage_mb"]
    _performance_metrics["operation_count"] += 1


def measure_performance(operation_name: str, func, *args, **kwargs) -> Dict[str, Any]:
    """Measure performance of a function call with memory tracking"""
    # A trace the caller already runs is left running.
    started_tracing = not tracemalloc.is_tracing()
    if started_tracing:
        tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)

        execution_time_ms = (time.perf_counter() - start_time) * 1000
        current, peak = tracemalloc.get_traced_memory()

        performance_info = {
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": True,
            "result": result,
            "result_size": len(result) if hasattr(result, "__len__") else None,
            "timestamp": time.time()
        }
        _record(performance_info)
        return performance_info

    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        current, peak = tracemalloc.get_traced_memory()

        _record({
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": False,
            "error": str(e),
            "timestamp": time.time()
        })
        logger.error(f"Operation {operation_name} failed: {e}")
        raise

    finally:
        if started_tracing:
            tracemalloc.stop()


def get_performance_summary() -> Dict[str, Any]:
    """Get summary of all performance metrics"""
    count = _performance_metrics["operation_count"]
    if count == 0:
        return {
            "total_operations": 0,
            "total_time_ms": 0.0,
            "total_memory_mb": 0.0,
            "avg_time_ms": 0.0,
            "avg_memory_mb": 0.0
        }

    return {
        "total_operations": count,
        "total_time_ms": _performance_metrics["total_time_ms"],
        "total_memory_mb": _performance_metrics["total_memory_mb"],
        "avg_time_ms": _performance_metrics["total_time_ms"] / count,
        "avg_memory_mb": _performance_metrics["total_memory_mb"] / count
    }


def clear_performance_metrics():
    """Clear all performance metrics"""
    global _performance_metrics
    _performance_metrics = {
        "operations": [],
        "total_time_ms": 0.0,
        "total_memory_mb": 0.0,
        "operation_count": 0
    }


def compare_with_eager(data: List[Any], k: int,
                       strategy: SortStrategy = SortStrategy.PARTITION,
                       pivot: PivotPolicy = PivotPolicy.MEDIAN_OF_THREE) -> Dict[str, Any]:
    """
    Take the k smallest elements of data lazily and eagerly and report the
    comparator calls and time each approach spent.
    """
    lazy_cmp = CountingComparator()
    start_time = time.perf_counter()
    lazy_prefix = make_adapter(data, cmp=lazy_cmp, strategy=strategy, pivot=pivot).take(k)
    lazy_time_ms = (time.perf_counter() - start_time) * 1000

    eager_cmp = CountingComparator()
    start_time = time.perf_counter()
    eager_prefix = sorted(data, key=functools.cmp_to_key(eager_cmp))[:k]
    eager_time_ms = (time.perf_counter() - start_time) * 1000

    result = {
        "input_size": len(data),
        "k": k,
        "strategy": SortStrategy(strategy).value,
        "lazy_comparisons": lazy_cmp.calls,
        "eager_comparisons": eager_cmp.calls,
        "lazy_time_ms": lazy_time_ms,
        "eager_time_ms": eager_time_ms,
        "prefix_matches": lazy_prefix == eager_prefix
    }
    logger.info(
        f"k={k} of n={len(data)} ({result['strategy']}): "
        f"{lazy_cmp.calls} lazy vs {eager_cmp.calls} eager comparisons"
    )
    return result
