"""
Test suite for logging and the measurement helpers.
"""

import logging
import tracemalloc

import pytest
from lazysort import make_adapter
from lazysort.utils import (
    CountingComparator,
    clear_performance_metrics,
    compare_with_eager,
    get_performance_summary,
    measure_performance,
    setup_logging,
)


@pytest.fixture(autouse=True)
def fresh_metrics():
    clear_performance_metrics()
    yield
    clear_performance_metrics()


class TestCountingComparator:
    """Test the call-counting comparator"""

    def test_natural_ordering(self):
        counter = CountingComparator()
        assert counter(1, 2) < 0
        assert counter(2, 1) > 0
        assert counter(3, 3) == 0
        assert counter.calls == 3

        counter.reset()
        assert counter.calls == 0

    def test_wraps_inner_comparator(self):
        counter = CountingComparator(lambda a, b: len(a) - len(b))
        assert counter("aa", "b") > 0
        assert counter.calls == 1


class TestPerformanceMetrics:
    """Test performance measurement and summaries"""

    def test_measure_performance_records_call(self):
        """Test that a successful call is timed and recorded"""
        info = measure_performance("take_5", lambda: make_adapter(range(1000, 0, -1)).take(5))

        assert info["success"] is True
        assert info["result"] == [1, 2, 3, 4, 5]
        assert info["result_size"] == 5
        assert info["execution_time_ms"] >= 0

        summary = get_performance_summary()
        assert summary["total_operations"] == 1
        assert summary["avg_time_ms"] == pytest.approx(info["execution_time_ms"])

    def test_measure_performance_reraises(self):
        """Test that failures are recorded and then re-raised"""
        def broken():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            measure_performance("broken", broken)
        assert get_performance_summary()["total_operations"] == 1

    def test_caller_trace_left_running(self):
        """Test that an already running tracemalloc trace is not stopped"""
        tracemalloc.start()
        try:
            measure_performance("take_1", lambda: make_adapter([2, 1]).take(1))
            assert tracemalloc.is_tracing(), "Caller's trace was stopped"
        finally:
            tracemalloc.stop()

    def test_trace_stopped_when_started_here(self):
        """Test that a trace started for the measurement is stopped afterwards"""
        assert not tracemalloc.is_tracing()
        measure_performance("take_1", lambda: make_adapter([2, 1]).take(1))
        assert not tracemalloc.is_tracing()

    def test_empty_summary(self):
        """Test the summary before anything ran"""
        summary = get_performance_summary()
        assert summary["total_operations"] == 0
        assert summary["avg_time_ms"] == 0.0


class TestCompareWithEager:
    """Test the lazy vs eager prefix comparison"""

    @pytest.mark.parametrize("strategy", ["heap", "partition"])
    def test_small_prefix_is_cheaper(self, strategy, large_random_data):
        result = compare_with_eager(large_random_data, 100, strategy=strategy)

        assert result["prefix_matches"] is True
        assert result["input_size"] == 50_000
        assert result["strategy"] == strategy
        assert result["lazy_comparisons"] < result["eager_comparisons"]

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="lazysort"):
            compare_with_eager([3, 1, 2], 2)
        assert any("k=2 of n=3" in record.getMessage() for record in caplog.records)


class TestLogging:
    """Test logger wiring"""

    def test_setup_logging_returns_package_logger(self, tmp_path):
        log_file = tmp_path / "lazysort.log"
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        assert logger.name == "lazysort"

    def test_selectors_log_at_debug(self, caplog, strategy):
        with caplog.at_level(logging.DEBUG, logger="lazysort"):
            make_adapter([2, 1], strategy=strategy).to_list()

        names = {record.name for record in caplog.records}
        assert "lazysort.lazy" in names
        assert f"lazysort.{strategy.value}" in names
        assert any("exhausted" in record.getMessage() for record in caplog.records)
