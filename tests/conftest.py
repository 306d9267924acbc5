"""
Configuration for pytest: import path setup and shared data fixtures.
"""

import random
import sys
from pathlib import Path

import pytest

# Add the project root to Python path so the lazysort package imports without installation
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))

from lazysort import PivotPolicy, SortStrategy


@pytest.fixture(params=[SortStrategy.HEAP, SortStrategy.PARTITION], ids=lambda s: s.value)
def strategy(request):
    """Every test using this fixture runs once per selection strategy."""
    return request.param


@pytest.fixture(params=list(PivotPolicy), ids=lambda p: p.value)
def pivot(request):
    """Every pivot policy of the partition strategy."""
    return request.param


@pytest.fixture
def random_data():
    """2,000 integers with plenty of duplicates, fixed seed."""
    rng = random.Random(1234)
    return [rng.randrange(500) for _ in range(2_000)]


@pytest.fixture
def large_random_data():
    """50,000 distinct-ish integers, fixed seed."""
    rng = random.Random(42)
    return [rng.randrange(2**32) for _ in range(50_000)]
