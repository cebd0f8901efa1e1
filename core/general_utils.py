# binpacking/core/general_utils.py
from __future__ import annotations
from typing import Iterable, Optional
import numpy as np

from core.models import Item

def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Return a modern NumPy RNG (PCG64). If seed=None, it is non-deterministic.
    """
    return np.random.default_rng(seed)

def total_size(items: Iterable[Item]) -> int:
    return sum(it.size for it in items)

def sort_decreasing(items: Iterable[Item]) -> list[Item]:
    """
    Sort items by size (decreasing). Stable, so equal sizes keep their order.
    """
    return sorted(items, key=lambda it: it.size, reverse=True)

def elapsed_us(start: float, end: float) -> float:
    """Convert a perf_counter interval to microseconds."""
    return (end - start) * 1e6
