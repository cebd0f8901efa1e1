# binpacking/core/models.py
from __future__ import annotations
from dataclasses import dataclass, field
import sys
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from core.config import Settings

# ---------------------------
# Packing primitives
# ---------------------------

@dataclass(frozen=True)
class Item:
    """
    Atomic unit of work.
    - size: non-negative integer size
    """
    size: int


@dataclass
class Container:
    """
    Fixed-capacity container filled by a solver.
    - capacity: fixed at creation
    - occupied: running sum of contained sizes (never exceeds capacity)
    - contents: items in placement order
    """
    capacity: int
    occupied: int = 0
    contents: List[Item] = field(default_factory=list)

    def attempt_place(self, item: Item) -> Optional[Item]:
        """
        Place 'item' if it fits. Returns None on success and the item itself
        when it was rejected (container unchanged).
        """
        if self.occupied + item.size > self.capacity:
            return item

        self.occupied += item.size
        self.contents.append(item)
        return None

    @property
    def free(self) -> int:
        return self.capacity - self.occupied

    @property
    def sizes(self) -> List[int]:
        return [it.size for it in self.contents]


# ---------------------------
# Benchmark aggregates
# ---------------------------

@dataclass
class Statistic:
    """
    Running best/worst/average of one metric, kept without the sample history.
    'best' is the minimum (lower quality ratio and lower runtime are better).
    """
    best: float = sys.float_info.max
    worst: float = 0.0
    average: float = 0.0

    def add(self, sample: float, count: int) -> None:
        """Fold in the count-th sample (count starts at 1)."""
        self.best = min(self.best, sample)
        self.worst = max(self.worst, sample)
        self.average += (sample - self.average) / count


@dataclass
class ProblemResult:
    """
    Aggregated outcome for one (settings, solver variant) cell.
    - quality: achieved / optimal container count
    - time_us: wall-clock time of sort + solve in microseconds
    """
    solver_name: str = ""
    sorted: bool = False
    settings: Optional[Settings] = None
    iterations: int = 0
    optimal_solutions_found: int = 0
    quality: Statistic = field(default_factory=Statistic)
    time_us: Statistic = field(default_factory=Statistic)

    def record(self, quality: float, elapsed_us: float, *, optimal: bool) -> None:
        self.iterations += 1
        if optimal:
            self.optimal_solutions_found += 1
        self.quality.add(quality, self.iterations)
        self.time_us.add(elapsed_us, self.iterations)
