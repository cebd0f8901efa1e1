# binpacking/core/errors.py
from __future__ import annotations


class BenchmarkError(Exception):
    """Base class for fatal benchmark failures."""


class ConfigError(BenchmarkError, ValueError):
    """Raised when the benchmark configuration is missing keys or violates its constraints."""


class UnknownSolverError(ConfigError):
    """Raised when a configuration names a heuristic that is not implemented."""

    def __init__(self, solver_id: object, known: list[str]) -> None:
        self.solver_id = solver_id
        self.known = list(known)
        super().__init__(
            f"Unknown solver '{solver_id}'. Known solvers: {', '.join(self.known)}"
        )


class UnfittableItemError(BenchmarkError):
    """Raised when an item does not fit into an empty container."""

    def __init__(self, item, capacity: int) -> None:
        self.item = item
        self.capacity = capacity
        super().__init__(
            f"An item of size {item.size} won't fit into an empty container "
            f"of size {capacity}"
        )
