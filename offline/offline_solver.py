from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from core.config import SolverVariant
from core.models import Container, Item
from offline.offline_heuristics.core import SolverKind
from offline.offline_heuristics.first_fit import first_fit
from offline.offline_heuristics.next_fit import next_fit


@dataclass(frozen=True)
class Solver:
    """
    Offline 1-D bin-packing solver for a fixed container size.

    The heuristic is selected by 'kind'; dispatch happens on the tag rather
    than through subclasses since the set of heuristics is closed.
    """

    kind: SolverKind
    container_size: int

    # ---------- Public API ----------

    def name(self) -> str:
        return self.kind.value

    def new_container(self) -> Container:
        return Container(capacity=self.container_size)

    def solve(self, items: Sequence[Item]) -> List[Container]:
        """
        Pack 'items' in the given order.
        Raises UnfittableItemError if an item exceeds the container size.
        """
        if self.kind is SolverKind.NEXT_FIT:
            return next_fit(items, self.new_container)
        elif self.kind is SolverKind.FIRST_FIT:
            return first_fit(items, self.new_container)
        else:
            raise ValueError(f"Unhandled solver kind: {self.kind}")


def build_solver(variant: SolverVariant, container_size: int) -> Solver:
    return Solver(kind=variant.kind, container_size=container_size)
