from __future__ import annotations
from enum import Enum
from typing import Callable

from core.errors import UnfittableItemError, UnknownSolverError
from core.models import Container, Item


class SolverKind(Enum):
    """Closed set of placement heuristics; the value is the configuration id."""
    NEXT_FIT = "Next Fit"
    FIRST_FIT = "First Fit"

    @classmethod
    def from_id(cls, solver_id: str) -> "SolverKind":
        try:
            return cls(solver_id)
        except ValueError as exc:
            raise UnknownSolverError(solver_id, [kind.value for kind in cls]) from exc


def open_container_with(item: Item, new_container: Callable[[], Container]) -> Container:
    """
    Open a fresh container via the solver's factory and place 'item' into it.
    Raises UnfittableItemError if even an empty container rejects the item.
    """
    container = new_container()
    if container.attempt_place(item) is not None:
        raise UnfittableItemError(item, container.capacity)
    return container
