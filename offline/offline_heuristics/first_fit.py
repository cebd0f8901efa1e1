from __future__ import annotations
from typing import Callable, Iterable, List

from core.models import Container, Item
from offline.offline_heuristics.core import open_container_with


def first_fit(items: Iterable[Item], new_container: Callable[[], Container]) -> List[Container]:
    """
    First-Fit (FF) keeps all containers open, in the order in which they were opened.
    Each item goes into the first container with enough free space; a new
    container is appended only if none accepts it.
    """
    containers: List[Container] = []

    for item in items:
        placed = False
        for container in containers:
            if container.attempt_place(item) is None:
                placed = True
                break

        if not placed:
            containers.append(open_container_with(item, new_container))

    return containers
