from __future__ import annotations
from typing import Callable, Iterable, List

from core.models import Container, Item
from offline.offline_heuristics.core import open_container_with


def next_fit(items: Iterable[Item], new_container: Callable[[], Container]) -> List[Container]:
    """
    Next-Fit (NF) always keeps a single open container.
    When the next item does not fit into it, the container is closed for good
    and a new one is opened for the item.
    """
    containers: List[Container] = []
    current = None

    for item in items:
        if current is not None and current.attempt_place(item) is None:
            continue

        current = open_container_with(item, new_container)
        containers.append(current)

    return containers
