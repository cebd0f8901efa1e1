# binpacking/data/generators.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np
from core.config import Settings
from core.models import Item


class WorkloadGenerator:
    """
    Item stream generator with a known optimal container count.

    Items are drawn uniformly from [item_size_min, item_size_max) while
    tracking a 'conceptual' container. A draw that would overflow it, and the
    very last item, are cut down to the remaining free space, so every
    conceptual container ends up exactly full. The number of conceptual
    containers is therefore the optimal container count for the sequence.
    """

    def __init__(self, settings: Settings, rng: np.random.Generator) -> None:
        self.settings = settings
        self.rng = rng

    def generate(self) -> Tuple[List[Item], int]:
        """
        Returns
        -------
        items:
            Shuffled item sequence of length item_limit.
        optimal_count:
            Exact minimal number of containers for these items.
        """
        s = self.settings
        items: List[Item] = []
        optimal_count = 0
        remaining = 0  # free space in the current conceptual container

        for idx in range(s.item_limit):
            if remaining == 0:
                optimal_count += 1
                remaining = s.container_size

            size = int(self.rng.integers(s.item_size_min, s.item_size_max))
            if size > remaining or idx == s.item_limit - 1:
                size = remaining

            remaining -= size
            items.append(Item(size=size))

        # Shuffle only after the optimal count is fixed so generation order can't be exploited.
        self.rng.shuffle(items)
        return items, optimal_count


def generate_workload(settings: Settings, rng: np.random.Generator) -> Tuple[List[Item], int]:
    """
    Convenience wrapper around WorkloadGenerator for a single draw.
    """
    return WorkloadGenerator(settings, rng).generate()
