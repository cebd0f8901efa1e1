from collections import Counter
from typing import Iterable, Sequence

from core.general_utils import total_size
from core.models import Container, Item

def check_capacity_respected(containers: Sequence[Container]) -> None:
    """Ensure no container holds more than its capacity and its bookkeeping matches its contents."""
    overfull = [i for i, c in enumerate(containers) if total_size(c.contents) > c.capacity]
    if overfull:
        raise AssertionError(f"Capacity violation at containers (0-based): {overfull[:10]}")
    drift = [i for i, c in enumerate(containers) if total_size(c.contents) != c.occupied]
    if drift:
        raise AssertionError(f"Occupied total does not match contents at containers: {drift[:10]}")

def check_items_preserved(items: Iterable[Item], containers: Sequence[Container]) -> None:
    """Ensure every input item was packed exactly once (multiset of sizes unchanged)."""
    expected = Counter(it.size for it in items)
    packed = Counter(size for c in containers for size in c.sizes)
    if expected != packed:
        missing = expected - packed
        extra = packed - expected
        raise AssertionError(
            f"Packed items differ from input. Missing sizes: {dict(missing)}, extra sizes: {dict(extra)}"
        )
