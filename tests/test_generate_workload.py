from core.config import Settings
from core.general_utils import make_rng, total_size
from data.generators import WorkloadGenerator, generate_workload


def test_workload_shapes_and_known_optimum():
    settings = Settings(item_size_min=1, item_size_max=100, item_limit=500, container_size=400)
    items, optimal = generate_workload(settings, make_rng(123))

    assert len(items) == settings.item_limit
    assert all(0 <= it.size <= settings.container_size for it in items)
    # every conceptual container is exactly full (the last item takes the remainder)
    assert total_size(items) == optimal * settings.container_size
    # at most item_limit conceptual containers, and at least enough to hold the volume
    assert 1 <= optimal <= settings.item_limit


def test_sizes_stay_in_range_except_cut_items():
    settings = Settings(item_size_min=20, item_size_max=50, item_limit=300, container_size=100)
    items, optimal = generate_workload(settings, make_rng(5))

    # sizes below the lower bound only come from cutting to the remaining free space,
    # which happens at most once per conceptual container
    cut = [it for it in items if it.size < settings.item_size_min]
    assert len(cut) <= optimal
    # only the final item may exceed the upper bound (it takes whatever space is left)
    assert sum(1 for it in items if it.size >= settings.item_size_max) <= 1


def test_zero_size_draws_do_not_inflate_optimum():
    settings = Settings(item_size_min=0, item_size_max=3, item_limit=60, container_size=5)
    for seed in range(10):
        items, optimal = generate_workload(settings, make_rng(seed))
        assert total_size(items) == optimal * settings.container_size


def test_single_item_fills_one_container():
    settings = Settings(item_size_min=1, item_size_max=5, item_limit=1, container_size=10)
    items, optimal = generate_workload(settings, make_rng(0))
    assert [it.size for it in items] == [10]
    assert optimal == 1


def test_same_seed_same_sequence():
    settings = Settings(item_size_min=1, item_size_max=30, item_limit=100, container_size=60)
    a = WorkloadGenerator(settings, make_rng(9)).generate()
    b = WorkloadGenerator(settings, make_rng(9)).generate()
    assert a == b


def test_fresh_draw_per_call():
    settings = Settings(item_size_min=1, item_size_max=30, item_limit=100, container_size=60)
    gen = WorkloadGenerator(settings, make_rng(9))
    first, _ = gen.generate()
    second, _ = gen.generate()
    assert first != second
