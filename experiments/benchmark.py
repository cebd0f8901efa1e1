from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

import numpy as np

from core.config import BenchmarkConfig, Settings, SolverVariant
from core.errors import UnfittableItemError
from core.general_utils import elapsed_us, make_rng, sort_decreasing
from core.models import Item, ProblemResult
from core.solution_checks import check_capacity_respected, check_items_preserved
from data.generators import WorkloadGenerator
from offline.offline_solver import build_solver

logger = logging.getLogger("binpacking.benchmark")


def prepare_items(items: Sequence[Item], variant: SolverVariant) -> Sequence[Item]:
    """Apply the variant's preprocessing (decreasing sort for 'sorted' variants)."""
    if variant.sorted:
        return sort_decreasing(items)
    return items


def quality_ratio(achieved: int, optimal: int) -> float:
    """
    Container count relative to the known optimum (1.0 == optimal solve).
    """
    if optimal <= 0:
        raise ValueError(f"Optimal container count must be positive, got {optimal}")
    return achieved / optimal


def run_cell(
    settings: Settings,
    variant: SolverVariant,
    iterations: int,
    rng: np.random.Generator,
    *,
    validate: bool = False,
) -> ProblemResult:
    """
    Run all iterations for one (settings, solver variant) cell and fold them
    into a ProblemResult. Every iteration draws a fresh workload; the optional
    sort is charged to the variant and timed together with the solve.
    """
    generator = WorkloadGenerator(settings, rng)
    solver = build_solver(variant, settings.container_size)
    result: Optional[ProblemResult] = None

    for iteration in range(iterations):
        items, optimal = generator.generate()

        start = time.perf_counter()
        containers = solver.solve(prepare_items(items, variant))
        end = time.perf_counter()

        if validate:
            check_capacity_respected(containers)
            check_items_preserved(items, containers)

        if result is None:
            result = ProblemResult(
                solver_name=solver.name(),
                sorted=variant.sorted,
                settings=settings,
            )

        achieved = len(containers)
        quality = quality_ratio(achieved, optimal)
        result.record(quality, elapsed_us(start, end), optimal=achieved == optimal)
        logger.debug(
            "  %s (sorted=%s) iteration %d: %d containers, optimal %d, quality %.4f",
            solver.name(), variant.sorted, iteration, achieved, optimal, quality,
        )

    if result is None:
        result = ProblemResult(solver_name=solver.name(), sorted=variant.sorted, settings=settings)
    return result


def run_benchmark(
    cfg: BenchmarkConfig,
    rng: Optional[np.random.Generator] = None,
) -> List[ProblemResult]:
    """
    Sweep settings x solver variants x iterations.

    Returns one ProblemResult per (settings, solver) pair in row-major order
    (settings outer, solvers inner). An item that can't fit an empty container
    aborts the whole run; no partial results are returned.
    """
    if rng is None:
        rng = make_rng(cfg.seed)

    results: List[ProblemResult] = []
    for settings_idx, settings in enumerate(cfg.settings):
        logger.info(
            "Scenario %d/%d: items=%d, sizes=[%d, %d), container=%d",
            settings_idx + 1,
            len(cfg.settings),
            settings.item_limit,
            settings.item_size_min,
            settings.item_size_max,
            settings.container_size,
        )
        for variant in cfg.solvers:
            try:
                result = run_cell(
                    settings,
                    variant,
                    cfg.iterations,
                    rng,
                    validate=cfg.validate_solutions,
                )
            except UnfittableItemError as exc:
                logger.error(
                    "Aborting run: scenario #%d %s with solver '%s' (sorted=%s): %s",
                    settings_idx, settings.as_dict(), variant.id, variant.sorted, exc,
                )
                raise
            results.append(result)
            logger.info(
                "  %s (sorted=%s): quality avg %.4f [best %.4f, worst %.4f], "
                "optimal %d/%d, time avg %.1fus",
                result.solver_name,
                result.sorted,
                result.quality.average,
                result.quality.best,
                result.quality.worst,
                result.optimal_solutions_found,
                result.iterations,
                result.time_us.average,
            )
    return results
