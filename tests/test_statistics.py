import sys

import numpy as np
import pytest

from core.models import ProblemResult, Statistic


def test_fresh_result_is_seeded_for_first_sample():
    result = ProblemResult()
    assert result.iterations == 0
    assert result.optimal_solutions_found == 0
    assert result.quality.best == sys.float_info.max
    assert result.time_us.best == sys.float_info.max
    assert result.quality.worst == 0.0


def test_incremental_matches_batch():
    samples = [1.0, 1.25, 1.0, 1.5]
    result = ProblemResult(solver_name="First Fit")
    for q in samples:
        result.record(q, 10.0 * q, optimal=q == 1.0)

    assert result.iterations == 4
    assert result.optimal_solutions_found == 2
    assert result.quality.best == 1.0
    assert result.quality.worst == 1.5
    assert result.quality.average == pytest.approx(1.1875)
    assert result.quality.average == pytest.approx(float(np.mean(samples)))
    assert result.time_us.average == pytest.approx(11.875)
    assert result.time_us.best == pytest.approx(10.0)
    assert result.time_us.worst == pytest.approx(15.0)


def test_min_max_order_independent():
    rng = np.random.default_rng(3)
    samples = rng.uniform(1.0, 2.0, size=200).tolist()
    forward, backward = Statistic(), Statistic()
    for n, s in enumerate(samples, start=1):
        forward.add(s, n)
    for n, s in enumerate(reversed(samples), start=1):
        backward.add(s, n)

    assert forward.best == backward.best == min(samples)
    assert forward.worst == backward.worst == max(samples)
    assert forward.average == pytest.approx(np.mean(samples), rel=1e-12)
    assert backward.average == pytest.approx(np.mean(samples), rel=1e-12)
