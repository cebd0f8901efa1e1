from __future__ import annotations

"""
Benchmark runner: iterate settings x solver variants x iterations and write
one JSON payload with the aggregated statistics per cell.
"""

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Iterable, Optional

from core.config import load_config
from core.errors import BenchmarkError, ConfigError
from core.logging_setup import run_stamp, setup_logging
from data.io import save_results
from experiments.analysis import write_summary_csv
from experiments.benchmark import run_benchmark


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark 1-D bin-packing heuristics.")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/default.yaml"),
        help="Path to the benchmark YAML config.",
    )
    parser.add_argument(
        "--output-root",
        type=Path,
        default=Path("results/benchmark"),
        help="Directory for the results payload and the log file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the RNG seed from the config.",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Override the number of iterations per cell.",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Also write a flat CSV table of the results.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console/file log level.",
    )
    return parser.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> Optional[Path]:
    args = parse_args(argv)
    logger = setup_logging(args.output_root, level=getattr(logging, args.log_level))

    try:
        cfg = load_config(args.config)
        if args.seed is not None:
            cfg = dataclasses.replace(cfg, seed=args.seed)
        if args.iterations is not None:
            if args.iterations <= 0:
                raise ConfigError(f"iterations must be positive, got {args.iterations}")
            cfg = dataclasses.replace(cfg, iterations=args.iterations)

        logger.info(
            "Running %d scenario(s) x %d solver(s) x %d iteration(s), seed=%s",
            len(cfg.settings), len(cfg.solvers), cfg.iterations, cfg.seed,
        )
        results = run_benchmark(cfg)
    except BenchmarkError as exc:
        logger.error("Benchmark aborted: %s", exc)
        raise SystemExit(1) from exc

    stamp = run_stamp()
    path = args.output_root / f"results_{stamp}.json"
    save_results(results, path)
    logger.info("Results saved to %s", path)
    if args.csv:
        csv_path = args.output_root / f"results_{stamp}.csv"
        write_summary_csv(results, csv_path)
        logger.info("Summary table saved to %s", csv_path)
    return path


if __name__ == "__main__":
    main()
