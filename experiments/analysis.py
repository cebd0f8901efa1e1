from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd

from core.models import ProblemResult
from data.io import load_results

SETTINGS_COLUMNS = ["item_size_min", "item_size_max", "item_limit", "container_size"]


def results_dataframe(results: Sequence[ProblemResult]) -> pd.DataFrame:
    """
    Flatten benchmark results into one row per (settings, solver variant) cell.
    """
    rows = []
    for result in results:
        row = {
            "solver": result.solver_name,
            "sorted": result.sorted,
        }
        settings = result.settings.as_dict() if result.settings is not None else {}
        for col in SETTINGS_COLUMNS:
            row[col] = settings.get(col)
        row.update(
            {
                "iterations": result.iterations,
                "optimal_solutions_found": result.optimal_solutions_found,
                "optimal_rate": (
                    result.optimal_solutions_found / result.iterations
                    if result.iterations
                    else float("nan")
                ),
                "quality_best": result.quality.best,
                "quality_worst": result.quality.worst,
                "quality_average": result.quality.average,
                "time_us_best": result.time_us.best,
                "time_us_worst": result.time_us.worst,
                "time_us_average": result.time_us.average,
            }
        )
        rows.append(row)
    columns = [
        "solver", "sorted", *SETTINGS_COLUMNS, "iterations", "optimal_solutions_found",
        "optimal_rate", "quality_best", "quality_worst", "quality_average",
        "time_us_best", "time_us_worst", "time_us_average",
    ]
    return pd.DataFrame(rows, columns=columns)


def solver_summary(df: pd.DataFrame) -> pd.DataFrame:
    """
    Average each solver variant over all scenarios (iteration-weighted quality and time).
    """
    if df.empty:
        return pd.DataFrame(
            columns=["solver", "sorted", "scenarios", "iterations", "optimal_rate",
                     "quality_average", "time_us_average"]
        )
    rows = []
    for (solver, is_sorted), group in df.groupby(["solver", "sorted"], sort=False):
        weights = group["iterations"].astype(float)
        total = float(weights.sum())
        rows.append(
            {
                "solver": solver,
                "sorted": bool(is_sorted),
                "scenarios": len(group),
                "iterations": int(total),
                "optimal_rate": float(group["optimal_solutions_found"].sum()) / total,
                "quality_average": float((group["quality_average"] * weights).sum()) / total,
                "time_us_average": float((group["time_us_average"] * weights).sum()) / total,
            }
        )
    return pd.DataFrame(rows)


def write_summary_csv(results: Sequence[ProblemResult], path: Path) -> pd.DataFrame:
    df = results_dataframe(results)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return df


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tabulate a benchmark results file.")
    parser.add_argument("results", type=Path, help="JSON results file written by run_benchmark.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the CSV tables (defaults to the results file's folder).",
    )
    return parser.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)
    output_dir = args.output_dir or args.results.parent
    results = load_results(args.results)
    df = write_summary_csv(results, output_dir / f"{args.results.stem}_cells.csv")
    summary = solver_summary(df)
    summary.to_csv(output_dir / f"{args.results.stem}_solvers.csv", index=False)

    with pd.option_context("display.max_columns", None):
        print("Solver summary:")
        print(summary)


if __name__ == "__main__":
    main()
