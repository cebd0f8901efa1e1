# binpacking/data/io.py
from __future__ import annotations
from pathlib import Path
import json
from typing import Any, Dict, List, Sequence
from core.config import Settings
from core.models import ProblemResult, Statistic

def result_to_dict(result: ProblemResult) -> Dict[str, Any]:
    """
    JSON-safe record for one (settings, solver variant) cell. All fields are always present.
    """
    settings = result.settings.as_dict() if result.settings is not None else {
        "item_size_min": 0, "item_size_max": 0, "item_limit": 0, "container_size": 0,
    }
    return {
        "solver": {"name": result.solver_name, "sorted": result.sorted},
        "settings": settings,
        "iterations": result.iterations,
        "optimal_solutions_found": result.optimal_solutions_found,
        "quality": _statistic_to_dict(result.quality),
        "time_us": _statistic_to_dict(result.time_us),
    }

def result_from_dict(data: Dict[str, Any]) -> ProblemResult:
    return ProblemResult(
        solver_name=str(data["solver"]["name"]),
        sorted=bool(data["solver"]["sorted"]),
        settings=Settings(**data["settings"]),
        iterations=int(data["iterations"]),
        optimal_solutions_found=int(data["optimal_solutions_found"]),
        quality=Statistic(**{k: float(v) for k, v in data["quality"].items()}),
        time_us=Statistic(**{k: float(v) for k, v in data["time_us"].items()}),
    )

def _statistic_to_dict(stat: Statistic) -> Dict[str, float]:
    return {"best": float(stat.best), "worst": float(stat.worst), "average": float(stat.average)}

def save_results(results: Sequence[ProblemResult], path: Path) -> None:
    """
    Serialize benchmark results as a JSON list (row-major: settings outer, solvers inner).
    """
    save_json([result_to_dict(r) for r in results], path)

def load_results(path: Path) -> List[ProblemResult]:
    """
    Load a results payload back into strong types.
    """
    data = json.loads(Path(path).read_text())
    return [result_from_dict(entry) for entry in data]

def save_json(obj: Any, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2))
