import json

import pytest
import yaml

from experiments.run_benchmark import main


def write_config(path, solvers):
    data = {
        "seed": 3,
        "iterations": 4,
        "validate_solutions": True,
        "solvers": solvers,
        "settings": [
            {"item_size_min": 1, "item_size_max": 20, "item_limit": 50, "container_size": 40},
            {"item_size_min": 2, "item_size_max": 8, "item_limit": 30, "container_size": 8},
        ],
    }
    path.write_text(yaml.safe_dump(data))
    return path


def test_cli_writes_payload(tmp_path):
    cfg = write_config(
        tmp_path / "cfg.yaml",
        [{"id": "Next Fit", "sorted": False}, {"id": "First Fit", "sorted": True}],
    )
    out = tmp_path / "out"
    path = main(["--config", str(cfg), "--output-root", str(out), "--iterations", "2", "--csv"])

    payload = json.loads(path.read_text())
    assert len(payload) == 4
    assert [(r["settings"]["container_size"], r["solver"]["name"]) for r in payload] == [
        (40, "Next Fit"), (40, "First Fit"), (8, "Next Fit"), (8, "First Fit"),
    ]
    assert all(r["iterations"] == 2 for r in payload)
    assert all(r["quality"]["best"] >= 1.0 for r in payload)
    assert path.with_suffix(".csv").exists()


def test_cli_unknown_solver_exits(tmp_path):
    cfg = write_config(tmp_path / "cfg.yaml", [{"id": "Worst Fit", "sorted": False}])
    out = tmp_path / "out"
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(cfg), "--output-root", str(out)])
    assert exc_info.value.code == 1
    assert not list(out.glob("results_*.json"))
