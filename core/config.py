# binpacking/core/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import yaml
from pathlib import Path

from core.errors import ConfigError
from offline.offline_heuristics.core import SolverKind

# ---- Scenario & solver knobs ----

@dataclass(frozen=True)
class Settings:
    """
    One benchmark scenario.
    - item_size_min / item_size_max: half-open bound [min, max) for drawn item sizes
    - item_limit: number of items generated per iteration
    - container_size: capacity shared by the generator and all solvers
    """
    item_size_min: int
    item_size_max: int
    item_limit: int
    container_size: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "item_size_min": self.item_size_min,
            "item_size_max": self.item_size_max,
            "item_limit": self.item_limit,
            "container_size": self.container_size,
        }

@dataclass(frozen=True)
class SolverVariant:
    """
    Heuristic selection for a benchmark cell.
    - id: "Next Fit" | "First Fit"
    - sorted: if True, items are sorted by decreasing size before solving (timed)
    """
    id: str
    sorted: bool = False

    @property
    def kind(self) -> SolverKind:
        return SolverKind.from_id(self.id)

@dataclass
class BenchmarkConfig:
    """
    Full sweep definition: settings x solvers x iterations.
    - seed: RNG seed for reproducible runs (None draws fresh OS entropy)
    - validate_solutions: re-check every solve for overflow and lost items
    """
    solvers: List[SolverVariant]
    settings: List[Settings]
    iterations: int
    seed: Optional[int] = None
    validate_solutions: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkConfig":
        """
        Build a validated config from a plain mapping. Fails early if keys are missing.
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping.")
        missing = [key for key in ("solvers", "settings", "iterations") if key not in data]
        if missing:
            raise ConfigError(f"Configuration is missing required keys: {missing}")
        for key in ("solvers", "settings"):
            if not isinstance(data[key], list):
                raise ConfigError(f"'{key}' must be a list, got {data[key]!r}")

        solvers = [_parse_solver(entry) for entry in data["solvers"]]
        settings = [_parse_settings(idx, entry) for idx, entry in enumerate(data["settings"])]

        iterations = data["iterations"]
        if not _is_int(iterations) or iterations <= 0:
            raise ConfigError(f"iterations must be a positive integer, got {iterations!r}")
        seed = data.get("seed")
        if seed is not None and not _is_int(seed):
            raise ConfigError(f"seed must be an integer or null, got {seed!r}")

        return cls(
            solvers=solvers,
            settings=settings,
            iterations=int(iterations),
            seed=seed,
            validate_solutions=_parse_bool(data, "validate_solutions"),
        )

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)

def _parse_bool(entry: Dict[str, Any], key: str, default: bool = False) -> bool:
    value = entry.get(key, default)
    if not _is_bool(value):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value

def _parse_solver(entry: Any) -> SolverVariant:
    if not isinstance(entry, dict) or "id" not in entry:
        raise ConfigError(f"Solver entry must be a mapping with an 'id', got {entry!r}")
    # Unknown ids are rejected here, before any solving begins.
    SolverKind.from_id(entry["id"])
    return SolverVariant(id=entry["id"], sorted=_parse_bool(entry, "sorted"))

def _parse_settings(idx: int, entry: Any) -> Settings:
    try:
        settings = Settings(**entry)
    except TypeError as exc:
        raise ConfigError(f"Settings #{idx} is malformed: {exc}") from exc
    validate_settings(settings, idx)
    return settings

def validate_settings(settings: Settings, idx: int = 0) -> None:
    """
    Check the constraints the generator's packing guarantee relies on:
    0 <= item_size_min < item_size_max <= container_size, container_size > 0, item_limit > 0.
    """
    values = settings.as_dict()
    bad = [name for name, value in values.items() if not _is_int(value) or value < 0]
    if bad:
        raise ConfigError(f"Settings #{idx}: {bad} must be non-negative integers ({values})")
    if settings.container_size <= 0:
        raise ConfigError(f"Settings #{idx}: container_size must be positive ({values})")
    if settings.item_limit <= 0:
        raise ConfigError(f"Settings #{idx}: item_limit must be positive ({values})")
    if not settings.item_size_min < settings.item_size_max <= settings.container_size:
        raise ConfigError(
            f"Settings #{idx}: expected item_size_min < item_size_max <= container_size ({values})"
        )

def load_config(path: str | Path) -> BenchmarkConfig:
    """
    Load YAML into strongly-typed dataclasses.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    return BenchmarkConfig.from_dict(data)
