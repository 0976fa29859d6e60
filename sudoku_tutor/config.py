"""Engine settings: carve counts per difficulty, search budgets, and the default hint ceiling, loadable from YAML."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import InvalidValueError


def load_yaml(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidValueError(f"{path}: expected a mapping at the top level")
    return data


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass
class EngineConfig:
    # cells cleared from the solved grid, keyed by difficulty name
    carve_counts: Dict[str, int] = field(
        default_factory=lambda: {"easy": 30, "medium": 45, "hard": 55}
    )
    # placement attempts before solve() gives up; None = unbounded
    solve_budget: int | None = 200_000
    # only clear a cell if the puzzle keeps exactly one solution
    unique: bool = False
    # budget per uniqueness check while carving
    unique_budget: int = 50_000
    # highest technique level the hint cascade tries; None = all
    max_hint_level: str | None = None

    def carve_count(self, difficulty: str) -> int:
        try:
            n = int(self.carve_counts[difficulty])
        except KeyError as e:
            raise InvalidValueError(f"no carve count configured for {difficulty!r}") from e
        if not 0 <= n <= 81:
            raise InvalidValueError(f"carve count for {difficulty!r} must be 0..81, got {n}")
        return n

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidValueError(f"unknown config keys: {sorted(unknown)}")
        cfg = cls()
        for k, v in data.items():
            if k == "carve_counts":
                merged = dict(cfg.carve_counts)
                merged.update(v or {})
                v = merged
            setattr(cfg, k, v)
        return cfg


def load_config(path: str | Path | None = None, **overrides) -> EngineConfig:
    """Defaults, then the YAML file (if any), then non-None keyword overrides."""
    data = load_yaml(path) if path else {}
    merge_overrides(data, **overrides)
    return EngineConfig.from_dict(data)
