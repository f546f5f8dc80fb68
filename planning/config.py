from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import yaml

from shared.types import Rect


def load_yaml(path: str | None) -> dict:
    if not path or not os.path.exists(path):
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def _pair(v: Any, default: Optional[Tuple[int, int]]) -> Optional[Tuple[int, int]]:
    if v is None:
        return default
    if len(v) != 2:
        raise ValueError(f"expected a pair, got {v!r}")
    return int(v[0]), int(v[1])


@dataclass
class ActorConfig:
    size: Tuple[int, int] = (15, 30)
    speed: float = 24.0  # units per simulated second
    shortest_arc: bool = True


@dataclass
class PlannerConfig:
    """Which search strategy to run plus per-strategy options."""

    planner: str = "rrt"
    actor: ActorConfig = field(default_factory=ActorConfig)
    options: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    index_capacity: int = 8
    index_max_depth: int = 8

    def planner_options(self, name: str | None = None) -> Dict[str, Any]:
        return dict(self.options.get(name or self.planner) or {})


@dataclass
class PlaygroundConfig:
    size: Tuple[int, int] = (800, 800)
    start: Optional[Tuple[int, int]] = None
    goal: Optional[Tuple[int, int]] = None
    obstacles: List[Rect] = field(default_factory=list)


def load_planner_config(path: str | None) -> PlannerConfig:
    cfg = load_yaml(path)
    a = cfg.get("actor", {}) or {}
    actor = ActorConfig(
        size=_pair(a.get("size"), (15, 30)),
        speed=float(a.get("speed", 24.0)),
        shortest_arc=bool(a.get("shortest_arc", True)),
    )
    idx = cfg.get("index", {}) or {}
    return PlannerConfig(
        planner=str(cfg.get("planner", "rrt")),
        actor=actor,
        options={k: dict(v or {}) for k, v in (cfg.get("planners", {}) or {}).items()},
        index_capacity=int(idx.get("capacity", 8)),
        index_max_depth=int(idx.get("max_depth", 8)),
    )


def load_playground_config(path: str | None) -> PlaygroundConfig:
    cfg = load_yaml(path)
    obstacles = [
        Rect(_pair(o.get("anchor"), (0, 0)), _pair(o.get("size"), (0, 0)))
        for o in cfg.get("obstacles", []) or []
    ]
    return PlaygroundConfig(
        size=_pair(cfg.get("size"), (800, 800)),
        start=_pair(cfg.get("start"), None),
        goal=_pair(cfg.get("goal"), None),
        obstacles=obstacles,
    )
