from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from planning.footprint import FootprintValidator
from shared.types import Pose


class PathNotFound(ValueError):
    """No collision-free path from start to goal within the search budget."""


@dataclass
class PlanResult:
    found: bool
    path: List[Pose] = field(default_factory=list)
    reason: str = ""
    iterations: int = 0  # samples (rrt) or expansions (astar)
    tree: Optional[Dict[Pose, Pose]] = None  # parent map, rrt only

    @classmethod
    def ok(cls, path: List[Pose], **kw: Any) -> "PlanResult":
        return cls(True, path, **kw)

    @classmethod
    def not_found(cls, reason: str, **kw: Any) -> "PlanResult":
        return cls(False, [], reason, **kw)

    def unwrap(self) -> List[Pose]:
        if not self.found:
            raise PathNotFound(self.reason or "no path found")
        return self.path


class Planner(Protocol):
    name: str

    def plan(self, start: Pose, goal: Pose, validator: FootprintValidator) -> PlanResult:
        ...


PLANNER_NAMES = ("rrt", "astar")


def make_planner(name: str, **options: Any) -> Planner:
    """Build a search strategy by name; options are forwarded to its config."""
    if name == "rrt":
        from planners.rrt import RRTConfig, TreeSearchPlanner

        return TreeSearchPlanner(RRTConfig(**options))
    if name == "astar":
        from planners.astar import AStarConfig, GridSearchPlanner

        return GridSearchPlanner(AStarConfig(**options))
    raise ValueError(f"unknown planner {name!r}, expected one of {PLANNER_NAMES}")
