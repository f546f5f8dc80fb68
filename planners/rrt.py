from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from planning.base import PlanResult
from planning.footprint import FootprintValidator
from shared.types import Pose

logger = logging.getLogger(__name__)


@dataclass
class RRTConfig:
    grid_step: int = 10  # sampled x/y are multiples of this
    heading_buckets: int = 36  # 10-degree buckets
    goal_bias: float = 0.01
    max_iterations: int = 200_000
    seed: int | None = None


def _sample(rng: random.Random, cfg: RRTConfig, w: int, h: int, goal: Pose) -> Pose:
    if rng.random() < cfg.goal_bias:
        return goal
    step = cfg.grid_step
    return Pose(
        rng.randrange(max(1, w // step)) * step,
        rng.randrange(max(1, h // step)) * step,
        rng.randrange(cfg.heading_buckets) * (360 // cfg.heading_buckets),
    )


def _nearest(
    tree: Dict[Pose, Pose], q: Pose, validator: FootprintValidator, bound: float
) -> Optional[Pose]:
    """Closest tree node with a valid straight edge to q; ties keep the first one seen."""
    best: Optional[Pose] = None
    best_d = bound
    for node in tree:
        d = q.dist(node)
        if d >= best_d or not validator.is_edge_valid(q, node):
            continue
        best = node
        best_d = d
    return best


def _backtrack(tree: Dict[Pose, Pose], goal: Pose) -> List[Pose]:
    path: List[Pose] = []
    cur = goal
    while tree[cur] != cur:
        path.append(cur)
        cur = tree[cur]
    path.append(cur)
    path.reverse()
    return path


class TreeSearchPlanner:
    """Goal-biased random tree. Each accepted sample links straight to its nearest node."""

    name = "rrt"

    def __init__(self, cfg: RRTConfig | None = None) -> None:
        self.cfg = cfg or RRTConfig()

    def plan(self, start: Pose, goal: Pose, validator: FootprintValidator) -> PlanResult:
        if not validator.is_pose_valid(start):
            return PlanResult.not_found(f"start pose {start} is in collision")
        if not validator.is_pose_valid(goal):
            return PlanResult.not_found(f"goal pose {goal} is in collision")

        w, h = validator.index.size
        rng = random.Random(self.cfg.seed)
        tree: Dict[Pose, Pose] = {start: start}  # root is its own parent
        if start == goal:
            return PlanResult.ok([start], tree=tree)

        for it in range(1, self.cfg.max_iterations + 1):
            q = _sample(rng, self.cfg, w, h, goal)
            if q in tree or not validator.is_pose_valid(q):
                continue

            parent = _nearest(tree, q, validator, float(w + h))
            if parent is None:
                continue

            tree[q] = parent
            if q == goal:
                path = _backtrack(tree, goal)
                logger.debug("rrt: goal after %d samples, tree=%d path=%d", it, len(tree), len(path))
                return PlanResult.ok(path, iterations=it, tree=tree)

        logger.debug("rrt: gave up after %d samples, tree=%d", self.cfg.max_iterations, len(tree))
        return PlanResult.not_found(
            f"rrt ran out of iterations ({self.cfg.max_iterations})",
            iterations=self.cfg.max_iterations,
            tree=tree,
        )
