from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from planning.base import PlanResult
from planning.footprint import FootprintValidator
from shared.types import Pose, angle_diff

logger = logging.getLogger(__name__)


@dataclass
class AStarConfig:
    drive_step: int = 10  # units per forward/backward move
    turn_step: int = 10  # degrees per turn move
    goal_tolerance: int = 10  # stop once the heuristic drops below this
    max_expansions: int = 200_000


def _moves(pose: Pose, drive: int, turn: int) -> Iterable[Pose]:
    t = math.radians(pose.heading)
    dx = int(drive * math.sin(t))
    dy = int(drive * math.cos(t))
    yield Pose(pose.x + dx, pose.y + dy, pose.heading)  # forward
    yield Pose(pose.x - dx, pose.y - dy, pose.heading)  # backward
    yield Pose(pose.x, pose.y, (pose.heading + turn) % 360)  # right
    yield Pose(pose.x, pose.y, (pose.heading - turn) % 360)  # left


def pose_neighbors(pose: Pose, validator: FootprintValidator, cfg: AStarConfig) -> List[Pose]:
    """Drive/turn successors of pose that pass the footprint check."""
    return [
        n for n in _moves(pose, cfg.drive_step, cfg.turn_step) if validator.is_pose_valid(n)
    ]


def heuristic(a: Pose, b: Pose, turn_step: int) -> int:
    dth = angle_diff(a.heading, b.heading) / turn_step
    return int(math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + dth * dth))


class GridSearchPlanner:
    """Best-first search over drive/turn moves with a distance + heading heuristic."""

    name = "astar"

    def __init__(self, cfg: AStarConfig | None = None) -> None:
        self.cfg = cfg or AStarConfig()

    def plan(self, start: Pose, goal: Pose, validator: FootprintValidator) -> PlanResult:
        cfg = self.cfg
        if not validator.is_pose_valid(start):
            return PlanResult.not_found(f"start pose {start} is in collision")

        # (f, seq, g, pose, parent); seq keeps equal-f pops in push order
        openq: List[Tuple[int, int, int, Pose, Optional[Pose]]] = []
        seq = 0
        heapq.heappush(openq, (heuristic(start, goal, cfg.turn_step), seq, 0, start, None))
        came_from: Dict[Pose, Optional[Pose]] = {}
        expansions = 0

        while openq:
            _, _, g, cur, parent = heapq.heappop(openq)
            if cur in came_from:
                continue
            came_from[cur] = parent

            if heuristic(cur, goal, cfg.turn_step) < cfg.goal_tolerance:
                path: List[Pose] = []
                node: Optional[Pose] = cur
                while node is not None and node != start:
                    path.append(node)
                    node = came_from[node]
                path.append(start)
                path.reverse()
                logger.debug("astar: goal after %d expansions, path=%d", expansions, len(path))
                return PlanResult.ok(path, iterations=expansions)

            expansions += 1
            if expansions > cfg.max_expansions:
                return PlanResult.not_found(
                    f"astar ran out of expansions ({cfg.max_expansions})",
                    iterations=expansions,
                )

            for n in pose_neighbors(cur, validator, cfg):
                if n in came_from:
                    continue
                seq += 1
                heapq.heappush(openq, (g + 1 + heuristic(n, goal, cfg.turn_step), seq, g + 1, n, cur))

        logger.debug("astar: frontier exhausted after %d expansions", expansions)
        return PlanResult.not_found("astar frontier exhausted", iterations=expansions)
