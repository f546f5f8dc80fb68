from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from planning.base import PlanResult, Planner, make_planner
from planning.compact import compact_path
from planning.footprint import FootprintValidator
from planning.obstacles import ObstacleIndex
from planning.trajectory import DEFAULT_SPEED, Trajectory
from shared.types import Point, Pose, Rect, Size

logger = logging.getLogger(__name__)


class World:
    """Bounded playground with a start, a goal and rectangular obstacles.

    (0, 0) is the top-left corner. Obstacles may stick out of the bounds.
    """

    def __init__(
        self,
        size: Size,
        start: Optional[Point] = None,
        goal: Optional[Point] = None,
        *,
        index_capacity: int = 8,
        index_max_depth: int = 8,
    ) -> None:
        self.index = ObstacleIndex(size, capacity=index_capacity, max_depth=index_max_depth)
        self.size = size
        self.start = start if start is not None else (size[0] // 16, size[1] // 16)
        self.goal = goal if goal is not None else (15 * size[0] // 16, size[1] // 16)

    @property
    def start_pose(self) -> Pose:
        return Pose(self.start[0], self.start[1], 0)

    @property
    def goal_pose(self) -> Pose:
        return Pose(self.goal[0], self.goal[1], 0)

    def add_obstacle(self, r: Rect) -> int:
        return self.index.insert(r)

    def add_obstacles(self, rects: Iterable[Rect]) -> List[int]:
        return [self.index.insert(r) for r in rects]

    def obstacles(self) -> List[Rect]:
        return self.index.list_obstacles()

    def is_collision(self, r: Rect) -> bool:
        return self.index.query_collision(r)


class Actor:
    """Rectangular actor that plans once and then follows its trajectory."""

    def __init__(
        self,
        world: World,
        size: Size = (15, 30),
        planner: str | Planner = "rrt",
        planner_options: Optional[Dict[str, Any]] = None,
        speed: float = DEFAULT_SPEED,
        shortest_arc: bool = True,
    ) -> None:
        self.world = world
        self.size = size
        self.validator = FootprintValidator(world.index, size)
        if isinstance(planner, str):
            planner = make_planner(planner, **(planner_options or {}))
        self.planner = planner
        self.speed = speed
        self.shortest_arc = shortest_arc
        self.pose = world.start_pose
        self.path: List[Pose] = []
        self.trajectory: Optional[Trajectory] = None
        self.last_result: Optional[PlanResult] = None

    def compute_path(self) -> PlanResult:
        """Plan, compact and build the trajectory. No-op once a trajectory exists."""
        if self.trajectory is not None and self.last_result is not None:
            return self.last_result

        result = self.planner.plan(self.world.start_pose, self.world.goal_pose, self.validator)
        self.last_result = result
        if not result.found:
            logger.warning("%s planner failed: %s", self.planner.name, result.reason)
            return result

        path = compact_path(result.path, self.validator) if len(result.path) >= 2 else result.path
        self.trajectory = Trajectory.from_path(
            path, speed=self.speed, shortest_arc=self.shortest_arc
        )
        self.path = path
        logger.info(
            "%s planner: %d raw -> %d waypoints, length=%.1f",
            self.planner.name,
            len(result.path),
            len(path),
            self.trajectory.length,
        )
        return result

    def update_pos(self, t: float) -> Pose:
        """Move to the trajectory pose at elapsed time t; stay put without one."""
        if self.trajectory is not None:
            self.pose = self.trajectory.pose_at(t)
        return self.pose

    current_pose = update_pos

    def waypoints(self) -> List[Pose]:
        return list(self.path)

    def obstacles(self) -> List[Rect]:
        return self.world.obstacles()

    def reset(self) -> None:
        """Drop the cached plan so the next compute_path replans."""
        self.pose = self.world.start_pose
        self.path = []
        self.trajectory = None
        self.last_result = None
