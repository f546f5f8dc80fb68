from __future__ import annotations

import math
from typing import Tuple

from planning.obstacles import ObstacleIndex
from shared.types import Pose, Rect, Size


class FootprintValidator:
    """Collision checks for a rectangular actor at a pose or moving between two poses.

    The rotated footprint is approximated by its axis-aligned bounding box, so
    the answer is conservative: it may reject poses that would fit, never the
    other way around.
    """

    def __init__(self, index: ObstacleIndex, size: Size) -> None:
        if size[0] <= 0 or size[1] <= 0:
            raise ValueError(f"actor size must be positive, got {size}")
        self.index = index
        self.size = size
        self.checks = {"pose": 0, "edge": 0}

    def bounding_size(self, heading: int) -> Tuple[int, int]:
        w, h = self.size
        t = math.radians(heading)
        bw = int(abs(w * math.cos(t)) + abs(h * math.sin(t)))
        bh = int(abs(w * math.sin(t)) + abs(h * math.cos(t)))
        return bw, bh

    def pose_rect(self, pose: Pose) -> Rect:
        bw, bh = self.bounding_size(pose.heading)
        return Rect((pose.x - bw // 2, pose.y - bh // 2), (bw, bh))

    def sweep_rect(self, a: Pose, b: Pose) -> Rect:
        aw, ah = self.bounding_size(a.heading)
        bw, bh = self.bounding_size(b.heading)
        xs, ys = max(aw, bw), max(ah, bh)
        return Rect(
            (min(a.x, b.x) - xs // 2, min(a.y, b.y) - ys // 2),
            (abs(a.x - b.x) + xs, abs(a.y - b.y) + ys),
        )

    def is_pose_valid(self, pose: Pose) -> bool:
        self.checks["pose"] += 1
        return not self.index.query_collision(self.pose_rect(pose))

    def is_edge_valid(self, a: Pose, b: Pose) -> bool:
        """Straight move a -> b, checked as one rectangle swept between the endpoints."""
        self.checks["edge"] += 1
        return not self.index.query_collision(self.sweep_rect(a, b))
