from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from shared.types import Pose

DEFAULT_SPEED = 24.0  # distance units per simulated second


class Trajectory:
    """Piecewise-linear x, y and heading curves keyed by distance travelled.

    Keys are the cumulative (x, y) distance from the first waypoint. Sampling
    outside [0, length] clamps to the end values. With shortest_arc the
    keyframe headings are unwrapped first, so 350 -> 10 turns through 0
    rather than sweeping back across 180.
    """

    def __init__(
        self,
        keys: np.ndarray,
        xs: np.ndarray,
        ys: np.ndarray,
        headings: np.ndarray,
        speed: float = DEFAULT_SPEED,
        shortest_arc: bool = True,
    ) -> None:
        if len(keys) == 0:
            raise ValueError("trajectory needs at least one keyframe")
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        self.keys = keys
        self.xs = xs
        self.ys = ys
        self.headings = headings
        self.speed = float(speed)
        self.shortest_arc = shortest_arc

    @classmethod
    def from_path(
        cls, path: Sequence[Pose], speed: float = DEFAULT_SPEED, shortest_arc: bool = True
    ) -> "Trajectory":
        if not path:
            raise ValueError("cannot build a trajectory from an empty path")
        xs = np.array([p.x for p in path], dtype=float)
        ys = np.array([p.y for p in path], dtype=float)
        hs = np.array([p.heading for p in path], dtype=float)
        seg = np.hypot(np.diff(xs), np.diff(ys))
        keys = np.concatenate([[0.0], np.cumsum(seg)])
        if shortest_arc:
            hs = np.unwrap(hs, period=360.0)
        return cls(keys, xs, ys, hs, speed=speed, shortest_arc=shortest_arc)

    @property
    def length(self) -> float:
        return float(self.keys[-1])

    @property
    def duration(self) -> float:
        return self.length / self.speed

    def sample(self, s: float) -> Tuple[float, float, float]:
        """(x, y, heading) at arc length s, clamped to the ends."""
        x = float(np.interp(s, self.keys, self.xs))
        y = float(np.interp(s, self.keys, self.ys))
        h = float(np.interp(s, self.keys, self.headings))
        if self.shortest_arc:
            h %= 360.0
        return x, y, h

    def pose_at(self, t: float) -> Pose:
        s = t * self.speed
        if abs(s - self.length) < 1e-9:
            s = self.length  # t == duration can land one ulp short of the last key
        x, y, h = self.sample(s)
        return Pose(int(x), int(y), int(h))

    def waypoint_index(self, t: float) -> int:
        """Index of the last keyframe passed at time t."""
        s = t * self.speed
        return int(np.searchsorted(self.keys, s, side="right")) - 1 if s >= 0 else 0
