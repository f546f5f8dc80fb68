from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

# Frames & units: x to the right, y down, origin at the world's top-left corner.
# Distances are abstract grid units, headings are integer degrees.

Size = Tuple[int, int]
Point = Tuple[int, int]


@dataclass(frozen=True, order=True)
class Pose:
    """Integer pose so it can be used as an exact dict/set key during search."""

    x: int
    y: int
    heading: int = 0  # degrees, not normalized

    def normalized(self) -> "Pose":
        return Pose(self.x, self.y, self.heading % 360)

    def dist(self, other: "Pose") -> float:
        """Euclidean distance over (x, y); heading is ignored."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    anchor: Point  # top-left corner
    size: Size

    def __post_init__(self) -> None:
        if self.size[0] < 0 or self.size[1] < 0:
            raise ValueError(f"rect size must be non-negative, got {self.size}")

    @property
    def right(self) -> int:
        return self.anchor[0] + self.size[0]

    @property
    def bottom(self) -> int:
        return self.anchor[1] + self.size[1]

    def intersects(self, other: "Rect") -> bool:
        # closed intervals: touching edges count as overlap
        return not (
            self.right < other.anchor[0]
            or other.right < self.anchor[0]
            or self.bottom < other.anchor[1]
            or other.bottom < self.anchor[1]
        )

    def contains(self, other: "Rect") -> bool:
        return (
            self.anchor[0] <= other.anchor[0]
            and self.anchor[1] <= other.anchor[1]
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


def angle_diff(a: float, b: float) -> float:
    """Signed shortest angular difference b - a in degrees, in [-180, 180)."""
    return (b - a + 180.0) % 360.0 - 180.0


Path = List[Pose]
