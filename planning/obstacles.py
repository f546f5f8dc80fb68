from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from shared.types import Rect, Size


class _Node:
    """Region quadtree node. Items live in the deepest node that fully contains them."""

    def __init__(self, bounds: Rect, capacity: int, max_depth: int, depth: int = 0) -> None:
        self.bounds = bounds
        self.capacity = capacity
        self.max_depth = max_depth
        self.depth = depth
        self.items: List[Tuple[int, Rect]] = []
        self.children: Optional[List["_Node"]] = None

    def _subdivide(self) -> None:
        (x, y), (w, h) = self.bounds.anchor, self.bounds.size
        hw, hh = w // 2, h // 2
        quads = [
            Rect((x, y), (hw, hh)),
            Rect((x + hw, y), (w - hw, hh)),
            Rect((x, y + hh), (hw, h - hh)),
            Rect((x + hw, y + hh), (w - hw, h - hh)),
        ]
        self.children = [_Node(q, self.capacity, self.max_depth, self.depth + 1) for q in quads]

        # push down whatever now fits in a single quadrant
        keep: List[Tuple[int, Rect]] = []
        for item in self.items:
            if not self._push_down(item):
                keep.append(item)
        self.items = keep

    def _push_down(self, item: Tuple[int, Rect]) -> bool:
        assert self.children is not None
        for child in self.children:
            if child.bounds.contains(item[1]):
                child.insert(item)
                return True
        return False

    def insert(self, item: Tuple[int, Rect]) -> None:
        if self.children is not None and self._push_down(item):
            return
        self.items.append(item)
        if (
            self.children is None
            and len(self.items) > self.capacity
            and self.depth < self.max_depth
            and min(self.bounds.size) >= 2
        ):
            self._subdivide()

    def any_intersecting(self, r: Rect) -> bool:
        for _, rect in self.items:
            if rect.intersects(r):
                return True
        if self.children is not None:
            for child in self.children:
                if child.bounds.intersects(r) and child.any_intersecting(r):
                    return True
        return False


class ObstacleIndex:
    """Axis-aligned obstacle store with a collision query against world bounds.

    Backed by a region quadtree over the world extent, so a query only visits
    the quadrants it overlaps. Obstacles are kept verbatim even if they stick
    out of the world; those stay at the root node.
    """

    def __init__(self, size: Size, capacity: int = 8, max_depth: int = 8) -> None:
        if size[0] <= 0 or size[1] <= 0:
            raise ValueError(f"world size must be positive, got {size}")
        self.size = size
        self._root = _Node(Rect((0, 0), size), capacity, max_depth)
        self._rects: Dict[int, Rect] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self._rects)

    def insert(self, r: Rect) -> int:
        oid = self._next_id
        self._next_id += 1
        self._rects[oid] = r
        self._root.insert((oid, r))
        return oid

    def list_obstacles(self) -> List[Rect]:
        """All obstacles in insertion order."""
        return list(self._rects.values())

    def out_of_bounds(self, r: Rect) -> bool:
        # touching the upper bound is out
        return (
            r.anchor[0] < 0
            or r.anchor[1] < 0
            or r.right >= self.size[0]
            or r.bottom >= self.size[1]
        )

    def query_collision(self, r: Rect) -> bool:
        """True if r leaves the world or overlaps any stored obstacle."""
        if self.out_of_bounds(r):
            return True
        return self._root.any_intersecting(r)
