from __future__ import annotations

import logging
from typing import List, Sequence

from planning.footprint import FootprintValidator
from shared.types import Pose

logger = logging.getLogger(__name__)


def compact_path(path: Sequence[Pose], validator: FootprintValidator) -> List[Pose]:
    """Greedy shortcutting: keep only the waypoints where a straight run breaks.

    The first edge is taken as valid (it came out of the planner), so checks
    start from path[2]. First and last waypoints are always kept.
    """
    if len(path) < 2:
        raise ValueError("path needs at least a start and a goal")
    out = [path[0]]
    for i in range(2, len(path)):
        if not validator.is_edge_valid(out[-1], path[i]) and path[i - 1] != out[-1]:
            out.append(path[i - 1])
    out.append(path[-1])
    logger.debug("compact: %d -> %d waypoints", len(path), len(out))
    return out
