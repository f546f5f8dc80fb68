import pytest

from planning.compact import compact_path
from planning.footprint import FootprintValidator
from planning.obstacles import ObstacleIndex
from shared.types import Pose, Rect


def _validator(obstacle=None, world=(500, 500), size=(40, 40)):
    idx = ObstacleIndex(world)
    if obstacle is not None:
        idx.insert(obstacle)
    return FootprintValidator(idx, size)


def test_two_waypoints_unchanged():
    v = _validator()
    path = [Pose(50, 50, 0), Pose(450, 450, 0)]
    assert compact_path(path, v) == path


def test_straight_run_collapses_to_endpoints():
    v = _validator()
    path = [Pose(50, 50, 0), Pose(100, 50, 0), Pose(150, 50, 0), Pose(200, 60, 0), Pose(250, 60, 0)]
    assert compact_path(path, v) == [path[0], path[-1]]


def test_keeps_corner_around_obstacle():
    v = _validator(Rect((100, 100), (300, 300)))
    path = [
        Pose(50, 50, 0),
        Pose(250, 50, 0),
        Pose(450, 50, 0),
        Pose(450, 250, 0),
        Pose(450, 450, 0),
    ]
    out = compact_path(path, v)
    assert out == [Pose(50, 50, 0), Pose(450, 50, 0), Pose(450, 450, 0)]


def test_endpoints_always_preserved():
    v = _validator(Rect((100, 100), (300, 300)))
    path = [
        Pose(50, 50, 0),
        Pose(50, 250, 0),
        Pose(50, 450, 0),
        Pose(250, 450, 90),
        Pose(450, 450, 90),
        Pose(450, 250, 0),
    ]
    out = compact_path(path, v)
    assert out[0] == path[0] and out[-1] == path[-1]
    # every kept segment after the first must be a valid straight move
    for a, b in zip(out[1:], out[2:]):
        assert v.is_edge_valid(a, b)


def test_too_short_path_rejected():
    with pytest.raises(ValueError):
        compact_path([Pose(1, 1, 0)], _validator())
