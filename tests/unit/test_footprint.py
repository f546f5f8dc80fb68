import pytest

from planning.footprint import FootprintValidator
from planning.obstacles import ObstacleIndex
from shared.types import Pose, Rect


def _validator(size):
    idx = ObstacleIndex((500, 500))
    idx.insert(Rect((100, 100), (300, 300)))
    return FootprintValidator(idx, size)


def test_bounding_size_rotates():
    v = _validator((15, 30))
    assert v.bounding_size(0) == (15, 30)
    assert v.bounding_size(90) == (30, 15)
    assert v.bounding_size(180) == (15, 30)
    bw, bh = v.bounding_size(45)
    assert bw == bh == 31  # (15 + 30) * cos(45)


def test_pose_rect_is_centered():
    v = _validator((15, 30))
    r = v.pose_rect(Pose(50, 60, 0))
    assert r.anchor == (43, 45)
    assert r.size == (15, 30)


def test_is_pose_valid_vertical_bar():
    # 1x128 bar: fits beside the obstacle only when oriented along the gap
    v = _validator((1, 128))
    assert v.is_pose_valid(Pose(50, 250, 0))
    assert not v.is_pose_valid(Pose(50, 250, 90))
    assert not v.is_pose_valid(Pose(250, 50, 0))
    assert v.is_pose_valid(Pose(250, 50, 90))
    assert not v.is_pose_valid(Pose(250, 250, 0))


def test_is_edge_valid():
    v = _validator((40, 40))
    assert v.is_edge_valid(Pose(50, 50, 90), Pose(450, 50, 90))
    assert not v.is_edge_valid(Pose(50, 50, 90), Pose(450, 450, 90))


def test_sweep_uses_larger_endpoint_box():
    v = _validator((15, 30))
    r = v.sweep_rect(Pose(200, 450, 0), Pose(300, 450, 90))
    # 30 wide from the 90 degree end, 30 tall from the 0 degree end
    assert r.anchor == (185, 435)
    assert r.size == (130, 30)


def test_checks_are_counted():
    v = _validator((15, 30))
    v.is_pose_valid(Pose(50, 50, 0))
    v.is_edge_valid(Pose(50, 50, 0), Pose(60, 50, 0))
    v.is_edge_valid(Pose(50, 50, 0), Pose(70, 50, 0))
    assert v.checks == {"pose": 1, "edge": 2}


def test_actor_size_must_be_positive():
    with pytest.raises(ValueError):
        _validator((0, 10))
