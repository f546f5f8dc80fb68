from shared.types import Pose, angle_diff


def test_pose_ordering_and_hashing_are_structural():
    assert Pose(1, 2, 3) < Pose(1, 3, 0) < Pose(2, 0, 0)
    assert len({Pose(1, 1, 0), Pose(1, 1, 0), Pose(1, 1, 360)}) == 2


def test_normalized_heading():
    assert Pose(1, 1, 360).normalized() == Pose(1, 1, 0)
    assert Pose(1, 1, -3).normalized() == Pose(1, 1, 357)


def test_dist_ignores_heading():
    target = Pose(750, 50, 0)
    assert target.dist(Pose(751, 51, 0)) < 10.0
    assert target.dist(Pose(751, 25, 0)) > 10.0
    assert target.dist(Pose(751, 51, 180)) < 10.0


def test_angle_diff_takes_shorter_arc():
    assert angle_diff(350, 10) == 20
    assert angle_diff(10, 350) == -20
    assert angle_diff(0, 128) == 128
