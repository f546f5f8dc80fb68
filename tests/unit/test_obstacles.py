import pytest

from planning.obstacles import ObstacleIndex
from shared.types import Rect


def _index_with_block():
    idx = ObstacleIndex((500, 500))
    idx.insert(Rect((100, 100), (300, 300)))
    return idx


@pytest.mark.parametrize(
    "anchor,size,hit",
    [
        ((10, 10), (20, 20), False),
        ((450, 450), (20, 20), False),
        ((50, 50), (100, 100), True),
        ((-10, -10), (20, 20), True),  # out of bounds
        ((250, 250), (100, 100), True),  # fully inside the obstacle
        ((450, 450), (100, 100), True),  # past the upper bound
    ],
)
def test_query_collision(anchor, size, hit):
    assert _index_with_block().query_collision(Rect(anchor, size)) is hit


def test_upper_bound_is_exclusive_and_touching_counts():
    idx = _index_with_block()
    assert idx.query_collision(Rect((480, 10), (20, 10)))  # right edge lands on 500
    assert not idx.query_collision(Rect((479, 10), (20, 10)))
    assert not idx.query_collision(Rect((0, 0), (10, 10)))
    # shares the obstacle's left edge at x=100
    assert idx.query_collision(Rect((80, 200), (20, 10)))
    assert not idx.query_collision(Rect((79, 200), (20, 10)))


def test_ids_increase_from_zero():
    idx = ObstacleIndex((100, 100))
    ids = [idx.insert(Rect((i, i), (1, 1))) for i in range(5)]
    assert ids == [0, 1, 2, 3, 4]
    assert len(idx) == 5


@pytest.mark.parametrize("size", [(123, 456), (1024, 1024)])
def test_obstacle_round_trip_without_clipping(size):
    idx = ObstacleIndex((500, 500))
    idx.insert(Rect((0, 0), size))
    v = idx.list_obstacles()
    assert len(v) == 1
    assert v[0].anchor == (0, 0)
    assert v[0].size == size


def test_quadtree_matches_linear_scan():
    # enough obstacles to force several levels of subdivision
    idx = ObstacleIndex((640, 640), capacity=2, max_depth=6)
    rects = []
    for i in range(12):
        for j in range(12):
            if (i + j) % 3 == 0:
                r = Rect((i * 50 + 5, j * 50 + 5), (20, 20))
                rects.append(r)
                idx.insert(r)
    # one sticking out of the world stays queryable
    big = Rect((600, -40), (100, 80))
    rects.append(big)
    idx.insert(big)

    assert idx.list_obstacles() == rects
    for x in range(0, 620, 17):
        for y in range(0, 620, 23):
            q = Rect((x, y), (12, 12))
            expected = idx.out_of_bounds(q) or any(r.intersects(q) for r in rects)
            assert idx.query_collision(q) is expected


def test_invalid_geometry_rejected():
    with pytest.raises(ValueError):
        Rect((0, 0), (-1, 5))
    with pytest.raises(ValueError):
        ObstacleIndex((0, 100))
