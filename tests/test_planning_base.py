import pytest

from planners.astar import GridSearchPlanner
from planners.rrt import TreeSearchPlanner
from planning.base import PathNotFound, PlanResult, make_planner
from shared.types import Pose


def test_make_planner_by_name_forwards_options():
    rrt = make_planner("rrt", seed=9, goal_bias=0.05)
    assert isinstance(rrt, TreeSearchPlanner)
    assert rrt.cfg.seed == 9 and rrt.cfg.goal_bias == 0.05

    astar = make_planner("astar", turn_step=15)
    assert isinstance(astar, GridSearchPlanner)
    assert astar.cfg.turn_step == 15


def test_unknown_planner_rejected():
    with pytest.raises(ValueError, match="unknown planner"):
        make_planner("dijkstra")


def test_plan_result_unwrap():
    path = [Pose(0, 0, 0), Pose(1, 1, 0)]
    assert PlanResult.ok(path).unwrap() == path

    miss = PlanResult.not_found("boxed in", iterations=3)
    assert not miss.found and miss.path == [] and miss.iterations == 3
    with pytest.raises(PathNotFound, match="boxed in"):
        miss.unwrap()
    # callers catching the generic error still work
    with pytest.raises(ValueError):
        miss.unwrap()
