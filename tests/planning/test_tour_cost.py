import math
import pytest

from dubins_tour.errors import DistanceTooShortError, InvalidTurnRadiusError
from dubins_tour.planning.dubins import dubins_path_length
from dubins_tour.planning.tour import tour_cost, tour_edges
from dubins_tour.types import Pose
from dubins_tour.visualization.observers import ExperimentObserver

R = 1.0


@pytest.fixture
def square_poses():
    # 10m x 10m 正方形, 逆时针巡航
    return {
        'a': Pose(0.0, 0.0, -math.pi / 2),
        'b': Pose(10.0, 0.0, 0.0),
        'c': Pose(10.0, 10.0, math.pi / 2),
        'd': Pose(0.0, 10.0, math.pi),
    }


def test_tour_edges():
    assert tour_edges([]) == []
    assert tour_edges(['a']) == []
    assert tour_edges(['a'], include_return_edge=True) == []
    assert tour_edges(['a', 'b', 'c']) == [('a', 'b'), ('b', 'c')]
    assert tour_edges(['a', 'b', 'c'], include_return_edge=True) == [('a', 'b'), ('b', 'c'), ('c', 'a')]


@pytest.mark.parametrize("tour", [[], ['a']])
@pytest.mark.parametrize("closed", [False, True])
def test_short_tours_cost_zero(square_poses, tour, closed):
    assert tour_cost(tour, square_poses, None, R, include_return_edge=closed) == 0.0


def test_closed_tour_is_sum_of_four_edges(square_poses):
    tour = ['a', 'b', 'c', 'd']
    expected = sum(
        dubins_path_length(square_poses[u], square_poses[v], R)
        for u, v in [('a', 'b'), ('b', 'c'), ('c', 'd'), ('d', 'a')]
    )
    observer = ExperimentObserver()
    total = tour_cost(tour, square_poses, None, R, include_return_edge=True, observer=observer)
    assert total == pytest.approx(expected, abs=1e-9)
    assert len(observer.edges) == 4
    assert [e[:2] for e in observer.edges] == [('a', 'b'), ('b', 'c'), ('c', 'd'), ('d', 'a')]


def test_return_edge_adds_closing_leg(square_poses):
    tour = ['a', 'b', 'c', 'd']
    open_cost = tour_cost(tour, square_poses, None, R)
    closed_cost = tour_cost(tour, square_poses, None, R, include_return_edge=True)
    closing = dubins_path_length(square_poses['d'], square_poses['a'], R)
    assert closed_cost == pytest.approx(open_cost + closing, abs=1e-9)


def test_square_tour_bounded_by_perimeter(square_poses):
    # 每条边都不短于直线距离
    total = tour_cost(['a', 'b', 'c', 'd'], square_poses, None, R, include_return_edge=True)
    assert total >= 40.0


def test_heading_lookup_overrides(square_poses):
    headings = {'a': 0.0, 'b': 0.0}
    positions_only = {k: Pose(p.x, p.y, 123.0) for k, p in square_poses.items()}
    total = tour_cost(['a', 'b'], positions_only, headings, R)
    expected = dubins_path_length(Pose(0.0, 0.0, 0.0), Pose(10.0, 0.0, 0.0), R)
    assert total == pytest.approx(expected)


def test_callable_lookups(square_poses):
    total = tour_cost(['a', 'b', 'c'], square_poses.get, lambda node: square_poses[node].heading, R)
    assert total == pytest.approx(tour_cost(['a', 'b', 'c'], square_poses, None, R))


def test_failing_edge_propagates(square_poses):
    poses = dict(square_poses)
    poses['e'] = Pose(10.5, 0.0, 0.0)  # 离 b 只有 0.5m < 3r
    observer = ExperimentObserver()
    with pytest.raises(DistanceTooShortError):
        tour_cost(['a', 'b', 'e', 'c'], poses, None, R, observer=observer)
    assert len(observer.failures) == 1
    assert observer.failures[0][:2] == ('b', 'e')
    # 失败之前的边已经算过, 但不会给出部分结果
    assert len(observer.edges) == 1


def test_invalid_radius(square_poses):
    with pytest.raises(InvalidTurnRadiusError):
        tour_cost(['a', 'b'], square_poses, None, 0.0)
