import itertools
import pytest

from dubins_tour.config import DubinsConfig
from dubins_tour.poses import PoseGenerator, RandomPoseError


def test_separation_and_bounds():
    r = 2.0
    poses = PoseGenerator(width=60.0, height=40.0, seed=42).generate(15, r)
    assert len(poses) == 15
    for p in poses:
        assert 0.0 <= p.x <= 60.0
        assert 0.0 <= p.y <= 40.0
    for a, b in itertools.combinations(poses, 2):
        assert a.distance_to(b) >= 3.0 * r


def test_seed_is_reproducible():
    a = PoseGenerator(seed=7).generate(5, 1.0)
    b = PoseGenerator(seed=7).generate(5, 1.0)
    c = PoseGenerator(seed=8).generate(5, 1.0)
    assert a == b
    assert a != c


def test_custom_separation():
    config = DubinsConfig(min_distance_factor=5.0)
    poses = PoseGenerator(seed=1).generate(10, 1.0, config)
    for a, b in itertools.combinations(poses, 2):
        assert a.distance_to(b) >= 5.0


def test_impossible_layout_raises():
    generator = PoseGenerator(width=1.0, height=1.0, max_attempts=200, seed=0)
    with pytest.raises(RandomPoseError):
        generator.generate(5, 1.0)


def test_invalid_area():
    with pytest.raises(ValueError):
        PoseGenerator(width=0.0)
