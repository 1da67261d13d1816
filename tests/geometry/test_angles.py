import math
import pytest

from dubins_tour.errors import CoincidentPosesError
from dubins_tour.types import Pose, State
from dubins_tour.geometry.angles import (
    LEFT, RIGHT, TWO_PI,
    angle_to_heading, ccw_sweep, cw_sweep, heading_between, heading_to_angle,
    turning_circle_center, wrap_angle,
)

SAMPLES = [0.0, 1e-17, -1e-17, 0.5, -0.5, math.pi, -math.pi, TWO_PI, -TWO_PI,
           3 * math.pi, -7.25, 100.0, -1234.5678, TWO_PI - 1e-15]


@pytest.mark.parametrize("theta", SAMPLES)
def test_wrap_angle_range(theta):
    w = wrap_angle(theta)
    assert 0.0 <= w < TWO_PI


@pytest.mark.parametrize("theta", SAMPLES)
def test_wrap_angle_idempotent(theta):
    w = wrap_angle(theta)
    assert wrap_angle(w) == w


def test_wrap_angle_values():
    assert wrap_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert wrap_angle(TWO_PI) == 0.0
    assert wrap_angle(5 * math.pi) == pytest.approx(math.pi)


def test_heading_to_angle_convention():
    # 航向 0 (朝上) == 数学角 pi/2
    assert heading_to_angle(0.0) == pytest.approx(math.pi / 2)
    # 航向 -pi/2 (朝右) == 数学角 0
    assert heading_to_angle(-math.pi / 2) == pytest.approx(0.0)
    assert angle_to_heading(heading_to_angle(1.0)) == pytest.approx(1.0)


def test_heading_between():
    assert heading_between((0, 0), (0, 1)) == pytest.approx(0.0)
    assert heading_between((0, 0), (-1, 0)) == pytest.approx(math.pi / 2)
    assert heading_between((0, 0), (0, -1)) == pytest.approx(math.pi)
    assert heading_between((0, 0), (1, 0)) == pytest.approx(3 * math.pi / 2)


def test_heading_between_coincident():
    with pytest.raises(CoincidentPosesError):
        heading_between((2.0, 3.0), (2.0, 3.0))


def test_sweeps():
    assert ccw_sweep(0.0, math.pi / 2) == pytest.approx(math.pi / 2)
    assert cw_sweep(0.0, math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert ccw_sweep(1.0, 1.0) == 0.0
    # 未 wrap 的输入也给出非负的前向扫角
    assert ccw_sweep(-10.0, 10.0) == pytest.approx(wrap_angle(20.0))


def test_turning_circle_center():
    # 朝上: 右转圆在 +x, 左转圆在 -x
    assert turning_circle_center(0.0, 0.0, 0.0, 1.0, RIGHT) == pytest.approx((1.0, 0.0))
    assert turning_circle_center(0.0, 0.0, 0.0, 1.0, LEFT) == pytest.approx((-1.0, 0.0), abs=1e-12)
    # 朝右 (航向 -pi/2): 右转圆在 -y
    assert turning_circle_center(2.0, 2.0, -math.pi / 2, 0.5, RIGHT) == pytest.approx((2.0, 1.5))
    with pytest.raises(ValueError):
        turning_circle_center(0.0, 0.0, 0.0, 1.0, "S")


def test_pose_state_conversion():
    # State 朝 +x (theta=0) 等于航向 -pi/2 (向右)
    pose = Pose.from_state(State(1.0, 2.0, 0.0))
    assert pose.position == (1.0, 2.0)
    assert wrap_angle(pose.heading) == pytest.approx(wrap_angle(-math.pi / 2))
    back = pose.to_state()
    assert wrap_angle(back.theta_rad) == pytest.approx(0.0, abs=1e-12)
