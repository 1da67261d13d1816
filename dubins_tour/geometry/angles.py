# dubins_tour/geometry/angles.py
import math
from typing import Tuple

from dubins_tour.errors import CoincidentPosesError

TWO_PI = 2.0 * math.pi
HALF_PI = math.pi / 2.0

RIGHT = "R"
LEFT = "L"


def wrap_angle(theta: float) -> float:
    """
    将角度归一化到 [0, 2*pi)
    fmod 对 [0, 2*pi) 内的值是精确的, 所以 wrap_angle(wrap_angle(x)) == wrap_angle(x)
    """
    wrapped = math.fmod(theta, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    # -1e-17 + 2*pi 会被舍入成 2*pi
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


def heading_to_angle(heading: float) -> float:
    """航向 (0 at +y, CCW) -> 数学角 (0 at +x, CCW)"""
    return wrap_angle(heading + HALF_PI)


def angle_to_heading(angle: float) -> float:
    """数学角 (0 at +x, CCW) -> 航向 (0 at +y, CCW)"""
    return wrap_angle(angle - HALF_PI)


def heading_between(point_a: Tuple[float, float], point_b: Tuple[float, float],
                    tolerance: float = 1e-12) -> float:
    """
    向量 a -> b 的航向角
    :raises CoincidentPosesError: a 与 b 重合
    """
    dx = point_b[0] - point_a[0]
    dy = point_b[1] - point_a[1]
    if math.hypot(dx, dy) <= tolerance:
        raise CoincidentPosesError(f"heading between coincident points {tuple(point_a)} and {tuple(point_b)}")
    return angle_to_heading(math.atan2(dy, dx))


def ccw_sweep(start: float, end: float) -> float:
    """左转 (逆时针) 从 start 转到 end 需要扫过的角度, [0, 2*pi)"""
    return wrap_angle(TWO_PI + wrap_angle(end) - wrap_angle(start))


def cw_sweep(start: float, end: float) -> float:
    """右转 (顺时针) 从 start 转到 end 需要扫过的角度, [0, 2*pi)"""
    return ccw_sweep(end, start)


def turning_circle_center(x: float, y: float, heading: float, radius: float, side: str) -> Tuple[float, float]:
    """
    最小转弯圆圆心
    右转圆: 沿 heading - 90° 偏移 r; 左转圆: 沿 heading + 90° 偏移 r
    """
    if side == RIGHT:
        offset = -HALF_PI
    elif side == LEFT:
        offset = HALF_PI
    else:
        raise ValueError(f"unknown turning side: {side!r}")
    angle = heading_to_angle(heading) + offset
    return x + radius * math.cos(angle), y + radius * math.sin(angle)
