# dubins_tour/planning/dubins.py
"""
Shortest Dubins path length between two oriented poses.

All angles handled here are headings (0 at the +y axis, counter-clockwise
positive). Only the lengths of the four CSC words are evaluated:

    RSR, RSL, LSR, LSL

CCC words are not considered. Poses closer than 3r are rejected because the
tangent constructions below are not guaranteed to exist there.
"""
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from dubins_tour.config import DEFAULT_CONFIG, FAILURE_LENGTH, DubinsConfig, validate_turn_radius
from dubins_tour.errors import DegenerateAngleError, DistanceTooShortError, DubinsError, NonFinitePoseError
from dubins_tour.geometry.angles import (
    HALF_PI,
    LEFT,
    RIGHT,
    TWO_PI,
    ccw_sweep,
    cw_sweep,
    heading_between,
    turning_circle_center,
)
from dubins_tour.planning.interfaces import ICostObserver
from dubins_tour.types import Pose
from dubins_tour.visualization.observers import EfficientObserver

PATH_TYPES = ("RSR", "RSL", "LSR", "LSL")


@dataclass(frozen=True)
class CandidateResult:
    """单个候选路径的结果: 要么 length, 要么 error"""
    path_type: str
    length: Optional[float] = None
    error: Optional[DubinsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DubinsSolution:
    length: float
    path_type: str
    candidates: Tuple[CandidateResult, ...]

    def candidate(self, path_type: str) -> CandidateResult:
        for c in self.candidates:
            if c.path_type == path_type:
                return c
        raise KeyError(path_type)


def _circle(pose: Pose, r: float, side: str) -> Tuple[float, float]:
    return turning_circle_center(pose.x, pose.y, pose.heading, r, side)


def _checked_ratio(path_type: str, value: float, config: DubinsConfig) -> float:
    """asin/acos 的参数检查, 在容差内截断到 [-1, 1]"""
    if value > 1.0 + config.trig_tolerance or value < -1.0 - config.trig_tolerance or math.isnan(value):
        raise DegenerateAngleError(path_type, value)
    return min(1.0, max(-1.0, value))


def _arc(r: float, sweep: float, config: DubinsConfig) -> float:
    """弧长 r * sweep; 接近 2*pi 的扫角是舍入误差, 按 0 处理"""
    if sweep > TWO_PI - config.sweep_tolerance:
        return 0.0
    return r * sweep


def _internal_tangent(c0, c1, r: float):
    d = math.hypot(c1[0] - c0[0], c1[1] - c0[1])
    straight = math.sqrt(max(0.0, d * d - 4.0 * r * r))
    return d, straight


def _rsr(start: Pose, end: Pose, r: float, config: DubinsConfig) -> float:
    c0 = _circle(start, r, RIGHT)
    c1 = _circle(end, r, RIGHT)
    # 外切线与圆心连线平行, 长度等于圆心距
    x = heading_between(c0, c1, config.coincidence_tolerance)
    d = math.hypot(c1[0] - c0[0], c1[1] - c0[1])
    return d + _arc(r, cw_sweep(start.heading, x), config) + _arc(r, cw_sweep(x, end.heading), config)


def _lsl(start: Pose, end: Pose, r: float, config: DubinsConfig) -> float:
    c0 = _circle(start, r, LEFT)
    c1 = _circle(end, r, LEFT)
    x = heading_between(c0, c1, config.coincidence_tolerance)
    d = math.hypot(c1[0] - c0[0], c1[1] - c0[1])
    return d + _arc(r, ccw_sweep(start.heading, x), config) + _arc(r, ccw_sweep(x, end.heading), config)


def _rsl(start: Pose, end: Pose, r: float, config: DubinsConfig) -> float:
    c0 = _circle(start, r, RIGHT)
    c1 = _circle(end, r, LEFT)
    x = heading_between(c0, c1, config.coincidence_tolerance)
    d, straight = _internal_tangent(c0, c1, r)
    # 内切线方向相对圆心连线偏转 asin(2r/d)
    x2 = x - math.asin(_checked_ratio("RSL", 2.0 * r / d, config))
    return straight + _arc(r, cw_sweep(start.heading, x2), config) + _arc(r, ccw_sweep(x2, end.heading), config)


def _lsr(start: Pose, end: Pose, r: float, config: DubinsConfig) -> float:
    c0 = _circle(start, r, LEFT)
    c1 = _circle(end, r, RIGHT)
    x = heading_between(c0, c1, config.coincidence_tolerance)
    d, straight = _internal_tangent(c0, c1, r)
    # 切点在起始圆上的径向方向, 切线方向再转 90°
    radial = x - math.acos(_checked_ratio("LSR", 2.0 * r / d, config))
    x2 = radial + HALF_PI
    return straight + _arc(r, ccw_sweep(start.heading, x2), config) + _arc(r, cw_sweep(x2, end.heading), config)


CANDIDATES: Dict[str, Callable[[Pose, Pose, float, DubinsConfig], float]] = {
    "RSR": _rsr,
    "RSL": _rsl,
    "LSR": _lsr,
    "LSL": _lsl,
}


def evaluate_candidate(path_type: str, start: Pose, end: Pose, r: float,
                       config: DubinsConfig = DEFAULT_CONFIG) -> CandidateResult:
    try:
        length = CANDIDATES[path_type](start, end, r, config)
    except DubinsError as e:
        return CandidateResult(path_type, error=e)
    return CandidateResult(path_type, length=length)


def check_finite(pose: Pose) -> Pose:
    """x / y / heading 必须是有限数"""
    if not (math.isfinite(pose.x) and math.isfinite(pose.y) and math.isfinite(pose.heading)):
        raise NonFinitePoseError(pose)
    return pose


def check_distance(start: Pose, end: Pose, r: float, config: DubinsConfig = DEFAULT_CONFIG) -> float:
    """
    前提条件: 两位姿距离 >= 3r (含边界, 见 DubinsConfig.distance_tolerance)
    :return: 两位姿的欧氏距离
    :raises DistanceTooShortError:
    """
    dist = start.distance_to(end)
    min_dist = config.min_distance(r)
    if not dist >= min_dist - config.distance_slack(r):
        raise DistanceTooShortError(dist, r, min_dist)
    return dist


def solve_dubins(start: Pose, end: Pose, turn_radius: float,
                 config: Optional[DubinsConfig] = None,
                 observer: Optional[ICostObserver] = None) -> DubinsSolution:
    """
    计算四种候选路径, 返回最短的一条。
    单个候选失败 (例如内切线不存在) 会被忽略; 只有四个全部失败才抛出异常。

    :raises InvalidTurnRadiusError: r <= 0
    :raises NonFinitePoseError: 位姿含 NaN / inf
    :raises DistanceTooShortError: 距离 < 3r
    :raises DubinsError: 四个候选全部失败时, 抛出第一个候选的错误
    """
    if config is None:
        config = DEFAULT_CONFIG
    if observer is None:
        observer = EfficientObserver()

    r = validate_turn_radius(turn_radius)
    try:
        check_finite(start)
        check_finite(end)
        dist = check_distance(start, end, r, config)
    except (NonFinitePoseError, DistanceTooShortError) as e:
        observer.log(str(e), 'ERROR', {'start': start, 'end': end, 'r': r})
        raise

    observer.log("Solving Dubins pair", 'DEBUG', {'start': start, 'end': end, 'r': r, 'dist': dist})

    results = []
    for path_type in PATH_TYPES:
        result = evaluate_candidate(path_type, start, end, r, config)
        observer.record_candidate(result.path_type, result.length, result.error)
        results.append(result)

    feasible = [c for c in results if c.ok]
    if not feasible:
        observer.log(f"No feasible Dubins candidate: {results[0].error}", 'ERROR', {'start': start, 'end': end, 'r': r})
        raise results[0].error

    best = min(feasible, key=lambda c: c.length)
    observer.log(f"Best candidate {best.path_type}: L={best.length:.6f}", 'DEBUG')
    return DubinsSolution(best.length, best.path_type, tuple(results))


def dubins_path_length(start: Pose, end: Pose, turn_radius: float,
                       config: Optional[DubinsConfig] = None,
                       observer: Optional[ICostObserver] = None) -> float:
    """Shortest Dubins path length from ``start`` to ``end``. Raises DubinsError on failure."""
    return solve_dubins(start, end, turn_radius, config, observer).length


def path_length_or_sentinel(start: Pose, end: Pose, turn_radius: float,
                            config: Optional[DubinsConfig] = None,
                            observer: Optional[ICostObserver] = None) -> float:
    """
    旧接口: 失败时返回 FAILURE_LENGTH (-1.0) 而不是抛出异常。
    诊断信息通过 observer 输出。
    """
    if observer is None:
        observer = EfficientObserver()
    try:
        return dubins_path_length(start, end, turn_radius, config, observer)
    except DubinsError as e:
        observer.log(f"Dubins path length failed: {e}", 'WARN')
        return FAILURE_LENGTH
