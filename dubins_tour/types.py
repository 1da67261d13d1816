# dubins_tour/types.py
import math
from dataclasses import dataclass


@dataclass
class State:
    """
    统一的车辆状态定义 (数学坐标系: 0 指向 +x, 逆时针为正)
    """
    x: float             # [m]
    y: float             # [m]
    theta_rad: float     # [rad]


@dataclass(frozen=True)
class Pose:
    """
    Dubins 位姿 (Configuration)
    heading 使用航向约定: 0 指向 +y (up), 逆时针为正, 任意实数 (内部会 wrap)
    """
    x: float             # [m]
    y: float             # [m]
    heading: float       # [rad]

    @property
    def position(self):
        return (self.x, self.y)

    def distance_to(self, other: "Pose") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    @classmethod
    def from_state(cls, state: State) -> "Pose":
        """State.theta_rad (0 at +x) -> heading (0 at +y)"""
        return cls(state.x, state.y, state.theta_rad - math.pi / 2.0)

    def to_state(self) -> State:
        return State(self.x, self.y, self.heading + math.pi / 2.0)
