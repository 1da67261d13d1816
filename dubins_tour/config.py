# [关键] 全局配置定义

# dubins_tour/config.py
import math
from dataclasses import dataclass

from dubins_tour.errors import InvalidTurnRadiusError

# ATSP 邻接矩阵中 "永远不要走" 的边 (对角线 / 不可行边)
MAX_EDGE_COST = 999999.0

# 旧接口的失败返回值, 任何合法长度都 >= 0
FAILURE_LENGTH = -1.0


@dataclass
class DubinsConfig:
    """
    Dubins 路径长度求解的数值配置
    """
    # --- 1. 几何前提 ---
    min_distance_factor: float = 3.0   # 两位姿距离必须 >= factor * r

    # --- 2. 容差策略 ---
    distance_tolerance: float = 1e-9   # 相对容差, 乘以 max(1, r)
    trig_tolerance: float = 1e-12      # asin/acos 参数允许超出 [-1, 1] 的量 (会被截断)
    coincidence_tolerance: float = 1e-12  # 两点距离小于该值视为重合
    sweep_tolerance: float = 1e-9      # 扫角距离 2*pi 小于该值视为 0 (舍入造成的整圈)

    # --- 3. 代价矩阵 ---
    max_edge_cost: float = MAX_EDGE_COST

    def __post_init__(self):
        self.validate()

    def validate(self):
        """参数检查; 修改字段后可以再次调用"""
        if self.min_distance_factor < 2.0:
            # 内切线至少需要 d >= 2r
            raise ValueError("min_distance_factor must be >= 2.0")
        if self.distance_tolerance < 0 or self.trig_tolerance < 0 or self.coincidence_tolerance < 0 \
                or self.sweep_tolerance < 0:
            raise ValueError("tolerances must be non-negative")

    def min_distance(self, turn_radius: float) -> float:
        return self.min_distance_factor * turn_radius

    def distance_slack(self, turn_radius: float) -> float:
        return self.distance_tolerance * max(1.0, turn_radius)


DEFAULT_CONFIG = DubinsConfig()


def validate_turn_radius(turn_radius: float) -> float:
    """r 必须是正的有限数"""
    try:
        r = float(turn_radius)
    except (TypeError, ValueError):
        raise InvalidTurnRadiusError(f"turn radius must be a number, got {turn_radius!r}")
    if not math.isfinite(r) or r <= 0.0:
        raise InvalidTurnRadiusError(f"turn radius must be positive and finite, got {r}")
    return r
