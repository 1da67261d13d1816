# dubins_tour/errors.py


class DubinsError(ValueError):
    """Dubins 路径长度计算失败的基类"""
    pass


class DistanceTooShortError(DubinsError):
    """两位姿距离 < factor * r, 无法保证切线构造有效"""

    def __init__(self, distance: float, turn_radius: float, min_distance: float):
        self.distance = distance
        self.turn_radius = turn_radius
        self.min_distance = min_distance
        factor = min_distance / turn_radius
        super().__init__(
            f"distance must be at least {factor:g}*r: got {distance:.6g} < {min_distance:.6g} (r={turn_radius:.6g})"
        )


class DegenerateAngleError(DubinsError):
    """asin/acos 参数超出 [-1, 1]"""

    def __init__(self, path_type: str, value: float):
        self.path_type = path_type
        self.value = value
        super().__init__(f"angle out of range in case {path_type}: {value!r} not in [-1, 1]")


class CoincidentPosesError(DubinsError):
    """heading_between 的两个点重合"""
    pass


class InvalidTurnRadiusError(DubinsError):
    pass


class NonFinitePoseError(DubinsError):
    """位姿的 x / y / heading 含 NaN 或 inf"""

    def __init__(self, pose):
        self.pose = pose
        super().__init__(f"pose must have finite x, y and heading, got {pose}")
