# [入口] 负责暴露常用接口，让外部调用更简洁

# dubins_tour/__init__.py

from .types import Pose, State
from .config import DEFAULT_CONFIG, FAILURE_LENGTH, MAX_EDGE_COST, DubinsConfig
from .errors import (
    CoincidentPosesError,
    DegenerateAngleError,
    DistanceTooShortError,
    DubinsError,
    InvalidTurnRadiusError,
    NonFinitePoseError,
)
from .geometry.angles import heading_between, heading_to_angle, wrap_angle
from .planning.dubins import dubins_path_length, path_length_or_sentinel, solve_dubins
from .planning.tour import CostMatrix, build_cost_matrix, build_cost_matrix_for, tour_cost

__all__ = [
    "Pose",
    "State",
    "DEFAULT_CONFIG",
    "FAILURE_LENGTH",
    "MAX_EDGE_COST",
    "DubinsConfig",
    "CoincidentPosesError",
    "DegenerateAngleError",
    "DistanceTooShortError",
    "DubinsError",
    "InvalidTurnRadiusError",
    "NonFinitePoseError",
    "heading_between",
    "heading_to_angle",
    "wrap_angle",
    "dubins_path_length",
    "path_length_or_sentinel",
    "solve_dubins",
    "CostMatrix",
    "build_cost_matrix",
    "build_cost_matrix_for",
    "tour_cost",
]
