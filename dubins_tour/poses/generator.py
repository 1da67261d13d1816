# dubins_tour/poses/generator.py
import math
from typing import List, Optional

import numpy as np

from dubins_tour.config import DEFAULT_CONFIG, DubinsConfig, validate_turn_radius
from dubins_tour.types import Pose


class RandomPoseError(RuntimeError):
    """在尝试次数内无法放下足够多的位姿"""
    pass


class PoseGenerator:
    """
    随机位姿生成器
    在矩形区域内采样位姿, 保证任意两点距离 >= min_distance_factor * r
    (拒绝采样)
    """

    def __init__(
        self,
        width: float = 100.0,
        height: float = 100.0,
        max_attempts: int = 10000,
        seed: int = None
    ):
        if width <= 0 or height <= 0:
            raise ValueError("area must have positive width and height")
        self.width = width
        self.height = height
        self.max_attempts = max_attempts
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def generate(self, count: int, turn_radius: float,
                 config: Optional[DubinsConfig] = None) -> List[Pose]:
        if config is None:
            config = DEFAULT_CONFIG
        r = validate_turn_radius(turn_radius)
        min_dist = config.min_distance(r)

        poses: List[Pose] = []
        attempts = 0
        while len(poses) < count:
            attempts += 1
            if attempts > self.max_attempts:
                raise RandomPoseError(
                    f"placed only {len(poses)}/{count} poses with separation {min_dist:.3f} "
                    f"in {self.width}x{self.height} after {self.max_attempts} attempts"
                )
            candidate = self._random_pose()
            if all(candidate.distance_to(p) >= min_dist for p in poses):
                poses.append(candidate)
        return poses

    def _random_pose(self) -> Pose:
        x = float(self.rng.uniform(0.0, self.width))
        y = float(self.rng.uniform(0.0, self.height))
        heading = float(self.rng.uniform(-math.pi, math.pi))
        return Pose(x, y, heading)
