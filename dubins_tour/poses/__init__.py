# dubins_tour/poses/__init__.py

from .generator import PoseGenerator, RandomPoseError

__all__ = ["PoseGenerator", "RandomPoseError"]
