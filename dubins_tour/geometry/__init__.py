# dubins_tour/geometry/__init__.py

from .angles import (
    LEFT,
    RIGHT,
    TWO_PI,
    angle_to_heading,
    ccw_sweep,
    cw_sweep,
    heading_between,
    heading_to_angle,
    turning_circle_center,
    wrap_angle,
)

__all__ = [
    "LEFT",
    "RIGHT",
    "TWO_PI",
    "angle_to_heading",
    "ccw_sweep",
    "cw_sweep",
    "heading_between",
    "heading_to_angle",
    "turning_circle_center",
    "wrap_angle",
]
