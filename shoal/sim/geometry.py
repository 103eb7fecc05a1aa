"""
Angle and position arithmetic on the unit torus.
"""

from __future__ import annotations

import math

import numpy as np

TAU = 2.0 * math.pi


def wrap_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    if -math.pi < angle <= math.pi:
        return angle
    offset = math.fmod(math.pi - angle, TAU)
    if offset < 0.0:
        offset += TAU
    wrapped = math.pi - offset
    return wrapped + TAU if wrapped <= -math.pi else wrapped


def wrap_angles(angles: np.ndarray) -> np.ndarray:
    """Vectorised `wrap_angle`."""
    wrapped = math.pi - np.mod(math.pi - angles, TAU)
    return np.where(wrapped <= -math.pi, wrapped + TAU, wrapped)


def wrap_position(position: np.ndarray) -> np.ndarray:
    """Wrap every coordinate into [0, 1)."""
    wrapped = np.mod(position, 1.0)
    # np.mod rounds tiny negatives up to exactly 1.0
    return np.where(wrapped >= 1.0, 0.0, wrapped)


def heading_vector(heading: float) -> np.ndarray:
    """Unit step for a heading; heading 0 faces +y."""
    return np.array([-math.sin(heading), math.cos(heading)])


def random_position(rng: np.random.Generator) -> np.ndarray:
    return rng.random(2)
