"""
Field-of-view sensor.

Foods inside the cone of half-angle ``fov_angle / 2`` around the heading and
within ``fov_range`` add ``(fov_range - distance) / fov_range`` to the cell
covering their bearing. Cells run from the -fov_angle/2 edge to the
+fov_angle/2 edge; both edges are inside the cone.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..core.config import EyesConfig
from .food import Food
from .geometry import wrap_angles


class Eyes:
    __slots__ = ("fov_range", "fov_angle", "cells")

    def __init__(self, fov_range: float, fov_angle: float, cells: int) -> None:
        if fov_range <= 0.0:
            raise ValueError(f"fov_range must be positive, got {fov_range}")
        if fov_angle <= 0.0:
            raise ValueError(f"fov_angle must be positive, got {fov_angle}")
        if cells <= 0:
            raise ValueError(f"cells must be positive, got {cells}")
        self.fov_range = float(fov_range)
        self.fov_angle = float(fov_angle)
        self.cells = int(cells)

    @classmethod
    def from_config(cls, config: EyesConfig) -> "Eyes":
        return cls(config.fov_range, config.fov_angle, config.cells)

    def process_vision(self, position: np.ndarray, heading: float, foods: Sequence[Food]) -> np.ndarray:
        positions = np.array([food.position for food in foods], dtype=np.float64).reshape(-1, 2)
        return self.process_positions(position, heading, positions)

    def process_positions(self, position: np.ndarray, heading: float, food_positions: np.ndarray) -> np.ndarray:
        cells = np.zeros(self.cells, dtype=np.float64)
        if food_positions.shape[0] == 0:
            return cells

        delta = food_positions - position
        dist = np.hypot(delta[:, 0], delta[:, 1])
        # bearing measured from +y, relative to our own heading
        angle = wrap_angles(np.arctan2(-delta[:, 0], delta[:, 1]) - heading)

        half = self.fov_angle / 2.0
        seen = (dist <= self.fov_range) & (angle >= -half) & (angle <= half)
        if not seen.any():
            return cells

        idx = np.floor((angle[seen] + half) / self.fov_angle * self.cells).astype(np.intp)
        idx = np.clip(idx, 0, self.cells - 1)
        energy = (self.fov_range - dist[seen]) / self.fov_range
        np.add.at(cells, idx, energy)
        return cells

    def __repr__(self) -> str:
        return f"Eyes(fov_range={self.fov_range!r}, fov_angle={self.fov_angle!r}, cells={self.cells!r})"
