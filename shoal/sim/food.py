from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .geometry import random_position


@dataclass
class Food:
    position: np.ndarray
    color: str = "rgb(0, 0, 0)"

    @classmethod
    def random(cls, rng: np.random.Generator) -> "Food":
        r, g, b = (int(c) for c in rng.integers(0, 256, size=3))
        return cls(position=random_position(rng), color=f"rgb({r}, {g}, {b})")

    def relocate(self, rng: np.random.Generator) -> None:
        self.position = random_position(rng)
