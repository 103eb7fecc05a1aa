from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from ..core.config import SimulationConfig
from .animal import Animal
from .food import Food


@dataclass
class World:
    animals: List[Animal] = field(default_factory=list)
    foods: List[Food] = field(default_factory=list)

    @classmethod
    def random(cls, rng: np.random.Generator, config: SimulationConfig) -> "World":
        animals = [Animal.random(rng, config) for _ in range(config.world.animals)]
        foods = [Food.random(rng) for _ in range(config.world.foods)]
        return cls(animals=animals, foods=foods)

    def food_positions(self) -> np.ndarray:
        return np.array([food.position for food in self.foods], dtype=np.float64).reshape(-1, 2)

    def snapshot(self) -> Dict[str, list]:
        return {
            "animals": [
                {
                    "position": [float(a.position[0]), float(a.position[1])],
                    "heading": float(a.heading),
                    "speed": float(a.speed),
                }
                for a in self.animals
            ],
            "foods": [
                {
                    "position": [float(f.position[0]), float(f.position[1])],
                    "color": f.color,
                }
                for f in self.foods
            ],
        }
