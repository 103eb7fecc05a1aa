from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Sequence

import numpy as np

from .individual import Individual


@dataclass(frozen=True)
class Statistics:
    size: int
    min_fitness: float
    max_fitness: float
    avg_fitness: float
    median_fitness: float

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> "Statistics":
        if not population:
            return cls(0, 0.0, 0.0, 0.0, 0.0)
        fitness = np.array([ind.fitness() for ind in population], dtype=np.float64)
        return cls(
            size=len(population),
            min_fitness=float(fitness.min()),
            max_fitness=float(fitness.max()),
            avg_fitness=float(fitness.mean()),
            median_fitness=float(np.median(fitness)),
        )

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
