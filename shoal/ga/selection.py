from __future__ import annotations

import logging
from typing import Protocol, Sequence, TypeVar

import numpy as np

from .individual import Individual

log = logging.getLogger(__name__)

I = TypeVar("I", bound=Individual)


class SelectionMethod(Protocol):
    def select(self, population: Sequence[I], rng: np.random.Generator) -> I:
        ...


class RouletteWheelSelection:
    """
    Fitness-proportionate selection.

    Individual i is picked with probability fitness_i / sum(fitness). When the
    whole population has zero fitness the wheel has no area, so the pick falls
    back to a uniform draw over the population.
    """

    def select(self, population: Sequence[I], rng: np.random.Generator) -> I:
        if not population:
            raise ValueError("cannot select from an empty population")

        fitness = np.array([ind.fitness() for ind in population], dtype=np.float64)
        if np.any(fitness < 0.0):
            raise ValueError("roulette wheel selection requires non-negative fitness")

        cumulative = np.cumsum(fitness)
        total = cumulative[-1]
        if total <= 0.0:
            log.debug("all %d individuals have zero fitness; selecting uniformly", len(population))
            return population[int(rng.integers(len(population)))]

        spin = rng.random() * total
        idx = int(np.searchsorted(cumulative, spin, side="right"))
        return population[min(idx, len(population) - 1)]
