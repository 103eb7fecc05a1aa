from __future__ import annotations

from typing import Protocol

import numpy as np

from .chromosome import Chromosome


class MutationMethod(Protocol):
    def mutate(self, chromosome: Chromosome, rng: np.random.Generator) -> None:
        ...


class GaussianMutation:
    """
    Nudge genes in place.

    Every gene draws a sign; with probability ``chance`` it is moved by
    ``sign * U(0, 1) * coeff``.
    """

    def __init__(self, chance: float, coeff: float) -> None:
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"chance must be within [0, 1], got {chance}")
        if coeff < 0.0:
            raise ValueError(f"coeff must be non-negative, got {coeff}")
        self.chance = float(chance)
        self.coeff = float(coeff)

    def mutate(self, chromosome: Chromosome, rng: np.random.Generator) -> None:
        n = len(chromosome)
        signs = np.where(rng.random(n) < 0.5, 1.0, -1.0)
        hit = rng.random(n) < self.chance
        magnitudes = rng.random(n)
        if self.coeff == 0.0:
            return
        chromosome.genes[hit] += signs[hit] * magnitudes[hit] * self.coeff

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance!r}, coeff={self.coeff!r})"
