from __future__ import annotations

from typing import Protocol

import numpy as np

from .chromosome import Chromosome


class CrossoverMethod(Protocol):
    def crossover(self, father: Chromosome, mother: Chromosome, rng: np.random.Generator) -> Chromosome:
        ...


class UniformCrossover:
    """Each gene comes from the father or the mother with equal odds."""

    def crossover(self, father: Chromosome, mother: Chromosome, rng: np.random.Generator) -> Chromosome:
        if len(father) != len(mother):
            raise ValueError(f"parents differ in length: {len(father)} != {len(mother)}")
        from_father = rng.random(len(father)) < 0.5
        return Chromosome(np.where(from_father, father.genes, mother.genes))
