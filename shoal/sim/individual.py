from __future__ import annotations

import numpy as np

from ..core.config import SimulationConfig
from ..ga import Chromosome
from .animal import Animal


class AnimalIndividual:
    """Genetic-algorithm view of an animal: satiation as fitness, brain weights as genes."""

    __slots__ = ("_fitness", "_chromosome")

    def __init__(self, fitness: float, chromosome: Chromosome) -> None:
        self._fitness = float(fitness)
        self._chromosome = chromosome

    @classmethod
    def create(cls, chromosome: Chromosome) -> "AnimalIndividual":
        return cls(0.0, chromosome)

    def fitness(self) -> float:
        return self._fitness

    def chromosome(self) -> Chromosome:
        return self._chromosome

    @classmethod
    def from_animal(cls, animal: Animal) -> "AnimalIndividual":
        return cls(animal.satiation, animal.as_chromosome())

    def into_animal(self, rng: np.random.Generator, config: SimulationConfig) -> Animal:
        return Animal.from_chromosome(self._chromosome, rng, config)
