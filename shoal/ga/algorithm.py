from __future__ import annotations

from typing import List, Sequence, TypeVar

import numpy as np

from .crossover import CrossoverMethod
from .individual import Individual
from .mutation import MutationMethod
from .selection import SelectionMethod

I = TypeVar("I", bound=Individual)


class GeneticAlgorithm:
    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ) -> None:
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(self, population: Sequence[I], rng: np.random.Generator) -> List[I]:
        """
        Breed a new population of the same size.

        Each slot selects a father and a mother (possibly the same
        individual), crosses their chromosomes and mutates the child before
        handing it to the individual type's ``create``. Draws from ``rng``
        happen slot by slot in that order.
        """
        if not population:
            return []
        factory = type(population[0])
        children: List[I] = []
        for _ in range(len(population)):
            father = self.selection_method.select(population, rng)
            mother = self.selection_method.select(population, rng)
            child = self.crossover_method.crossover(father.chromosome(), mother.chromosome(), rng)
            self.mutation_method.mutate(child, rng)
            children.append(factory.create(child))
        return children
