from __future__ import annotations

from typing import Protocol, TypeVar

from .chromosome import Chromosome

I = TypeVar("I", bound="Individual")


class Individual(Protocol):
    """What the genetic algorithm needs from a member of the population."""

    def fitness(self) -> float:
        ...

    def chromosome(self) -> Chromosome:
        ...

    @classmethod
    def create(cls: type[I], chromosome: Chromosome) -> I:
        ...
