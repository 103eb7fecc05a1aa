from __future__ import annotations

from typing import List

import numpy as np

from ..ga import Chromosome
from ..nn import LayerTopology, Network
from .eyes import Eyes


class Brain:
    """Network sized after the eyes: cells -> hidden -> (speed, rotation)."""

    __slots__ = ("nn",)

    def __init__(self, nn: Network) -> None:
        self.nn = nn

    @staticmethod
    def topology(eyes: Eyes, hidden_scale: int = 2) -> List[LayerTopology]:
        return [
            LayerTopology(eyes.cells),
            LayerTopology(hidden_scale * eyes.cells),
            LayerTopology(2),
        ]

    @classmethod
    def random(cls, rng: np.random.Generator, eyes: Eyes, hidden_scale: int = 2) -> "Brain":
        return cls(Network.random(cls.topology(eyes, hidden_scale), rng))

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, eyes: Eyes, hidden_scale: int = 2) -> "Brain":
        return cls(Network.from_weights(cls.topology(eyes, hidden_scale), chromosome))

    def as_chromosome(self) -> Chromosome:
        return Chromosome.from_iterable(self.nn.weights())

    def react(self, vision: np.ndarray) -> np.ndarray:
        return self.nn.propagate(vision)
