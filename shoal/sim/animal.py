from __future__ import annotations

import numpy as np

from ..core.config import SimulationConfig
from ..ga import Chromosome
from .brain import Brain
from .eyes import Eyes
from .geometry import random_position, wrap_angle


class Animal:
    __slots__ = ("position", "_heading", "speed", "eyes", "brain", "satiation")

    def __init__(
        self,
        position: np.ndarray,
        heading: float,
        speed: float,
        eyes: Eyes,
        brain: Brain,
        satiation: int = 0,
    ) -> None:
        self.position = np.asarray(position, dtype=np.float64)
        self._heading = wrap_angle(float(heading))
        self.speed = float(speed)
        self.eyes = eyes
        self.brain = brain
        self.satiation = int(satiation)

    @property
    def heading(self) -> float:
        return self._heading

    @heading.setter
    def heading(self, value: float) -> None:
        self._heading = wrap_angle(float(value))

    @classmethod
    def spawn(cls, rng: np.random.Generator, eyes: Eyes, brain: Brain, config: SimulationConfig) -> "Animal":
        """Fresh state around a given brain: random position, heading and speed."""
        position = random_position(rng)
        heading = rng.uniform(-np.pi, np.pi)
        speed = rng.uniform(config.physics.speed_min, config.physics.speed_max)
        return cls(position, heading, speed, eyes, brain)

    @classmethod
    def random(cls, rng: np.random.Generator, config: SimulationConfig) -> "Animal":
        eyes = Eyes.from_config(config.eyes)
        brain = Brain.random(rng, eyes, config.evolution.hidden_scale)
        return cls.spawn(rng, eyes, brain, config)

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, rng: np.random.Generator, config: SimulationConfig) -> "Animal":
        eyes = Eyes.from_config(config.eyes)
        brain = Brain.from_chromosome(chromosome, eyes, config.evolution.hidden_scale)
        return cls.spawn(rng, eyes, brain, config)

    def as_chromosome(self) -> Chromosome:
        # only the brain evolves
        return self.brain.as_chromosome()

    def __repr__(self) -> str:
        x, y = self.position
        return f"Animal(x={x:.4f}, y={y:.4f}, heading={self._heading:.3f}, speed={self.speed:.5f}, satiation={self.satiation})"
