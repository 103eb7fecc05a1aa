# SPDX-License-Identifier: MIT
from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from ..core.config import SimulationConfig
from ..ga import GaussianMutation, GeneticAlgorithm, RouletteWheelSelection, Statistics, UniformCrossover
from .geometry import heading_vector, wrap_position
from .individual import AnimalIndividual
from .world import World

log = logging.getLogger(__name__)


class Simulation:
    """
    Steps a world of animals and evolves their brains every generation.

    ``age`` counts the steps since the last evolution. Once it exceeds
    ``generation_length`` the same ``step`` call breeds a new population and
    resets ``age`` to 0.
    """

    def __init__(self, world: World, ga: GeneticAlgorithm, config: Optional[SimulationConfig] = None) -> None:
        self.world = world
        self.ga = ga
        self.config = config or SimulationConfig()
        self.age = 0
        self.generation = 0
        self.last_statistics: Optional[Statistics] = None

    @classmethod
    def random(cls, rng: np.random.Generator, config: Optional[SimulationConfig] = None) -> "Simulation":
        config = config or SimulationConfig()
        world = World.random(rng, config)
        ga = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(config.evolution.mutation_chance, config.evolution.mutation_coeff),
        )
        return cls(world, ga, config)

    def step(self, rng: np.random.Generator) -> None:
        self._process_collisions(rng)
        self._process_brains()
        self._process_movements()

        self.age += 1
        if self.age > self.config.evolution.generation_length:
            self._evolve(rng)

    def world_snapshot(self) -> Dict[str, list]:
        return self.world.snapshot()

    # ----- passes -----
    def _process_collisions(self, rng: np.random.Generator) -> None:
        foods = self.world.foods
        if not foods:
            return
        positions = self.world.food_positions()
        radius = self.config.physics.eat_radius
        for animal in self.world.animals:
            delta = positions - animal.position
            dist = np.hypot(delta[:, 0], delta[:, 1])
            for idx in np.flatnonzero(dist <= radius):
                animal.satiation += 1
                foods[idx].relocate(rng)
                positions[idx] = foods[idx].position

    def _process_brains(self) -> None:
        physics = self.config.physics
        positions = self.world.food_positions()
        for animal in self.world.animals:
            vision = animal.eyes.process_positions(animal.position, animal.heading, positions)
            response = animal.brain.react(vision)

            # relative adjustments; the brain never sees its own speed or heading
            speed = float(np.clip(response[0], -physics.speed_accel, physics.speed_accel))
            rotation = float(np.clip(response[1], -physics.rotation_accel, physics.rotation_accel))

            animal.speed = float(np.clip(animal.speed + speed, physics.speed_min, physics.speed_max))
            animal.heading = animal.heading + rotation

    def _process_movements(self) -> None:
        for animal in self.world.animals:
            animal.position = wrap_position(animal.position + heading_vector(animal.heading) * animal.speed)

    def _evolve(self, rng: np.random.Generator) -> None:
        self.age = 0

        population = [AnimalIndividual.from_animal(animal) for animal in self.world.animals]
        stats = Statistics.from_population(population)

        evolved = self.ga.evolve(population, rng)
        self.world.animals = [individual.into_animal(rng, self.config) for individual in evolved]

        for food in self.world.foods:
            food.relocate(rng)

        self.generation += 1
        self.last_statistics = stats
        log.info(
            "generation %d evolved: fitness min=%.0f max=%.0f avg=%.2f median=%.1f",
            self.generation,
            stats.min_fitness,
            stats.max_fitness,
            stats.avg_fitness,
            stats.median_fitness,
        )
